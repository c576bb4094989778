"""Tests for income and expense use cases."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from snackbooks.application.dto.requests import RecordExpenseRequest, RecordIncomeRequest
from snackbooks.application.use_cases import (
    RecordExpenseUseCase,
    RecordIncomeUseCase,
    ToggleExpenseExtraUseCase,
)
from snackbooks.core.entities import ExpenseEntry, IncomeEntry, PaymentMethod
from snackbooks.core.exceptions import ExpenseNotFoundError, OrderNotFoundError, ValidationError


@pytest.fixture
def mock_ledger_store():
    store = AsyncMock()

    async def create_income(entry: IncomeEntry) -> IncomeEntry:
        entry.id = 1
        return entry

    async def create_expense(entry: ExpenseEntry) -> ExpenseEntry:
        entry.id = 1
        return entry

    async def update_expense(entry: ExpenseEntry) -> ExpenseEntry:
        return entry

    store.create_income.side_effect = create_income
    store.create_expense.side_effect = create_expense
    store.update_expense.side_effect = update_expense
    return store


@pytest.fixture
def mock_order_store(sample_order):
    store = AsyncMock()
    store.get_order.return_value = sample_order
    return store


class TestRecordIncomeUseCase:
    @pytest.fixture
    def use_case(self, mock_ledger_store, mock_order_store):
        return RecordIncomeUseCase(ledger_store=mock_ledger_store, order_store=mock_order_store)

    async def test_record_linked_payment(self, use_case, mock_order_store):
        request = RecordIncomeRequest(
            customer_name="Asha",
            amount=100.0,
            order_id=1,
            order_size=" 450g mixed ",
            payment_method=PaymentMethod.UPI,
        )
        entry = await use_case.execute(request)

        mock_order_store.get_order.assert_awaited_once_with(1)
        assert entry.id == 1
        assert entry.order_id == 1
        assert entry.order_size == "450g mixed"
        assert entry.payment_method is PaymentMethod.UPI
        assert entry.entry_date == date.today()

    async def test_unlinked_income_skips_order_lookup(self, use_case, mock_order_store):
        entry = await use_case.execute(RecordIncomeRequest(customer_name="Walk-in", amount=50))

        mock_order_store.get_order.assert_not_called()
        assert entry.order_id is None
        assert entry.remarks is None

    @pytest.mark.parametrize("amount", [0, -10, float("nan")])
    async def test_non_positive_amount_rejected(self, use_case, mock_ledger_store, amount):
        with pytest.raises(ValidationError):
            await use_case.execute(RecordIncomeRequest(customer_name="Asha", amount=amount))
        mock_ledger_store.create_income.assert_not_called()

    async def test_blank_customer_rejected(self, use_case):
        with pytest.raises(ValidationError):
            await use_case.execute(RecordIncomeRequest(customer_name=" ", amount=10))

    async def test_unknown_order_rejected(self, use_case, mock_order_store, mock_ledger_store):
        mock_order_store.get_order.return_value = None

        with pytest.raises(OrderNotFoundError):
            await use_case.execute(
                RecordIncomeRequest(customer_name="Asha", amount=10, order_id=404)
            )
        mock_ledger_store.create_income.assert_not_called()


class TestRecordExpenseUseCase:
    @pytest.fixture
    def use_case(self, mock_ledger_store):
        return RecordExpenseUseCase(ledger_store=mock_ledger_store)

    async def test_record_extra_expense(self, use_case):
        entry = await use_case.execute(
            RecordExpenseRequest(
                item=" Tea ", amount=40, is_extra=True, entry_date=date(2024, 3, 1)
            )
        )
        assert entry.item == "Tea"
        assert entry.is_extra is True
        assert entry.entry_date == date(2024, 3, 1)

    async def test_blank_item_rejected(self, use_case):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(RecordExpenseRequest(item="", amount=40))
        assert exc_info.value.details["field"] == "item"

    async def test_zero_amount_rejected(self, use_case):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(RecordExpenseRequest(item="Gas", amount=0))
        assert exc_info.value.details["field"] == "amount"


class TestToggleExpenseExtraUseCase:
    async def test_flag_flips(self, mock_ledger_store, sample_expense):
        mock_ledger_store.get_expense.return_value = sample_expense
        use_case = ToggleExpenseExtraUseCase(ledger_store=mock_ledger_store)

        result = await use_case.execute(1)

        assert result.is_extra is True
        assert sample_expense.is_extra is False
        saved = mock_ledger_store.update_expense.call_args[0][0]
        assert saved.id == 1
        assert saved.is_extra is True

    async def test_missing_expense(self, mock_ledger_store):
        mock_ledger_store.get_expense.return_value = None

        with pytest.raises(ExpenseNotFoundError):
            await ToggleExpenseExtraUseCase(ledger_store=mock_ledger_store).execute(5)
        mock_ledger_store.update_expense.assert_not_called()
