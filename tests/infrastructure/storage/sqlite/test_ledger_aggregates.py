"""Report use cases read every stored row, however many there are."""

from datetime import UTC, date, datetime
from pathlib import Path

import pytest

from snackbooks.application.use_cases import GetLedgerSummaryUseCase, GetProfitReportUseCase
from snackbooks.core.entities import Order, PackageLineItem, PaymentState, ProductionConfig
from snackbooks.infrastructure.storage.sqlite.connection import get_transaction
from snackbooks.infrastructure.storage.sqlite.ledger_store import SQLiteLedgerStore
from snackbooks.infrastructure.storage.sqlite.material_store import SQLiteMaterialStore
from snackbooks.infrastructure.storage.sqlite.order_store import SQLiteOrderStore
from snackbooks.infrastructure.storage.sqlite.pricing_store import SQLitePricingStore

PAYMENTS = 1005
EXTRA_ORDERS = 500


@pytest.fixture
async def busy_books(db_pool: Path) -> Order:
    """One large order settled in many small payments, plus many empty orders."""
    order = await SQLiteOrderStore().create_order(
        Order(
            customer_name="Asha",
            delivery_date=date(2024, 3, 10),
            packages=[PackageLineItem(size=1000, quantity=1, unit_price=PAYMENTS * 10.0)],
            created_at=datetime(2024, 3, 1, 12, tzinfo=UTC),
        )
    )
    stamp = datetime(2024, 3, 1, 12, tzinfo=UTC).isoformat()

    async with get_transaction() as conn:
        await conn.executemany(
            """
            INSERT INTO income_entries (customer_name, amount, entry_date, order_id, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            [("Asha", 10.0, "2024-03-02", order.id, stamp)] * PAYMENTS,
        )
        await conn.executemany(
            """
            INSERT INTO expense_entries (item, amount, entry_date, created_at)
            VALUES (?, ?, ?, ?)
            """,
            [("Salt", 1.0, "2024-03-02", stamp)] * PAYMENTS,
        )
        await conn.executemany(
            """
            INSERT INTO orders (customer_name, delivery_date, created_at)
            VALUES (?, ?, ?)
            """,
            [("Walk-in", "2024-02-01", "2024-02-01T08:00:00+00:00")] * EXTRA_ORDERS,
        )
    return order


class TestStoresReturnEverything:
    async def test_unbounded_lists(self, busy_books):
        ledger = SQLiteLedgerStore()

        assert len(await ledger.list_income()) == PAYMENTS
        assert len(await ledger.list_expenses()) == PAYMENTS
        assert len(await SQLiteOrderStore().list_orders()) == EXTRA_ORDERS + 1

    async def test_explicit_limit_still_pages(self, busy_books):
        assert len(await SQLiteLedgerStore().list_income(limit=10)) == 10


class TestReportsOverFullHistory:
    async def test_ledger_summary_counts_every_payment(self, busy_books):
        use_case = GetLedgerSummaryUseCase(
            ledger_store=SQLiteLedgerStore(), order_store=SQLiteOrderStore()
        )
        result = await use_case.execute()

        assert result.totals.total_income == pytest.approx(PAYMENTS * 10.0)
        assert result.totals.total_expense == pytest.approx(PAYMENTS * 1.0)
        assert result.totals.profit == pytest.approx(PAYMENTS * 9.0)

        [summary] = [p for p in result.payments if p.order_id == busy_books.id]
        assert summary.status is PaymentState.PAID

    async def test_profit_report_counts_every_payment(self, busy_books):
        use_case = GetProfitReportUseCase(
            order_store=SQLiteOrderStore(),
            ledger_store=SQLiteLedgerStore(),
            material_store=SQLiteMaterialStore(),
            pricing_store=SQLitePricingStore(),
            config=ProductionConfig(),
            forecast_days=7,
        )
        report = await use_case.execute()

        assert report.analysis.order_count == EXTRA_ORDERS + 1
        assert report.analysis.total_paid == pytest.approx(PAYMENTS * 10.0)
        assert report.analysis.pending_amount == pytest.approx(0.0)
