"""Record Expense Use Case."""

import math
from datetime import date

from snackbooks.application.dto.mappers import expense_to_response
from snackbooks.application.dto.requests import RecordExpenseRequest
from snackbooks.application.dto.responses import ExpenseEntryResponse
from snackbooks.core.entities.ledger import ExpenseEntry
from snackbooks.core.exceptions import ValidationError
from snackbooks.core.interfaces.ledger_store import ILedgerStore


class RecordExpenseUseCase:
    """Validate and store an expense entry."""

    def __init__(self, ledger_store: ILedgerStore | None = None):
        self._ledger_store = ledger_store

    async def _get_ledger_store(self) -> ILedgerStore:
        if self._ledger_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_ledger_store

            self._ledger_store = await get_ledger_store()
        return self._ledger_store

    async def execute(self, request: RecordExpenseRequest) -> ExpenseEntry:
        item = request.item.strip()
        if not item:
            raise ValidationError("item", "Expense item is required")
        if not math.isfinite(request.amount) or request.amount <= 0:
            raise ValidationError("amount", "Amount must be greater than zero", request.amount)

        entry = ExpenseEntry(
            item=item,
            amount=request.amount,
            entry_date=request.entry_date or date.today(),
            is_extra=request.is_extra,
            remarks=(request.remarks or "").strip() or None,
        )
        return await (await self._get_ledger_store()).create_expense(entry)

    def to_response(self, result: ExpenseEntry) -> ExpenseEntryResponse:
        """Convert result to API response."""
        return expense_to_response(result)
