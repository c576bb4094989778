"""Toggle Expense Extra Use Case: move an expense in or out of profit."""

from snackbooks.application.dto.mappers import expense_to_response
from snackbooks.application.dto.responses import ExpenseEntryResponse
from snackbooks.config import get_logger
from snackbooks.core.entities.ledger import ExpenseEntry
from snackbooks.core.exceptions import ExpenseNotFoundError
from snackbooks.core.interfaces.ledger_store import ILedgerStore

logger = get_logger(__name__)


class ToggleExpenseExtraUseCase:
    """Flip the is_extra flag of an expense."""

    def __init__(self, ledger_store: ILedgerStore | None = None):
        self._ledger_store = ledger_store

    async def _get_ledger_store(self) -> ILedgerStore:
        if self._ledger_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_ledger_store

            self._ledger_store = await get_ledger_store()
        return self._ledger_store

    async def execute(self, expense_id: int) -> ExpenseEntry:
        store = await self._get_ledger_store()

        entry = await store.get_expense(expense_id)
        if entry is None:
            raise ExpenseNotFoundError(expense_id)

        updated = await store.update_expense(entry.model_copy(update={"is_extra": not entry.is_extra}))
        logger.info("expense_extra_toggled", expense_id=expense_id, is_extra=updated.is_extra)
        return updated

    def to_response(self, result: ExpenseEntry) -> ExpenseEntryResponse:
        """Convert result to API response."""
        return expense_to_response(result)
