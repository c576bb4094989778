"""Abstract interface for income and expense storage."""

from abc import ABC, abstractmethod

from snackbooks.core.entities.ledger import ExpenseEntry, IncomeEntry


class ILedgerStore(ABC):
    """Interface for income and expense entry persistence."""

    # Income

    @abstractmethod
    async def create_income(self, entry: IncomeEntry) -> IncomeEntry:
        """Record an income entry."""
        pass

    @abstractmethod
    async def list_income(self, limit: int | None = None, offset: int = 0) -> list[IncomeEntry]:
        """List income entries, newest first. No limit returns every entry."""
        pass

    @abstractmethod
    async def delete_income(self, entry_id: int) -> bool:
        """Delete an income entry. Returns False if it did not exist."""
        pass

    # Expenses

    @abstractmethod
    async def create_expense(self, entry: ExpenseEntry) -> ExpenseEntry:
        """Record an expense entry."""
        pass

    @abstractmethod
    async def get_expense(self, expense_id: int) -> ExpenseEntry | None:
        """Get an expense entry by ID."""
        pass

    @abstractmethod
    async def list_expenses(
        self, limit: int | None = None, offset: int = 0
    ) -> list[ExpenseEntry]:
        """List expense entries, newest first. No limit returns every entry."""
        pass

    @abstractmethod
    async def update_expense(self, entry: ExpenseEntry) -> ExpenseEntry:
        """Persist the mutable fields of an expense entry."""
        pass

    @abstractmethod
    async def delete_expense(self, expense_id: int) -> bool:
        """Delete an expense entry. Returns False if it did not exist."""
        pass
