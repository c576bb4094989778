"""SQLite implementation of income and expense storage."""

import aiosqlite

from snackbooks.config import get_logger
from snackbooks.core.entities.ledger import ExpenseEntry, IncomeEntry, PaymentMethod
from snackbooks.core.exceptions import ExpenseNotFoundError
from snackbooks.core.interfaces.ledger_store import ILedgerStore
from snackbooks.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from snackbooks.infrastructure.storage.sqlite.rows import parse_date, parse_datetime, sql_limit

logger = get_logger(__name__)


class SQLiteLedgerStore(ILedgerStore):
    """Income in `income_entries`, expenses in `expense_entries`."""

    # Income

    async def create_income(self, entry: IncomeEntry) -> IncomeEntry:
        """Record an income entry."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO income_entries (
                    customer_name, amount, entry_date, order_id,
                    order_size, payment_method, remarks, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    entry.customer_name,
                    entry.amount,
                    entry.entry_date.isoformat(),
                    entry.order_id,
                    entry.order_size,
                    entry.payment_method.value,
                    entry.remarks,
                    entry.created_at.isoformat(),
                ),
            )
            entry.id = cursor.lastrowid

        logger.info(
            "income_recorded",
            entry_id=entry.id,
            amount=entry.amount,
            order_id=entry.order_id,
        )
        return entry

    async def list_income(self, limit: int | None = None, offset: int = 0) -> list[IncomeEntry]:
        """List income entries, newest first. No limit returns every entry."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM income_entries
                ORDER BY entry_date DESC, id DESC
                LIMIT ? OFFSET ?
                """,
                (sql_limit(limit), offset),
            )
            rows = await cursor.fetchall()
        return [self._row_to_income(r) for r in rows]

    async def delete_income(self, entry_id: int) -> bool:
        """Delete an income entry."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM income_entries WHERE id = ?", (entry_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("income_deleted", entry_id=entry_id)
        return deleted

    # Expenses

    async def create_expense(self, entry: ExpenseEntry) -> ExpenseEntry:
        """Record an expense entry."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO expense_entries (
                    item, amount, entry_date, is_extra, remarks, created_at
                ) VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    entry.item,
                    entry.amount,
                    entry.entry_date.isoformat(),
                    int(entry.is_extra),
                    entry.remarks,
                    entry.created_at.isoformat(),
                ),
            )
            entry.id = cursor.lastrowid

        logger.info(
            "expense_recorded",
            expense_id=entry.id,
            amount=entry.amount,
            is_extra=entry.is_extra,
        )
        return entry

    async def get_expense(self, expense_id: int) -> ExpenseEntry | None:
        """Get an expense entry by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM expense_entries WHERE id = ?", (expense_id,)
            )
            row = await cursor.fetchone()
        return self._row_to_expense(row) if row else None

    async def list_expenses(self, limit: int | None = None, offset: int = 0) -> list[ExpenseEntry]:
        """List expense entries, newest first. No limit returns every entry."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM expense_entries
                ORDER BY entry_date DESC, id DESC
                LIMIT ? OFFSET ?
                """,
                (sql_limit(limit), offset),
            )
            rows = await cursor.fetchall()
        return [self._row_to_expense(r) for r in rows]

    async def update_expense(self, entry: ExpenseEntry) -> ExpenseEntry:
        """Persist the extra flag and remarks of an existing expense."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE expense_entries SET is_extra = ?, remarks = ? WHERE id = ?",
                (int(entry.is_extra), entry.remarks, entry.id),
            )
            if cursor.rowcount == 0:
                raise ExpenseNotFoundError(entry.id)

        logger.info("expense_updated", expense_id=entry.id, is_extra=entry.is_extra)
        return entry

    async def delete_expense(self, expense_id: int) -> bool:
        """Delete an expense entry."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM expense_entries WHERE id = ?", (expense_id,)
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("expense_deleted", expense_id=expense_id)
        return deleted

    @staticmethod
    def _row_to_income(row: aiosqlite.Row) -> IncomeEntry:
        """Convert a database row to an IncomeEntry entity."""
        try:
            method = PaymentMethod(row["payment_method"])
        except ValueError:
            method = PaymentMethod.OTHER

        return IncomeEntry(
            id=row["id"],
            customer_name=row["customer_name"],
            amount=float(row["amount"]),
            entry_date=parse_date(row["entry_date"]),
            order_id=row["order_id"],
            order_size=row["order_size"],
            payment_method=method,
            remarks=row["remarks"],
            created_at=parse_datetime(row["created_at"]),
        )

    @staticmethod
    def _row_to_expense(row: aiosqlite.Row) -> ExpenseEntry:
        """Convert a database row to an ExpenseEntry entity."""
        return ExpenseEntry(
            id=row["id"],
            item=row["item"],
            amount=float(row["amount"]),
            entry_date=parse_date(row["entry_date"]),
            is_extra=bool(row["is_extra"]),
            remarks=row["remarks"],
            created_at=parse_datetime(row["created_at"]),
        )
