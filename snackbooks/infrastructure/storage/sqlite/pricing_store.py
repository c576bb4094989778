"""SQLite implementation of selling-price storage."""

from datetime import UTC, datetime

from snackbooks.config import get_logger
from snackbooks.core.entities.pricing import PricingTable
from snackbooks.core.interfaces.pricing_store import IPricingStore
from snackbooks.core.services.pricing import coerce_pricing_table
from snackbooks.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLitePricingStore(IPricingStore):
    """One row per (variant, size) in `selling_prices`."""

    async def load(self) -> PricingTable:
        """Load stored prices; the built-in defaults when none exist."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT variant, size, price FROM selling_prices ORDER BY variant, size"
            )
            rows = await cursor.fetchall()

        if not rows:
            logger.debug("pricing_defaults_used")
            return PricingTable.with_defaults()

        raw: dict[str, dict[int, float]] = {}
        for row in rows:
            raw.setdefault(row["variant"], {})[row["size"]] = row["price"]
        return coerce_pricing_table(raw)

    async def save(self, table: PricingTable) -> None:
        """Replace all stored prices with the table contents."""
        now = datetime.now(UTC).isoformat()
        rows = [
            (variant, size, price, now)
            for variant, column in table.prices.items()
            for size, price in column.items()
        ]

        async with get_transaction() as conn:
            await conn.execute("DELETE FROM selling_prices")
            await conn.executemany(
                """
                INSERT INTO selling_prices (variant, size, price, updated_at)
                VALUES (?, ?, ?, ?)
                """,
                rows,
            )

        logger.info("pricing_table_saved", entries=len(rows), variants=len(table.prices))
