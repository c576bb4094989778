"""SQLite implementation of order storage."""

import aiosqlite

from snackbooks.config import get_logger
from snackbooks.core.entities.order import Order, OrderStatus, PackageLineItem
from snackbooks.core.interfaces.order_store import IOrderStore
from snackbooks.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from snackbooks.infrastructure.storage.sqlite.rows import parse_date, parse_datetime, sql_limit

logger = get_logger(__name__)


class SQLiteOrderStore(IOrderStore):
    """Order headers in `orders`, line items in `order_packages`."""

    async def create_order(self, order: Order) -> Order:
        """Create an order with all its package line items."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO orders (
                    customer_name, delivery_date, price_type,
                    total_weight, total_packets, total_amount,
                    status, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    order.customer_name,
                    order.delivery_date.isoformat(),
                    order.price_type,
                    order.total_weight,
                    order.total_packets,
                    order.total_amount,
                    order.status.value,
                    order.created_at.isoformat(),
                ),
            )
            order.id = cursor.lastrowid

            await conn.executemany(
                """
                INSERT INTO order_packages (order_id, size, quantity, unit_price)
                VALUES (?, ?, ?, ?)
                """,
                [(order.id, p.size, p.quantity, p.unit_price) for p in order.packages],
            )

        logger.info(
            "order_created",
            order_id=order.id,
            packages=len(order.packages),
            total_amount=order.total_amount,
        )
        return order

    async def get_order(self, order_id: int) -> Order | None:
        """Get order by ID with line items."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM orders WHERE id = ?", (order_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            packages = await self._load_packages(conn, order_id)
        return self._row_to_order(row, packages)

    async def list_orders(self, limit: int | None = None, offset: int = 0) -> list[Order]:
        """List orders, newest first. No limit returns every order."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM orders
                ORDER BY created_at DESC, id DESC
                LIMIT ? OFFSET ?
                """,
                (sql_limit(limit), offset),
            )
            rows = await cursor.fetchall()

            orders = []
            for row in rows:
                packages = await self._load_packages(conn, row["id"])
                orders.append(self._row_to_order(row, packages))
        return orders

    async def update_status(self, order_id: int, status: OrderStatus) -> Order | None:
        """Set the order status. Returns None if the order does not exist."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE orders SET status = ? WHERE id = ?",
                (status.value, order_id),
            )
            if cursor.rowcount == 0:
                return None

        logger.info("order_status_updated", order_id=order_id, status=status.value)
        return await self.get_order(order_id)

    async def delete_order(self, order_id: int) -> bool:
        """Delete an order and its line items."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM orders WHERE id = ?", (order_id,))
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("order_deleted", order_id=order_id)
        return deleted

    @staticmethod
    async def _load_packages(
        conn: aiosqlite.Connection, order_id: int
    ) -> list[PackageLineItem]:
        cursor = await conn.execute(
            "SELECT * FROM order_packages WHERE order_id = ? ORDER BY size, id",
            (order_id,),
        )
        rows = await cursor.fetchall()
        return [
            PackageLineItem(
                size=r["size"],
                quantity=r["quantity"],
                unit_price=float(r["unit_price"]),
            )
            for r in rows
        ]

    @staticmethod
    def _row_to_order(row: aiosqlite.Row, packages: list[PackageLineItem]) -> Order:
        """Convert a database row to an Order entity."""
        return Order(
            id=row["id"],
            customer_name=row["customer_name"],
            delivery_date=parse_date(row["delivery_date"]),
            price_type=row["price_type"],
            packages=packages,
            status=OrderStatus(row["status"]),
            created_at=parse_datetime(row["created_at"]),
        )
