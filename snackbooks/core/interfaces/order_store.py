"""Abstract interface for order storage."""

from abc import ABC, abstractmethod

from snackbooks.core.entities.order import Order, OrderStatus


class IOrderStore(ABC):
    """Interface for order persistence."""

    @abstractmethod
    async def create_order(self, order: Order) -> Order:
        """Create an order with all its package line items."""
        pass

    @abstractmethod
    async def get_order(self, order_id: int) -> Order | None:
        """Get order by ID with line items."""
        pass

    @abstractmethod
    async def list_orders(self, limit: int | None = None, offset: int = 0) -> list[Order]:
        """List orders, newest first. No limit returns every order."""
        pass

    @abstractmethod
    async def update_status(self, order_id: int, status: OrderStatus) -> Order | None:
        """Set the order status. Returns None if the order does not exist."""
        pass

    @abstractmethod
    async def delete_order(self, order_id: int) -> bool:
        """Delete an order. Returns False if it did not exist."""
        pass
