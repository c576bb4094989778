"""Toggle Order Status Use Case: pending <-> completed."""

from snackbooks.application.dto.mappers import order_to_response
from snackbooks.application.dto.responses import OrderResponse
from snackbooks.config import get_logger
from snackbooks.core.entities.order import Order
from snackbooks.core.exceptions import OrderNotFoundError
from snackbooks.core.interfaces.order_store import IOrderStore

logger = get_logger(__name__)


class ToggleOrderStatusUseCase:
    """Flip an order between pending and completed."""

    def __init__(self, order_store: IOrderStore | None = None):
        self._order_store = order_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def execute(self, order_id: int) -> Order:
        store = await self._get_order_store()

        order = await store.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        new_status = order.status.toggled()
        updated = await store.update_status(order_id, new_status)
        if updated is None:
            raise OrderNotFoundError(order_id)

        logger.info(
            "order_status_toggled",
            order_id=order_id,
            old_status=order.status.value,
            new_status=new_status.value,
        )
        return updated

    def to_response(self, result: Order) -> OrderResponse:
        """Convert result to API response."""
        return order_to_response(result)
