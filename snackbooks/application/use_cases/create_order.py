"""Create Order Use Case: validate, price and persist a customer order."""

from snackbooks.application.dto.mappers import order_to_response
from snackbooks.application.dto.requests import CreateOrderRequest
from snackbooks.application.dto.responses import OrderResponse
from snackbooks.config import get_logger
from snackbooks.core.entities.order import Order
from snackbooks.core.entities.pricing import normalize_variant
from snackbooks.core.exceptions import EmptyOrderError, ValidationError
from snackbooks.core.interfaces.order_store import IOrderStore
from snackbooks.core.interfaces.pricing_store import IPricingStore
from snackbooks.core.services.order_summary import build_line_items

logger = get_logger(__name__)


class CreateOrderUseCase:
    """
    Create an order from a packet selection.

    Unit prices are frozen onto the line items at creation; later
    price changes never touch existing orders.
    """

    def __init__(
        self,
        order_store: IOrderStore | None = None,
        pricing_store: IPricingStore | None = None,
    ):
        self._order_store = order_store
        self._pricing_store = pricing_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def _get_pricing_store(self) -> IPricingStore:
        if self._pricing_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_pricing_store

            self._pricing_store = await get_pricing_store()
        return self._pricing_store

    async def execute(self, request: CreateOrderRequest) -> Order:
        """Execute create order use case."""
        customer = request.customer_name.strip()
        if not customer:
            raise ValidationError("customer_name", "Customer name is required")

        variant = normalize_variant(request.price_type)
        table = await (await self._get_pricing_store()).load()

        lines = build_line_items(request.packages, variant, table)
        if not lines:
            raise EmptyOrderError()

        for line in lines:
            if table.stored_price(variant, line.size) is None:
                logger.debug("price_fallback_used", price_type=variant, size=line.size)

        order = Order(
            customer_name=customer,
            delivery_date=request.delivery_date,
            price_type=variant,
            packages=lines,
        )
        order = await (await self._get_order_store()).create_order(order)

        logger.info(
            "create_order_complete",
            order_id=order.id,
            total_weight=order.total_weight,
            total_amount=order.total_amount,
        )
        return order

    def to_response(self, result: Order) -> OrderResponse:
        """Convert result to API response."""
        return order_to_response(result)
