"""Update Selling Price Use Case: override one (variant, size) price."""

from dataclasses import dataclass

from snackbooks.application.dto.requests import UpdateSellingPriceRequest
from snackbooks.application.dto.responses import UpdateSellingPriceResponse
from snackbooks.config import get_logger
from snackbooks.core.entities.pricing import normalize_variant
from snackbooks.core.interfaces.pricing_store import IPricingStore

logger = get_logger(__name__)


@dataclass
class UpdateSellingPriceResult:
    """Whether the table changed, and the price now in effect."""

    updated: bool
    variant: str
    size: int
    effective_price: float
    message: str | None = None


class UpdateSellingPriceUseCase:
    """
    Store a price override.

    An invalid price (negative, NaN, infinite) or size leaves the table
    untouched and is reported back rather than raised.
    """

    def __init__(self, pricing_store: IPricingStore | None = None):
        self._pricing_store = pricing_store

    async def _get_pricing_store(self) -> IPricingStore:
        if self._pricing_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_pricing_store

            self._pricing_store = await get_pricing_store()
        return self._pricing_store

    async def execute(self, request: UpdateSellingPriceRequest) -> UpdateSellingPriceResult:
        store = await self._get_pricing_store()
        table = await store.load()
        variant = normalize_variant(request.variant)

        if not table.set_price(variant, request.size, request.price):
            logger.warning(
                "selling_price_rejected",
                variant=variant,
                size=request.size,
                price=request.price,
            )
            return UpdateSellingPriceResult(
                updated=False,
                variant=variant,
                size=request.size,
                effective_price=table.get_price(variant, request.size),
                message="Price must be a non-negative number and size a positive number of grams",
            )

        await store.save(table)
        logger.info("selling_price_updated", variant=variant, size=request.size, price=request.price)
        return UpdateSellingPriceResult(
            updated=True,
            variant=variant,
            size=request.size,
            effective_price=table.get_price(variant, request.size),
        )

    def to_response(self, result: UpdateSellingPriceResult) -> UpdateSellingPriceResponse:
        """Convert result to API response."""
        return UpdateSellingPriceResponse(
            updated=result.updated,
            variant=result.variant,
            size=result.size,
            price=result.effective_price,
            message=result.message,
        )
