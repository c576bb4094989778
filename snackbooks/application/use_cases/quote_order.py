"""Quote Order Use Case: live totals for a packet selection, no write."""

from dataclasses import dataclass

from snackbooks.application.dto.mappers import line_to_response
from snackbooks.application.dto.requests import QuoteOrderRequest
from snackbooks.application.dto.responses import OrderSummaryResponse
from snackbooks.config import get_logger
from snackbooks.core.entities.order import OrderSummary, PackageLineItem
from snackbooks.core.entities.pricing import normalize_variant
from snackbooks.core.interfaces.pricing_store import IPricingStore
from snackbooks.core.services.order_summary import build_line_items, summarize

logger = get_logger(__name__)


@dataclass
class QuoteResult:
    """Summary plus the priced lines behind it."""

    price_type: str
    summary: OrderSummary
    lines: list[PackageLineItem]


class QuoteOrderUseCase:
    """Price a selection against the current pricing table."""

    def __init__(self, pricing_store: IPricingStore | None = None):
        self._pricing_store = pricing_store

    async def _get_pricing_store(self) -> IPricingStore:
        if self._pricing_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_pricing_store

            self._pricing_store = await get_pricing_store()
        return self._pricing_store

    async def execute(self, request: QuoteOrderRequest) -> QuoteResult:
        """An empty selection quotes as all zeros."""
        table = await (await self._get_pricing_store()).load()
        variant = normalize_variant(request.price_type)

        summary = summarize(request.packages, variant, table)
        lines = build_line_items(request.packages, variant, table)

        logger.debug(
            "order_quoted",
            price_type=variant,
            total_packets=summary.total_packets,
            total_amount=summary.total_amount,
        )
        return QuoteResult(price_type=variant, summary=summary, lines=lines)

    def to_response(self, result: QuoteResult) -> OrderSummaryResponse:
        """Convert result to API response."""
        return OrderSummaryResponse(
            price_type=result.price_type,
            total_weight=result.summary.total_weight,
            total_packets=result.summary.total_packets,
            total_amount=result.summary.total_amount,
            lines=[line_to_response(line) for line in result.lines],
        )
