"""Selling-price endpoints."""

from fastapi import APIRouter, Depends, Query

from snackbooks.api.dependencies import get_pricing, get_update_selling_price_use_case
from snackbooks.application.dto.requests import UpdateSellingPriceRequest
from snackbooks.application.dto.responses import (
    PriceResponse,
    PricingTableResponse,
    UpdateSellingPriceResponse,
)
from snackbooks.application.use_cases import UpdateSellingPriceUseCase
from snackbooks.core.entities.pricing import DEFAULT_PRICES, PACKET_SIZES, normalize_variant
from snackbooks.core.interfaces import IPricingStore

router = APIRouter(prefix="/api/pricing", tags=["pricing"])


@router.get("", response_model=PricingTableResponse)
async def get_pricing_table(
    store: IPricingStore = Depends(get_pricing),
) -> PricingTableResponse:
    """Resolved price of every known variant at every packet size."""
    table = await store.load()
    return PricingTableResponse(sizes=list(PACKET_SIZES), prices=table.resolved())


@router.get("/price", response_model=PriceResponse)
async def get_price(
    size: int = Query(..., description="Packet size in grams"),
    variant: str = Query(default="retail", description="Price variant"),
    store: IPricingStore = Depends(get_pricing),
) -> PriceResponse:
    """Resolve one unit price, reporting which tier supplied it."""
    table = await store.load()
    tag = normalize_variant(variant)

    if table.stored_price(tag, size) is not None:
        source = "stored"
    elif size in DEFAULT_PRICES.get(tag, {}):
        source = "default"
    else:
        source = "fallback"

    return PriceResponse(variant=tag, size=size, price=table.get_price(tag, size), source=source)


@router.put("", response_model=UpdateSellingPriceResponse)
async def update_price(
    request: UpdateSellingPriceRequest,
    use_case: UpdateSellingPriceUseCase = Depends(get_update_selling_price_use_case),
) -> UpdateSellingPriceResponse:
    """Override one price. Invalid input is reported with updated=false."""
    result = await use_case.execute(request)
    return use_case.to_response(result)
