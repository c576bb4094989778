"""Order endpoints: quotes, creation, listing and status."""

from fastapi import APIRouter, Depends, status

from snackbooks.api.dependencies import (
    get_create_order_use_case,
    get_ledger,
    get_orders,
    get_quote_order_use_case,
    get_toggle_order_status_use_case,
)
from snackbooks.application.dto.mappers import order_to_response, payment_to_response
from snackbooks.application.dto.requests import (
    CreateOrderRequest,
    OrderFilterRequest,
    QuoteOrderRequest,
)
from snackbooks.application.dto.responses import (
    DeleteResponse,
    ErrorResponse,
    OrderListResponse,
    OrderResponse,
    OrderSummaryResponse,
    PaymentStatusResponse,
)
from snackbooks.application.use_cases import (
    CreateOrderUseCase,
    QuoteOrderUseCase,
    ToggleOrderStatusUseCase,
)
from snackbooks.core.exceptions import OrderNotFoundError
from snackbooks.core.interfaces import ILedgerStore, IOrderStore
from snackbooks.core.services.ledger import filter_orders, payment_status

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("/quote", response_model=OrderSummaryResponse)
async def quote_order(
    request: QuoteOrderRequest,
    use_case: QuoteOrderUseCase = Depends(get_quote_order_use_case),
) -> OrderSummaryResponse:
    """Live weight, packet count and amount for a selection."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_order(
    request: CreateOrderRequest,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
) -> OrderResponse:
    """Create an order priced at the current selling prices."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get("", response_model=OrderListResponse)
async def list_orders(
    filters: OrderFilterRequest = Depends(),
    store: IOrderStore = Depends(get_orders),
) -> OrderListResponse:
    """List orders, newest first, with optional filters."""
    matched = filter_orders(
        await store.list_orders(),
        search=filters.search,
        status=filters.status,
        price_type=filters.price_type,
        delivery_date=filters.delivery_date,
    )
    page = matched[filters.offset : filters.offset + filters.limit]
    return OrderListResponse(
        orders=[order_to_response(o) for o in page],
        total=len(matched),
    )


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_order(
    order_id: int,
    store: IOrderStore = Depends(get_orders),
) -> OrderResponse:
    """Get one order with its line items."""
    order = await store.get_order(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order_to_response(order)


@router.post(
    "/{order_id}/toggle-status",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def toggle_order_status(
    order_id: int,
    use_case: ToggleOrderStatusUseCase = Depends(get_toggle_order_status_use_case),
) -> OrderResponse:
    """Flip the order between pending and completed."""
    result = await use_case.execute(order_id)
    return use_case.to_response(result)


@router.delete(
    "/{order_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_order(
    order_id: int,
    store: IOrderStore = Depends(get_orders),
) -> DeleteResponse:
    """Delete an order. Linked payments stay, unlinked."""
    if not await store.delete_order(order_id):
        raise OrderNotFoundError(order_id)
    return DeleteResponse(deleted=True, id=order_id)


@router.get(
    "/{order_id}/payment-status",
    response_model=PaymentStatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_payment_status(
    order_id: int,
    store: IOrderStore = Depends(get_orders),
    ledger: ILedgerStore = Depends(get_ledger),
) -> PaymentStatusResponse:
    """Paid, Partial or Unpaid from the income linked to the order."""
    order = await store.get_order(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    payments = await ledger.list_income()
    return payment_to_response(payment_status(order, payments))
