"""Response DTOs for API endpoints.

Pydantic v2 models for API responses.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

# --- Orders ---


class PackageLineResponse(BaseModel):
    """One packet size on an order."""

    size: int
    quantity: int
    unit_price: float
    weight: int
    amount: float


class OrderSummaryResponse(BaseModel):
    """Totals of a packet selection."""

    price_type: str
    total_weight: int = Field(..., description="Grams")
    total_packets: int
    total_amount: float
    lines: list[PackageLineResponse] = Field(default_factory=list)


class OrderResponse(BaseModel):
    """A stored order."""

    id: int
    customer_name: str
    delivery_date: date
    price_type: str
    status: str
    packages: list[PackageLineResponse] = Field(default_factory=list)
    total_weight: int
    total_packets: int
    total_amount: float
    created_at: datetime


class OrderListResponse(BaseModel):
    """Filtered list of orders."""

    orders: list[OrderResponse]
    total: int


class PaymentStatusResponse(BaseModel):
    """How much of an order has been paid."""

    order_id: int | None
    total_amount: float
    total_paid: float
    pending: float
    status: str = Field(..., description="Paid, Partial or Unpaid")


# --- Ledger ---


class IncomeEntryResponse(BaseModel):
    """A recorded income entry."""

    id: int
    customer_name: str
    amount: float
    entry_date: date
    order_id: int | None = None
    order_size: str | None = None
    payment_method: str
    remarks: str | None = None
    created_at: datetime


class IncomeListResponse(BaseModel):
    """Income entries with their sum."""

    entries: list[IncomeEntryResponse]
    total: int
    total_amount: float


class ExpenseEntryResponse(BaseModel):
    """A recorded expense entry."""

    id: int
    item: str
    amount: float
    entry_date: date
    is_extra: bool
    remarks: str | None = None
    created_at: datetime


class ExpenseListResponse(BaseModel):
    """Expense entries with their sum."""

    entries: list[ExpenseEntryResponse]
    total: int
    total_amount: float


# --- Pricing ---


class PricingTableResponse(BaseModel):
    """Resolved price of every variant and packet size."""

    sizes: list[int]
    prices: dict[str, dict[int, float]] = Field(
        ..., description="Variant -> packet size -> unit price"
    )


class PriceResponse(BaseModel):
    """One resolved unit price."""

    variant: str
    size: int
    price: float
    source: str = Field(..., description="stored, default or fallback")


class UpdateSellingPriceResponse(BaseModel):
    """Outcome of a price override."""

    updated: bool
    variant: str
    size: int
    price: float = Field(..., description="Effective price after the update")
    message: str | None = None


# --- Materials ---


class MaterialResponse(BaseModel):
    """A raw material with its price and stock."""

    id: int
    name: str
    unit: str
    price_per_unit: float
    stock: float
    stock_value: float


class MaterialListResponse(BaseModel):
    """All materials."""

    materials: list[MaterialResponse]
    total: int
    total_stock_value: float


class RequirementsResponse(BaseModel):
    """Material quantities and cost for a product weight."""

    weight_grams: float
    flour_kg: float
    oil_l: float
    salt_kg: float
    spice_kg: float
    gas_minutes: float
    estimated_cost: float


class MaterialUsageResponse(BaseModel):
    """A logged production batch."""

    id: int
    usage_date: date
    batch_size_kg: float
    requirements: RequirementsResponse
    total_cost: float
    created_at: datetime


class MaterialUsageListResponse(BaseModel):
    """Production batches, newest first."""

    usage: list[MaterialUsageResponse]
    total: int


# --- Reports ---


class LedgerTotalsResponse(BaseModel):
    total_income: float
    total_expense: float
    extra_expense: float
    profit: float


class DailySummaryResponse(BaseModel):
    day: date
    total_sales: float
    order_count: int
    total_weight: int
    avg_order_value: float


class LedgerSummaryResponse(BaseModel):
    """Dashboard ledger figures."""

    totals: LedgerTotalsResponse
    today: DailySummaryResponse
    payments: list[PaymentStatusResponse]
    pending_orders: int = Field(..., description="Orders with money outstanding")


class ProfitAnalysisResponse(BaseModel):
    order_count: int
    total_revenue: float
    production_cost: float
    net_profit: float
    margin_percent: float
    total_paid: float
    pending_amount: float


class SizeProfitResponse(BaseModel):
    size: int
    retail_price: float
    wholesale_price: float
    production_cost: float
    retail_profit: float
    wholesale_profit: float
    retail_margin_percent: float
    wholesale_margin_percent: float


class ForecastResponse(BaseModel):
    start: date
    end: date
    order_count: int
    total_weight: int
    requirements: RequirementsResponse
    expected_revenue: float


class ProfitReportResponse(BaseModel):
    """Profit analysis, per-size economics and delivery forecast."""

    analysis: ProfitAnalysisResponse
    sizes: list[SizeProfitResponse]
    forecast: ForecastResponse


# --- Common ---


class DeleteResponse(BaseModel):
    """Deletion acknowledgement."""

    deleted: bool
    id: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. ORDER_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
