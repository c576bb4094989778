"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Business rules (positive amounts, non-empty names, at least one packet)
are checked by the use cases, not here, so they surface as domain
validation errors rather than schema errors.
"""

from datetime import date

from pydantic import BaseModel, Field

from snackbooks.core.entities.ledger import ExpenseKind, PaymentMethod
from snackbooks.core.entities.order import OrderStatus

# --- Orders ---


class QuoteOrderRequest(BaseModel):
    """Live summary of a packet selection."""

    packages: dict[int, int] = Field(
        default_factory=dict,
        description="Packet size in grams -> quantity",
        examples=[{"100": 2, "250": 1}],
    )
    price_type: str = Field(
        default="retail",
        description="Price variant: retail, wholesale or a custom tag",
        examples=["retail", "wholesale"],
    )


class CreateOrderRequest(QuoteOrderRequest):
    """Request to create a customer order."""

    customer_name: str = Field(..., description="Customer name")
    delivery_date: date = Field(..., description="Planned delivery date")


class OrderFilterRequest(BaseModel):
    """Filters for listing orders."""

    search: str | None = Field(default=None, description="Customer name contains")
    status: OrderStatus | None = Field(default=None, description="pending or completed")
    price_type: str | None = Field(default=None, description="Price variant")
    delivery_date: date | None = Field(default=None, description="Exact delivery date")
    limit: int = Field(default=500, ge=1, le=5000)
    offset: int = Field(default=0, ge=0)


# --- Ledger ---


class RecordIncomeRequest(BaseModel):
    """Request to record money received."""

    customer_name: str = Field(..., description="Who paid")
    amount: float = Field(..., description="Amount received")
    entry_date: date | None = Field(default=None, description="Defaults to today")
    order_id: int | None = Field(default=None, description="Order this payment settles")
    order_size: str | None = Field(
        default=None,
        description="Free-text order description",
        examples=["2kg namak para"],
    )
    payment_method: PaymentMethod = Field(default=PaymentMethod.CASH)
    remarks: str | None = Field(default=None)


class RecordExpenseRequest(BaseModel):
    """Request to record money spent."""

    item: str = Field(..., description="What the money was spent on")
    amount: float = Field(..., description="Amount spent")
    entry_date: date | None = Field(default=None, description="Defaults to today")
    is_extra: bool = Field(
        default=False,
        description="Extra expenses are shown but excluded from profit",
    )
    remarks: str | None = Field(default=None)


class ExpenseFilterRequest(BaseModel):
    """Filters for listing expenses."""

    search: str | None = Field(default=None, description="Item or remarks contains")
    kind: ExpenseKind = Field(default=ExpenseKind.ALL)


# --- Pricing ---


class UpdateSellingPriceRequest(BaseModel):
    """Request to override one selling price."""

    variant: str = Field(default="retail", description="Price variant")
    size: int = Field(..., description="Packet size in grams")
    price: float = Field(
        ...,
        description="New unit price; 0 restores the default, negative is ignored",
    )


# --- Materials ---


class UpdateMaterialPriceRequest(BaseModel):
    """Request to change a material's unit price."""

    price_per_unit: float = Field(..., description="New price per unit")


class AddMaterialStockRequest(BaseModel):
    """Request to add purchased stock to a material."""

    quantity: float = Field(..., description="Quantity added, in the material's unit")


class RequirementsRequest(BaseModel):
    """Estimate materials for a product weight."""

    weight_grams: float = Field(..., ge=0, description="Finished product weight in grams")


class RecordUsageRequest(BaseModel):
    """Request to log a production batch."""

    batch_size_kg: float = Field(..., description="Finished product produced, in kg")
    usage_date: date | None = Field(default=None, description="Defaults to today")


# --- Reports ---


class ReportRequest(BaseModel):
    """Reference day for dashboard reports."""

    day: date | None = Field(default=None, description="Defaults to today")
