"""Customer order domain entities."""

from datetime import UTC, date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class OrderStatus(str, Enum):
    """Fulfilment status of an order."""

    PENDING = "pending"
    COMPLETED = "completed"

    def toggled(self) -> "OrderStatus":
        """The other status; both transitions are always allowed."""
        if self is OrderStatus.PENDING:
            return OrderStatus.COMPLETED
        return OrderStatus.PENDING


class PackageLineItem(BaseModel):
    """Packets of one size on an order. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(gt=0)  # grams per packet
    quantity: int = Field(ge=0)
    unit_price: float = Field(default=0.0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def weight(self) -> int:
        """Total grams for this line: size * quantity."""
        return self.size * self.quantity

    @computed_field  # type: ignore[prop-decorator]
    @property
    def amount(self) -> float:
        """Line total: unit_price * quantity."""
        return self.unit_price * self.quantity


class OrderSummary(BaseModel):
    """Aggregate weight, packet count and amount of a selection."""

    model_config = ConfigDict(frozen=True)

    total_weight: int = 0
    total_packets: int = 0
    total_amount: float = 0.0


class Order(BaseModel):
    """A customer order with packet line items and derived totals."""

    id: int | None = None
    customer_name: str
    delivery_date: date
    price_type: str = "retail"
    packages: list[PackageLineItem] = Field(default_factory=list)
    total_weight: int = 0
    total_packets: int = 0
    total_amount: float = 0.0
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def compute_totals(self) -> "Order":
        """Totals always equal the sums over the line items."""
        self.total_weight = sum(p.weight for p in self.packages)
        self.total_packets = sum(p.quantity for p in self.packages)
        self.total_amount = sum(p.amount for p in self.packages)
        return self
