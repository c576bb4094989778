"""Income and expense ledger entities."""

from datetime import UTC, date, datetime
from enum import Enum

from pydantic import BaseModel, Field


class PaymentMethod(str, Enum):
    """How an income entry was received."""

    CASH = "cash"
    UPI = "upi"
    BANK = "bank"
    OTHER = "other"


class ExpenseKind(str, Enum):
    """Expense filter: everything, business-only or extra-only."""

    ALL = "all"
    BUSINESS = "business"
    EXTRA = "extra"


class PaymentState(str, Enum):
    """Settlement state of an order."""

    PAID = "Paid"
    PARTIAL = "Partial"
    UNPAID = "Unpaid"


class IncomeEntry(BaseModel):
    """Money received. Entries linked to an order are its payments."""

    id: int | None = None
    customer_name: str
    amount: float
    entry_date: date = Field(default_factory=date.today)
    order_id: int | None = None
    order_size: str | None = None  # free text, e.g. "2kg namak para"
    payment_method: PaymentMethod = PaymentMethod.CASH
    remarks: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ExpenseEntry(BaseModel):
    """Money spent. Extra expenses are excluded from profit."""

    id: int | None = None
    item: str
    amount: float
    entry_date: date = Field(default_factory=date.today)
    is_extra: bool = False
    remarks: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
