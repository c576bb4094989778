"""Core domain entities."""

from snackbooks.core.entities.ledger import (
    ExpenseEntry,
    ExpenseKind,
    IncomeEntry,
    PaymentMethod,
    PaymentState,
)
from snackbooks.core.entities.order import (
    Order,
    OrderStatus,
    OrderSummary,
    PackageLineItem,
)
from snackbooks.core.entities.pricing import (
    DEFAULT_PRICES,
    PACKET_SIZES,
    PriceCategory,
    PricingTable,
)
from snackbooks.core.entities.production import (
    DEFAULT_MATERIALS,
    DEFAULT_PRODUCTION_CONFIG,
    Material,
    MaterialRequirements,
    MaterialUsage,
    ProductionConfig,
)

__all__ = [
    # Pricing entities
    "PricingTable",
    "PriceCategory",
    "PACKET_SIZES",
    "DEFAULT_PRICES",
    # Order entities
    "Order",
    "OrderStatus",
    "OrderSummary",
    "PackageLineItem",
    # Ledger entities
    "IncomeEntry",
    "ExpenseEntry",
    "ExpenseKind",
    "PaymentMethod",
    "PaymentState",
    # Production entities
    "Material",
    "MaterialRequirements",
    "MaterialUsage",
    "ProductionConfig",
    "DEFAULT_MATERIALS",
    "DEFAULT_PRODUCTION_CONFIG",
]
