"""Core interfaces (ports) for dependency injection."""

from snackbooks.core.interfaces.ledger_store import ILedgerStore
from snackbooks.core.interfaces.material_store import IMaterialStore
from snackbooks.core.interfaces.order_store import IOrderStore
from snackbooks.core.interfaces.pricing_store import IPricingStore

__all__ = [
    "ILedgerStore",
    "IMaterialStore",
    "IOrderStore",
    "IPricingStore",
]
