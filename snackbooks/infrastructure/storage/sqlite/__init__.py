"""SQLite storage implementations."""

from snackbooks.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from snackbooks.infrastructure.storage.sqlite.ledger_store import SQLiteLedgerStore
from snackbooks.infrastructure.storage.sqlite.material_store import SQLiteMaterialStore
from snackbooks.infrastructure.storage.sqlite.order_store import SQLiteOrderStore
from snackbooks.infrastructure.storage.sqlite.pricing_store import SQLitePricingStore

# Singleton instances
_pricing_store: SQLitePricingStore | None = None
_material_store: SQLiteMaterialStore | None = None
_order_store: SQLiteOrderStore | None = None
_ledger_store: SQLiteLedgerStore | None = None


async def get_pricing_store() -> SQLitePricingStore:
    """Get singleton pricing store instance."""
    global _pricing_store
    if _pricing_store is None:
        _pricing_store = SQLitePricingStore()
    return _pricing_store


async def get_material_store() -> SQLiteMaterialStore:
    """Get singleton material store instance."""
    global _material_store
    if _material_store is None:
        _material_store = SQLiteMaterialStore()
    return _material_store


async def get_order_store() -> SQLiteOrderStore:
    """Get singleton order store instance."""
    global _order_store
    if _order_store is None:
        _order_store = SQLiteOrderStore()
    return _order_store


async def get_ledger_store() -> SQLiteLedgerStore:
    """Get singleton ledger store instance."""
    global _ledger_store
    if _ledger_store is None:
        _ledger_store = SQLiteLedgerStore()
    return _ledger_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLitePricingStore",
    "SQLiteMaterialStore",
    "SQLiteOrderStore",
    "SQLiteLedgerStore",
    # Factory functions
    "get_pricing_store",
    "get_material_store",
    "get_order_store",
    "get_ledger_store",
]
