"""Abstract interface for selling-price storage."""

from abc import ABC, abstractmethod

from snackbooks.core.entities.pricing import PricingTable


class IPricingStore(ABC):
    """
    Persists the pricing table as a whole.

    The table is reloaded wholesale on every read; concurrent writers
    are last-write-wins.
    """

    @abstractmethod
    async def load(self) -> PricingTable:
        """Load the pricing table, or the built-in defaults if none is stored."""

    @abstractmethod
    async def save(self, table: PricingTable) -> None:
        """Replace the stored pricing table."""
