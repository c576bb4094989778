"""
Abstract interface for raw-material storage.

Covers the material list (prices and stock) and the append-only
production usage log.
"""

from abc import ABC, abstractmethod

from snackbooks.core.entities.production import Material, MaterialUsage


class IMaterialStore(ABC):
    """Interface for material and usage-log persistence."""

    @abstractmethod
    async def load(self) -> list[Material]:
        """Load all materials, seeding the defaults on first use."""

    @abstractmethod
    async def save(self, materials: list[Material]) -> None:
        """Persist the given materials (insert new, update existing)."""

    @abstractmethod
    async def add_usage(self, usage: MaterialUsage) -> MaterialUsage:
        """Append a production batch to the usage log."""

    @abstractmethod
    async def list_usage(self, limit: int = 100) -> list[MaterialUsage]:
        """List usage records, newest first."""
