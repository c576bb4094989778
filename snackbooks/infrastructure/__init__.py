"""Infrastructure layer implementations."""

from snackbooks.infrastructure import storage

__all__ = ["storage"]
