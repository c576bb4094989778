"""
Domain exceptions for the SnackBooks application.

Provides specific exception types for different error scenarios.
Missing prices and missing materials are not errors: those degrade
through the pricing and costing fallbacks instead.
"""

from typing import Any


class SnackBooksError(Exception):
    """Base exception for all SnackBooks errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(SnackBooksError):
    """Base exception for storage operations."""

    pass


class RecordNotFoundError(StorageError):
    """A stored record does not exist."""

    pass


class OrderNotFoundError(RecordNotFoundError):
    """Order not found in storage."""

    def __init__(self, order_id: int):
        super().__init__(
            f"Order not found: {order_id}",
            code="ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )


class IncomeEntryNotFoundError(RecordNotFoundError):
    """Income entry not found in storage."""

    def __init__(self, entry_id: int):
        super().__init__(
            f"Income entry not found: {entry_id}",
            code="INCOME_NOT_FOUND",
            details={"entry_id": entry_id},
        )


class ExpenseNotFoundError(RecordNotFoundError):
    """Expense entry not found in storage."""

    def __init__(self, expense_id: int):
        super().__init__(
            f"Expense not found: {expense_id}",
            code="EXPENSE_NOT_FOUND",
            details={"expense_id": expense_id},
        )


class MaterialNotFoundError(RecordNotFoundError):
    """Material not found in storage."""

    def __init__(self, material_id: int):
        super().__init__(
            f"Material not found: {material_id}",
            code="MATERIAL_NOT_FOUND",
            details={"material_id": material_id},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Validation Exceptions
class ValidationError(SnackBooksError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class EmptyOrderError(ValidationError):
    """Order has no packet with a positive quantity."""

    def __init__(self):
        super().__init__(
            field="packages",
            message="At least one packet size needs a quantity above zero",
        )
        self.code = "EMPTY_ORDER"


class ConfigurationError(SnackBooksError):
    """Configuration error."""

    pass
