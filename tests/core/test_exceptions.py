"""Unit tests for domain exceptions."""

import pytest

from snackbooks.core.exceptions import (
    ConfigurationError,
    DatabaseError,
    EmptyOrderError,
    ExpenseNotFoundError,
    IncomeEntryNotFoundError,
    MaterialNotFoundError,
    OrderNotFoundError,
    RecordNotFoundError,
    SnackBooksError,
    StorageError,
    ValidationError,
)


class TestSnackBooksError:
    def test_basic_initialization(self):
        error = SnackBooksError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "SnackBooksError"
        assert error.details == {}

    def test_to_dict(self):
        error = SnackBooksError("Bad", code="BAD", details={"k": 1})
        assert error.to_dict() == {"error": "BAD", "message": "Bad", "details": {"k": 1}}


class TestNotFoundErrors:
    @pytest.mark.parametrize(
        ("error", "code", "key"),
        [
            (OrderNotFoundError(7), "ORDER_NOT_FOUND", "order_id"),
            (IncomeEntryNotFoundError(7), "INCOME_NOT_FOUND", "entry_id"),
            (ExpenseNotFoundError(7), "EXPENSE_NOT_FOUND", "expense_id"),
            (MaterialNotFoundError(7), "MATERIAL_NOT_FOUND", "material_id"),
        ],
    )
    def test_codes_and_details(self, error, code, key):
        assert isinstance(error, RecordNotFoundError)
        assert isinstance(error, StorageError)
        assert error.code == code
        assert error.details == {key: 7}
        assert "7" in error.message


class TestValidationErrors:
    def test_validation_error_details(self):
        error = ValidationError("amount", "Amount must be greater than zero", -5)
        assert error.code == "VALIDATION_ERROR"
        assert error.details["field"] == "amount"
        assert error.details["value"] == "-5"

    def test_value_is_truncated(self):
        error = ValidationError("remarks", "too long", "x" * 500)
        assert len(error.details["value"]) == 100

    def test_empty_order_error(self):
        error = EmptyOrderError()
        assert isinstance(error, ValidationError)
        assert error.code == "EMPTY_ORDER"
        assert error.details["field"] == "packages"


class TestOtherErrors:
    def test_database_error(self):
        error = DatabaseError("insert", "disk full")
        assert error.code == "DATABASE_ERROR"
        assert error.details == {"operation": "insert", "error": "disk full"}

    def test_configuration_error_is_base_error(self):
        assert issubclass(ConfigurationError, SnackBooksError)
