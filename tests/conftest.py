"""Pytest configuration and shared fixtures."""

from datetime import UTC, date, datetime

import pytest

from snackbooks.config import reset_settings
from snackbooks.core.entities import (
    ExpenseEntry,
    IncomeEntry,
    Material,
    Order,
    PackageLineItem,
    PricingTable,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test sees settings built from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def pricing_table() -> PricingTable:
    return PricingTable.with_defaults()


@pytest.fixture
def sample_order() -> Order:
    """Retail order: 2 x 100 g and 1 x 250 g, total 120."""
    return Order(
        id=1,
        customer_name="Asha",
        delivery_date=date(2024, 3, 10),
        price_type="retail",
        packages=[
            PackageLineItem(size=100, quantity=2, unit_price=25.0),
            PackageLineItem(size=250, quantity=1, unit_price=70.0),
        ],
        created_at=datetime(2024, 3, 1, 9, 30, tzinfo=UTC),
    )


@pytest.fixture
def sample_materials() -> list[Material]:
    return [
        Material(id=1, name="Maida", unit="kg", price_per_unit=45.0, stock=10.0),
        Material(id=2, name="Oil", unit="litre", price_per_unit=120.0, stock=2.0),
        Material(id=3, name="Salt", unit="kg", price_per_unit=5.0),
        Material(id=4, name="Ajwain", unit="kg", price_per_unit=7.0),
        Material(id=5, name="Gas", unit="per kg production", price_per_unit=25.0),
    ]


@pytest.fixture
def sample_income() -> IncomeEntry:
    return IncomeEntry(
        id=1,
        customer_name="Asha",
        amount=100.0,
        entry_date=date(2024, 3, 2),
        order_id=1,
        order_size="450g mixed",
    )


@pytest.fixture
def sample_expense() -> ExpenseEntry:
    return ExpenseEntry(id=1, item="Maida sack", amount=900.0, entry_date=date(2024, 3, 1))
