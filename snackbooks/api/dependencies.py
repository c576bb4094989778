"""
Dependency injection container for FastAPI.

Provides use case and store instances to route handlers. Tests swap
any of these through `app.dependency_overrides`.
"""

from snackbooks.application.use_cases import (
    AddMaterialStockUseCase,
    CreateOrderUseCase,
    EstimateRequirementsUseCase,
    GetLedgerSummaryUseCase,
    GetProfitReportUseCase,
    QuoteOrderUseCase,
    RecordExpenseUseCase,
    RecordIncomeUseCase,
    RecordMaterialUsageUseCase,
    ToggleExpenseExtraUseCase,
    ToggleOrderStatusUseCase,
    UpdateMaterialPriceUseCase,
    UpdateSellingPriceUseCase,
)
from snackbooks.core.interfaces import (
    ILedgerStore,
    IMaterialStore,
    IOrderStore,
    IPricingStore,
)
from snackbooks.infrastructure.storage.sqlite import (
    get_ledger_store,
    get_material_store,
    get_order_store,
    get_pricing_store,
)


# Store dependencies
async def get_orders() -> IOrderStore:
    """Get order store."""
    return await get_order_store()


async def get_ledger() -> ILedgerStore:
    """Get income/expense store."""
    return await get_ledger_store()


async def get_pricing() -> IPricingStore:
    """Get selling-price store."""
    return await get_pricing_store()


async def get_materials() -> IMaterialStore:
    """Get material store."""
    return await get_material_store()


# Use case dependencies
def get_quote_order_use_case() -> QuoteOrderUseCase:
    return QuoteOrderUseCase()


def get_create_order_use_case() -> CreateOrderUseCase:
    return CreateOrderUseCase()


def get_toggle_order_status_use_case() -> ToggleOrderStatusUseCase:
    return ToggleOrderStatusUseCase()


def get_record_income_use_case() -> RecordIncomeUseCase:
    return RecordIncomeUseCase()


def get_record_expense_use_case() -> RecordExpenseUseCase:
    return RecordExpenseUseCase()


def get_toggle_expense_extra_use_case() -> ToggleExpenseExtraUseCase:
    return ToggleExpenseExtraUseCase()


def get_update_selling_price_use_case() -> UpdateSellingPriceUseCase:
    return UpdateSellingPriceUseCase()


def get_update_material_price_use_case() -> UpdateMaterialPriceUseCase:
    return UpdateMaterialPriceUseCase()


def get_add_material_stock_use_case() -> AddMaterialStockUseCase:
    return AddMaterialStockUseCase()


def get_estimate_requirements_use_case() -> EstimateRequirementsUseCase:
    return EstimateRequirementsUseCase()


def get_record_usage_use_case() -> RecordMaterialUsageUseCase:
    return RecordMaterialUsageUseCase()


def get_ledger_summary_use_case() -> GetLedgerSummaryUseCase:
    return GetLedgerSummaryUseCase()


def get_profit_report_use_case() -> GetProfitReportUseCase:
    return GetProfitReportUseCase()
