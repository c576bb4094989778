"""Application use cases."""

from snackbooks.application.use_cases.add_material_stock import AddMaterialStockUseCase
from snackbooks.application.use_cases.create_order import CreateOrderUseCase
from snackbooks.application.use_cases.estimate_requirements import (
    EstimateRequirementsUseCase,
    RequirementsEstimate,
)
from snackbooks.application.use_cases.get_ledger_summary import (
    GetLedgerSummaryUseCase,
    LedgerSummaryResult,
)
from snackbooks.application.use_cases.get_profit_report import (
    GetProfitReportUseCase,
    ProfitReport,
)
from snackbooks.application.use_cases.quote_order import QuoteOrderUseCase, QuoteResult
from snackbooks.application.use_cases.record_expense import RecordExpenseUseCase
from snackbooks.application.use_cases.record_income import RecordIncomeUseCase
from snackbooks.application.use_cases.record_material_usage import RecordMaterialUsageUseCase
from snackbooks.application.use_cases.toggle_expense_extra import ToggleExpenseExtraUseCase
from snackbooks.application.use_cases.toggle_order_status import ToggleOrderStatusUseCase
from snackbooks.application.use_cases.update_material_price import UpdateMaterialPriceUseCase
from snackbooks.application.use_cases.update_selling_price import (
    UpdateSellingPriceResult,
    UpdateSellingPriceUseCase,
)

__all__ = [
    "QuoteOrderUseCase",
    "QuoteResult",
    "CreateOrderUseCase",
    "ToggleOrderStatusUseCase",
    "RecordIncomeUseCase",
    "RecordExpenseUseCase",
    "ToggleExpenseExtraUseCase",
    "UpdateSellingPriceUseCase",
    "UpdateSellingPriceResult",
    "UpdateMaterialPriceUseCase",
    "AddMaterialStockUseCase",
    "EstimateRequirementsUseCase",
    "RequirementsEstimate",
    "RecordMaterialUsageUseCase",
    "GetLedgerSummaryUseCase",
    "LedgerSummaryResult",
    "GetProfitReportUseCase",
    "ProfitReport",
]
