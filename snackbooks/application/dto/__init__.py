"""Data transfer objects for the API boundary."""

from snackbooks.application.dto.requests import (
    AddMaterialStockRequest,
    CreateOrderRequest,
    ExpenseFilterRequest,
    OrderFilterRequest,
    QuoteOrderRequest,
    RecordExpenseRequest,
    RecordIncomeRequest,
    RecordUsageRequest,
    ReportRequest,
    RequirementsRequest,
    UpdateMaterialPriceRequest,
    UpdateSellingPriceRequest,
)
from snackbooks.application.dto.responses import (
    DeleteResponse,
    ErrorResponse,
    ExpenseEntryResponse,
    ExpenseListResponse,
    HealthResponse,
    IncomeEntryResponse,
    IncomeListResponse,
    LedgerSummaryResponse,
    MaterialListResponse,
    MaterialResponse,
    MaterialUsageListResponse,
    MaterialUsageResponse,
    OrderListResponse,
    OrderResponse,
    OrderSummaryResponse,
    PaymentStatusResponse,
    PriceResponse,
    PricingTableResponse,
    ProfitReportResponse,
    RequirementsResponse,
    UpdateSellingPriceResponse,
)

__all__ = [
    # Requests
    "QuoteOrderRequest",
    "CreateOrderRequest",
    "OrderFilterRequest",
    "RecordIncomeRequest",
    "RecordExpenseRequest",
    "ExpenseFilterRequest",
    "UpdateSellingPriceRequest",
    "UpdateMaterialPriceRequest",
    "AddMaterialStockRequest",
    "RequirementsRequest",
    "RecordUsageRequest",
    "ReportRequest",
    # Responses
    "OrderSummaryResponse",
    "OrderResponse",
    "OrderListResponse",
    "PaymentStatusResponse",
    "IncomeEntryResponse",
    "IncomeListResponse",
    "ExpenseEntryResponse",
    "ExpenseListResponse",
    "PricingTableResponse",
    "PriceResponse",
    "UpdateSellingPriceResponse",
    "MaterialResponse",
    "MaterialListResponse",
    "RequirementsResponse",
    "MaterialUsageResponse",
    "MaterialUsageListResponse",
    "LedgerSummaryResponse",
    "ProfitReportResponse",
    "DeleteResponse",
    "HealthResponse",
    "ErrorResponse",
]
