"""
Application layer - Use cases and DTOs.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and stores

Use cases are the only entry point for API handlers that write.
"""

from snackbooks.application.dto import ErrorResponse, HealthResponse
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

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "QuoteOrderUseCase",
    "CreateOrderUseCase",
    "ToggleOrderStatusUseCase",
    "RecordIncomeUseCase",
    "RecordExpenseUseCase",
    "ToggleExpenseExtraUseCase",
    "UpdateSellingPriceUseCase",
    "UpdateMaterialPriceUseCase",
    "AddMaterialStockUseCase",
    "EstimateRequirementsUseCase",
    "RecordMaterialUsageUseCase",
    "GetLedgerSummaryUseCase",
    "GetProfitReportUseCase",
]
