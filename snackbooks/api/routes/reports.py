"""Dashboard report endpoints."""

from fastapi import APIRouter, Depends

from snackbooks.api.dependencies import get_ledger_summary_use_case, get_profit_report_use_case
from snackbooks.application.dto.requests import ReportRequest
from snackbooks.application.dto.responses import LedgerSummaryResponse, ProfitReportResponse
from snackbooks.application.use_cases import GetLedgerSummaryUseCase, GetProfitReportUseCase

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/ledger", response_model=LedgerSummaryResponse)
async def ledger_summary(
    request: ReportRequest = Depends(),
    use_case: GetLedgerSummaryUseCase = Depends(get_ledger_summary_use_case),
) -> LedgerSummaryResponse:
    """Income, expenses, profit, today's sales and payment states."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get("/profit", response_model=ProfitReportResponse)
async def profit_report(
    request: ReportRequest = Depends(),
    use_case: GetProfitReportUseCase = Depends(get_profit_report_use_case),
) -> ProfitReportResponse:
    """Profit analysis, per-size profit and the delivery forecast."""
    result = await use_case.execute(request)
    return use_case.to_response(result)
