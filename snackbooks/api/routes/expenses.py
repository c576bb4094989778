"""Expense ledger endpoints."""

from fastapi import APIRouter, Depends, status

from snackbooks.api.dependencies import (
    get_ledger,
    get_record_expense_use_case,
    get_toggle_expense_extra_use_case,
)
from snackbooks.application.dto.mappers import expense_to_response
from snackbooks.application.dto.requests import ExpenseFilterRequest, RecordExpenseRequest
from snackbooks.application.dto.responses import (
    DeleteResponse,
    ErrorResponse,
    ExpenseEntryResponse,
    ExpenseListResponse,
)
from snackbooks.application.use_cases import RecordExpenseUseCase, ToggleExpenseExtraUseCase
from snackbooks.core.exceptions import ExpenseNotFoundError
from snackbooks.core.interfaces import ILedgerStore
from snackbooks.core.services.ledger import filter_expenses

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.post(
    "",
    response_model=ExpenseEntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def record_expense(
    request: RecordExpenseRequest,
    use_case: RecordExpenseUseCase = Depends(get_record_expense_use_case),
) -> ExpenseEntryResponse:
    """Record money spent."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get("", response_model=ExpenseListResponse)
async def list_expenses(
    filters: ExpenseFilterRequest = Depends(),
    ledger: ILedgerStore = Depends(get_ledger),
) -> ExpenseListResponse:
    """List expenses, optionally only business or only extra ones."""
    entries = filter_expenses(await ledger.list_expenses(), filters.search, filters.kind)
    return ExpenseListResponse(
        entries=[expense_to_response(e) for e in entries],
        total=len(entries),
        total_amount=sum(e.amount for e in entries),
    )


@router.post(
    "/{expense_id}/toggle-extra",
    response_model=ExpenseEntryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def toggle_expense_extra(
    expense_id: int,
    use_case: ToggleExpenseExtraUseCase = Depends(get_toggle_expense_extra_use_case),
) -> ExpenseEntryResponse:
    """Move an expense in or out of the profit calculation."""
    result = await use_case.execute(expense_id)
    return use_case.to_response(result)


@router.delete(
    "/{expense_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_expense(
    expense_id: int,
    ledger: ILedgerStore = Depends(get_ledger),
) -> DeleteResponse:
    """Delete an expense entry."""
    if not await ledger.delete_expense(expense_id):
        raise ExpenseNotFoundError(expense_id)
    return DeleteResponse(deleted=True, id=expense_id)
