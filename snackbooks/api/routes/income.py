"""Income ledger endpoints."""

from fastapi import APIRouter, Depends, Query, status

from snackbooks.api.dependencies import get_ledger, get_record_income_use_case
from snackbooks.application.dto.mappers import income_to_response
from snackbooks.application.dto.requests import RecordIncomeRequest
from snackbooks.application.dto.responses import (
    DeleteResponse,
    ErrorResponse,
    IncomeEntryResponse,
    IncomeListResponse,
)
from snackbooks.application.use_cases import RecordIncomeUseCase
from snackbooks.core.exceptions import IncomeEntryNotFoundError
from snackbooks.core.interfaces import ILedgerStore
from snackbooks.core.services.ledger import filter_income

router = APIRouter(prefix="/api/income", tags=["income"])


@router.post(
    "",
    response_model=IncomeEntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def record_income(
    request: RecordIncomeRequest,
    use_case: RecordIncomeUseCase = Depends(get_record_income_use_case),
) -> IncomeEntryResponse:
    """Record money received."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get("", response_model=IncomeListResponse)
async def list_income(
    search: str | None = None,
    limit: int = Query(default=1000, ge=1),
    offset: int = Query(default=0, ge=0),
    ledger: ILedgerStore = Depends(get_ledger),
) -> IncomeListResponse:
    """List income entries, newest first. Totals cover every match."""
    matched = filter_income(await ledger.list_income(), search)
    page = matched[offset : offset + limit]
    return IncomeListResponse(
        entries=[income_to_response(e) for e in page],
        total=len(matched),
        total_amount=sum(e.amount for e in matched),
    )


@router.delete(
    "/{entry_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_income(
    entry_id: int,
    ledger: ILedgerStore = Depends(get_ledger),
) -> DeleteResponse:
    """Delete an income entry."""
    if not await ledger.delete_income(entry_id):
        raise IncomeEntryNotFoundError(entry_id)
    return DeleteResponse(deleted=True, id=entry_id)
