"""Record Income Use Case: money received, optionally against an order."""

import math
from datetime import date

from snackbooks.application.dto.mappers import income_to_response
from snackbooks.application.dto.requests import RecordIncomeRequest
from snackbooks.application.dto.responses import IncomeEntryResponse
from snackbooks.config import get_logger
from snackbooks.core.entities.ledger import IncomeEntry
from snackbooks.core.exceptions import OrderNotFoundError, ValidationError
from snackbooks.core.interfaces.ledger_store import ILedgerStore
from snackbooks.core.interfaces.order_store import IOrderStore

logger = get_logger(__name__)


class RecordIncomeUseCase:
    """Validate and store an income entry. A linked order must exist."""

    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        order_store: IOrderStore | None = None,
    ):
        self._ledger_store = ledger_store
        self._order_store = order_store

    async def _get_ledger_store(self) -> ILedgerStore:
        if self._ledger_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_ledger_store

            self._ledger_store = await get_ledger_store()
        return self._ledger_store

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def execute(self, request: RecordIncomeRequest) -> IncomeEntry:
        """Execute record income use case."""
        customer = request.customer_name.strip()
        if not customer:
            raise ValidationError("customer_name", "Customer name is required")
        if not math.isfinite(request.amount) or request.amount <= 0:
            raise ValidationError("amount", "Amount must be greater than zero", request.amount)

        if request.order_id is not None:
            order = await (await self._get_order_store()).get_order(request.order_id)
            if order is None:
                raise OrderNotFoundError(request.order_id)

        entry = IncomeEntry(
            customer_name=customer,
            amount=request.amount,
            entry_date=request.entry_date or date.today(),
            order_id=request.order_id,
            order_size=(request.order_size or "").strip() or None,
            payment_method=request.payment_method,
            remarks=(request.remarks or "").strip() or None,
        )
        return await (await self._get_ledger_store()).create_income(entry)

    def to_response(self, result: IncomeEntry) -> IncomeEntryResponse:
        """Convert result to API response."""
        return income_to_response(result)
