"""Get Ledger Summary Use Case: dashboard totals and payment states."""

from dataclasses import dataclass, field
from datetime import date

from snackbooks.application.dto.mappers import daily_to_response, payment_to_response
from snackbooks.application.dto.requests import ReportRequest
from snackbooks.application.dto.responses import LedgerSummaryResponse, LedgerTotalsResponse
from snackbooks.config import get_logger
from snackbooks.core.interfaces.ledger_store import ILedgerStore
from snackbooks.core.interfaces.order_store import IOrderStore
from snackbooks.core.services.ledger import (
    DailySummary,
    LedgerTotals,
    PaymentSummary,
    daily_summary,
    ledger_totals,
    payment_statuses,
)

logger = get_logger(__name__)


@dataclass
class LedgerSummaryResult:
    totals: LedgerTotals
    today: DailySummary
    payments: list[PaymentSummary] = field(default_factory=list)

    @property
    def pending_orders(self) -> int:
        return sum(1 for p in self.payments if p.pending > 0)


class GetLedgerSummaryUseCase:
    """Ledger totals, the day's sales and every order's payment status."""

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

    async def execute(self, request: ReportRequest | None = None) -> LedgerSummaryResult:
        day = (request.day if request else None) or date.today()

        ledger = await self._get_ledger_store()
        income = await ledger.list_income()
        expenses = await ledger.list_expenses()
        orders = await (await self._get_order_store()).list_orders()

        result = LedgerSummaryResult(
            totals=ledger_totals(income, expenses),
            today=daily_summary(orders, day),
            payments=payment_statuses(orders, income),
        )
        logger.debug(
            "ledger_summary_built",
            income_entries=len(income),
            expense_entries=len(expenses),
            orders=len(orders),
            profit=result.totals.profit,
        )
        return result

    def to_response(self, result: LedgerSummaryResult) -> LedgerSummaryResponse:
        """Convert result to API response."""
        totals = result.totals
        return LedgerSummaryResponse(
            totals=LedgerTotalsResponse(
                total_income=totals.total_income,
                total_expense=totals.total_expense,
                extra_expense=totals.extra_expense,
                profit=totals.profit,
            ),
            today=daily_to_response(result.today),
            payments=[payment_to_response(p) for p in result.payments],
            pending_orders=result.pending_orders,
        )
