"""Get Profit Report Use Case: margins, per-size economics and forecast."""

from dataclasses import dataclass
from datetime import date

from snackbooks.application.dto.mappers import requirements_to_response
from snackbooks.application.dto.requests import ReportRequest
from snackbooks.application.dto.responses import (
    ForecastResponse,
    ProfitAnalysisResponse,
    ProfitReportResponse,
    SizeProfitResponse,
)
from snackbooks.config import get_logger, get_settings
from snackbooks.core.entities.production import ProductionConfig
from snackbooks.core.interfaces.ledger_store import ILedgerStore
from snackbooks.core.interfaces.material_store import IMaterialStore
from snackbooks.core.interfaces.order_store import IOrderStore
from snackbooks.core.interfaces.pricing_store import IPricingStore
from snackbooks.core.services.ledger import (
    Forecast,
    ProfitAnalysis,
    SizeProfit,
    forecast,
    profit_analysis,
    size_profit_table,
)
from snackbooks.core.services.production import cost_of, material_price_lookup

logger = get_logger(__name__)


@dataclass
class ProfitReport:
    analysis: ProfitAnalysis
    sizes: list[SizeProfit]
    forecast: Forecast
    forecast_cost: float


class GetProfitReportUseCase:
    """Profit analysis across orders, per-packet profit and upcoming demand."""

    def __init__(
        self,
        order_store: IOrderStore | None = None,
        ledger_store: ILedgerStore | None = None,
        material_store: IMaterialStore | None = None,
        pricing_store: IPricingStore | None = None,
        config: ProductionConfig | None = None,
        forecast_days: int | None = None,
    ):
        self._order_store = order_store
        self._ledger_store = ledger_store
        self._material_store = material_store
        self._pricing_store = pricing_store
        self._config = config
        self._forecast_days = forecast_days

    async def _get_order_store(self) -> IOrderStore:
        if self._order_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_order_store

            self._order_store = await get_order_store()
        return self._order_store

    async def _get_ledger_store(self) -> ILedgerStore:
        if self._ledger_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_ledger_store

            self._ledger_store = await get_ledger_store()
        return self._ledger_store

    async def _get_material_store(self) -> IMaterialStore:
        if self._material_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_material_store

            self._material_store = await get_material_store()
        return self._material_store

    async def _get_pricing_store(self) -> IPricingStore:
        if self._pricing_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_pricing_store

            self._pricing_store = await get_pricing_store()
        return self._pricing_store

    async def execute(self, request: ReportRequest | None = None) -> ProfitReport:
        today = (request.day if request else None) or date.today()

        production = get_settings().production
        config = self._config or production.to_config()
        days = self._forecast_days if self._forecast_days is not None else production.forecast_days

        orders = await (await self._get_order_store()).list_orders()
        payments = await (await self._get_ledger_store()).list_income()
        materials = await (await self._get_material_store()).load()
        table = await (await self._get_pricing_store()).load()

        lookup = material_price_lookup(materials)
        upcoming = forecast(orders, today, days, config)

        report = ProfitReport(
            analysis=profit_analysis(orders, payments, lookup, config),
            sizes=size_profit_table(table, lookup, config),
            forecast=upcoming,
            forecast_cost=cost_of(upcoming.requirements, lookup, config),
        )
        logger.info(
            "profit_report_built",
            orders=report.analysis.order_count,
            net_profit=report.analysis.net_profit,
            upcoming_orders=len(upcoming.orders),
        )
        return report

    def to_response(self, result: ProfitReport) -> ProfitReportResponse:
        """Convert result to API response."""
        a = result.analysis
        f = result.forecast
        return ProfitReportResponse(
            analysis=ProfitAnalysisResponse(
                order_count=a.order_count,
                total_revenue=a.total_revenue,
                production_cost=a.production_cost,
                net_profit=a.net_profit,
                margin_percent=a.margin_percent,
                total_paid=a.total_paid,
                pending_amount=a.pending_amount,
            ),
            sizes=[
                SizeProfitResponse(
                    size=s.size,
                    retail_price=s.retail_price,
                    wholesale_price=s.wholesale_price,
                    production_cost=s.production_cost,
                    retail_profit=s.retail_profit,
                    wholesale_profit=s.wholesale_profit,
                    retail_margin_percent=s.retail_margin_percent,
                    wholesale_margin_percent=s.wholesale_margin_percent,
                )
                for s in result.sizes
            ],
            forecast=ForecastResponse(
                start=f.start,
                end=f.end,
                order_count=len(f.orders),
                total_weight=f.total_weight,
                requirements=requirements_to_response(
                    f.requirements, f.total_weight, result.forecast_cost
                ),
                expected_revenue=f.expected_revenue,
            ),
        )
