"""
Ledger aggregation and reporting.

Reduces orders, income and expense entries into dashboard figures:
totals and profit, per-order payment status, profit analysis, the
daily summary and the delivery forecast. Every function takes plain
lists and returns new values; inputs are never mutated.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, timedelta, tzinfo

from snackbooks.core.entities.ledger import (
    ExpenseEntry,
    ExpenseKind,
    IncomeEntry,
    PaymentState,
)
from snackbooks.core.entities.order import Order, OrderStatus
from snackbooks.core.entities.pricing import PACKET_SIZES, PricingTable, normalize_variant
from snackbooks.core.entities.production import (
    DEFAULT_PRODUCTION_CONFIG,
    MaterialRequirements,
    ProductionConfig,
)
from snackbooks.core.services.production import (
    PriceLookup,
    cost_of,
    order_production_cost,
    requirements_for,
)


@dataclass
class LedgerTotals:
    """Income/expense totals. Extra expenses are reported but never cut profit."""

    total_income: float = 0.0
    total_expense: float = 0.0
    extra_expense: float = 0.0
    profit: float = 0.0


@dataclass
class PaymentSummary:
    """How much of an order has been paid."""

    order_id: int | None
    total_amount: float
    total_paid: float
    pending: float
    status: PaymentState


@dataclass
class OrderProfit:
    """Revenue, estimated cost and payment state of one order."""

    order_id: int | None
    customer_name: str
    revenue: float
    production_cost: float
    profit: float
    margin_percent: float
    payment: PaymentSummary


@dataclass
class ProfitAnalysis:
    """Overall profit picture across all orders."""

    order_count: int = 0
    total_revenue: float = 0.0
    production_cost: float = 0.0
    net_profit: float = 0.0
    margin_percent: float = 0.0
    total_paid: float = 0.0
    pending_amount: float = 0.0


@dataclass
class SizeProfit:
    """Per-packet economics for one packet size."""

    size: int
    retail_price: float
    wholesale_price: float
    production_cost: float
    retail_profit: float
    wholesale_profit: float
    retail_margin_percent: float = 0.0
    wholesale_margin_percent: float = 0.0


@dataclass
class DailySummary:
    """Orders created on a given day."""

    day: date
    total_sales: float = 0.0
    order_count: int = 0
    total_weight: int = 0
    avg_order_value: float = 0.0


@dataclass
class Forecast:
    """Deliveries due within a window and the material they need."""

    start: date
    end: date
    orders: list[Order] = field(default_factory=list)
    total_weight: int = 0
    requirements: MaterialRequirements = field(default_factory=MaterialRequirements)
    expected_revenue: float = 0.0


def _margin(profit: float, revenue: float) -> float:
    """Profit as a percentage of revenue; zero when there is no revenue."""
    return profit / revenue * 100 if revenue > 0 else 0.0


# Totals


def ledger_totals(
    income: Iterable[IncomeEntry], expenses: Iterable[ExpenseEntry]
) -> LedgerTotals:
    """Sum income and expenses; profit ignores extra expenses."""
    total_income = sum(entry.amount for entry in income)

    total_expense = 0.0
    extra_expense = 0.0
    for entry in expenses:
        if entry.is_extra:
            extra_expense += entry.amount
        else:
            total_expense += entry.amount

    return LedgerTotals(
        total_income=total_income,
        total_expense=total_expense,
        extra_expense=extra_expense,
        profit=total_income - total_expense,
    )


# Payments


def payment_status(order: Order, payments: Iterable[IncomeEntry]) -> PaymentSummary:
    """Paid / Partial / Unpaid from the income entries linked to the order."""
    paid = sum(p.amount for p in payments if p.order_id is not None and p.order_id == order.id)
    pending = order.total_amount - paid

    if pending <= 0:
        state = PaymentState.PAID
    elif paid > 0:
        state = PaymentState.PARTIAL
    else:
        state = PaymentState.UNPAID

    return PaymentSummary(
        order_id=order.id,
        total_amount=order.total_amount,
        total_paid=paid,
        pending=pending,
        status=state,
    )


def payment_statuses(
    orders: Iterable[Order], payments: Sequence[IncomeEntry]
) -> list[PaymentSummary]:
    """Payment status of every order, in input order."""
    return [payment_status(order, payments) for order in orders]


def orders_with_pending_payment(
    orders: Iterable[Order], payments: Sequence[IncomeEntry]
) -> list[tuple[Order, PaymentSummary]]:
    """Orders that still have money outstanding."""
    result = []
    for order in orders:
        summary = payment_status(order, payments)
        if summary.pending > 0:
            result.append((order, summary))
    return result


# Filters


def filter_orders(
    orders: Iterable[Order],
    search: str | None = None,
    status: OrderStatus | None = None,
    price_type: str | None = None,
    delivery_date: date | None = None,
) -> list[Order]:
    """Orders matching every given criterion; None means no constraint."""
    needle = (search or "").strip().lower()
    wanted_type = normalize_variant(price_type) if price_type else None

    def matches(order: Order) -> bool:
        if needle and needle not in order.customer_name.lower():
            return False
        if status is not None and order.status != status:
            return False
        if wanted_type is not None and normalize_variant(order.price_type) != wanted_type:
            return False
        if delivery_date is not None and order.delivery_date != delivery_date:
            return False
        return True

    return [order for order in orders if matches(order)]


def filter_income(
    entries: Iterable[IncomeEntry], search: str | None = None
) -> list[IncomeEntry]:
    """Income entries whose customer, order size or remarks contain `search`."""
    needle = (search or "").strip().lower()
    if not needle:
        return list(entries)
    return [
        e
        for e in entries
        if needle in e.customer_name.lower()
        or needle in (e.order_size or "").lower()
        or needle in (e.remarks or "").lower()
    ]


def filter_expenses(
    entries: Iterable[ExpenseEntry],
    search: str | None = None,
    kind: ExpenseKind = ExpenseKind.ALL,
) -> list[ExpenseEntry]:
    """Expense entries by text and business/extra kind."""
    needle = (search or "").strip().lower()

    def matches(entry: ExpenseEntry) -> bool:
        if kind is ExpenseKind.BUSINESS and entry.is_extra:
            return False
        if kind is ExpenseKind.EXTRA and not entry.is_extra:
            return False
        if needle and needle not in entry.item.lower() and needle not in (entry.remarks or "").lower():
            return False
        return True

    return [entry for entry in entries if matches(entry)]


# Profit


def order_profits(
    orders: Iterable[Order],
    payments: Sequence[IncomeEntry],
    price_lookup: PriceLookup,
    config: ProductionConfig = DEFAULT_PRODUCTION_CONFIG,
) -> list[OrderProfit]:
    """Per-order revenue, estimated cost, margin and payment state."""
    rows = []
    for order in orders:
        cost = order_production_cost(order, price_lookup, config)
        profit = order.total_amount - cost
        rows.append(
            OrderProfit(
                order_id=order.id,
                customer_name=order.customer_name,
                revenue=order.total_amount,
                production_cost=cost,
                profit=profit,
                margin_percent=_margin(profit, order.total_amount),
                payment=payment_status(order, payments),
            )
        )
    return rows


def profit_analysis(
    orders: Sequence[Order],
    payments: Iterable[IncomeEntry],
    price_lookup: PriceLookup,
    config: ProductionConfig = DEFAULT_PRODUCTION_CONFIG,
) -> ProfitAnalysis:
    """
    Revenue, production cost and margin over all orders.

    Pending amount is revenue minus every payment received, linked to
    an order or not.
    """
    revenue = sum(order.total_amount for order in orders)
    cost = sum(order_production_cost(order, price_lookup, config) for order in orders)
    paid = sum(p.amount for p in payments)
    profit = revenue - cost

    return ProfitAnalysis(
        order_count=len(orders),
        total_revenue=revenue,
        production_cost=cost,
        net_profit=profit,
        margin_percent=_margin(profit, revenue),
        total_paid=paid,
        pending_amount=revenue - paid,
    )


def size_profit_table(
    table: PricingTable,
    price_lookup: PriceLookup,
    config: ProductionConfig = DEFAULT_PRODUCTION_CONFIG,
    sizes: Iterable[int] = PACKET_SIZES,
) -> list[SizeProfit]:
    """Retail and wholesale profit of a single packet of each size."""
    rows = []
    for size in sizes:
        cost = cost_of(requirements_for(size, config), price_lookup, config)
        retail = table.get_price("retail", size)
        wholesale = table.get_price("wholesale", size)
        rows.append(
            SizeProfit(
                size=size,
                retail_price=retail,
                wholesale_price=wholesale,
                production_cost=cost,
                retail_profit=retail - cost,
                wholesale_profit=wholesale - cost,
                retail_margin_percent=_margin(retail - cost, retail),
                wholesale_margin_percent=_margin(wholesale - cost, wholesale),
            )
        )
    return rows


# Daily summary and forecast


def daily_summary(
    orders: Iterable[Order], day: date, tz: tzinfo | None = None
) -> DailySummary:
    """
    Sales figures for orders created on `day`.

    Creation times are compared as calendar days in `tz`, the server's
    local zone when omitted.
    """
    todays = [order for order in orders if order.created_at.astimezone(tz).date() == day]
    total_sales = sum(order.total_amount for order in todays)
    count = len(todays)

    return DailySummary(
        day=day,
        total_sales=total_sales,
        order_count=count,
        total_weight=sum(order.total_weight for order in todays),
        avg_order_value=total_sales / count if count else 0.0,
    )


def forecast(
    orders: Iterable[Order],
    today: date,
    days: int = 7,
    config: ProductionConfig = DEFAULT_PRODUCTION_CONFIG,
) -> Forecast:
    """Orders due for delivery in [today, today + days] and what they need."""
    end = today + timedelta(days=days)
    upcoming = [order for order in orders if today <= order.delivery_date <= end]
    total_weight = sum(order.total_weight for order in upcoming)

    return Forecast(
        start=today,
        end=end,
        orders=upcoming,
        total_weight=total_weight,
        requirements=requirements_for(total_weight, config),
        expected_revenue=sum(order.total_amount for order in upcoming),
    )
