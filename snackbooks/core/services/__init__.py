"""
Core business calculations.

Layer-pure services that depend only on:
- snackbooks/core/entities/*
- snackbooks/core/exceptions.py

NO infrastructure imports and no I/O. Callers load records through the
store interfaces and pass plain lists in.
"""

from snackbooks.core.services.ledger import (
    DailySummary,
    Forecast,
    LedgerTotals,
    OrderProfit,
    PaymentSummary,
    ProfitAnalysis,
    SizeProfit,
    daily_summary,
    filter_expenses,
    filter_income,
    filter_orders,
    forecast,
    ledger_totals,
    order_profits,
    orders_with_pending_payment,
    payment_status,
    payment_statuses,
    profit_analysis,
    size_profit_table,
)
from snackbooks.core.services.order_summary import build_line_items, summarize
from snackbooks.core.services.pricing import coerce_pricing_table
from snackbooks.core.services.production import (
    cost_of,
    material_price_lookup,
    order_production_cost,
    order_profit,
    requirements_for,
)

__all__ = [
    # Pricing
    "coerce_pricing_table",
    # Order summary
    "summarize",
    "build_line_items",
    # Production
    "requirements_for",
    "cost_of",
    "material_price_lookup",
    "order_production_cost",
    "order_profit",
    # Ledger
    "LedgerTotals",
    "PaymentSummary",
    "OrderProfit",
    "ProfitAnalysis",
    "SizeProfit",
    "DailySummary",
    "Forecast",
    "ledger_totals",
    "payment_status",
    "payment_statuses",
    "orders_with_pending_payment",
    "filter_orders",
    "filter_income",
    "filter_expenses",
    "order_profits",
    "profit_analysis",
    "size_profit_table",
    "daily_summary",
    "forecast",
]
