"""API route modules."""

from snackbooks.api.routes.expenses import router as expenses_router
from snackbooks.api.routes.health import router as health_router
from snackbooks.api.routes.income import router as income_router
from snackbooks.api.routes.materials import router as materials_router
from snackbooks.api.routes.orders import router as orders_router
from snackbooks.api.routes.pricing import router as pricing_router
from snackbooks.api.routes.reports import router as reports_router

__all__ = [
    "health_router",
    "orders_router",
    "income_router",
    "expenses_router",
    "pricing_router",
    "materials_router",
    "reports_router",
]
