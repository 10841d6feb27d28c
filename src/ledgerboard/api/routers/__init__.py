"""API routers package."""

from ledgerboard.api.routers.accounts import router as accounts_router
from ledgerboard.api.routers.categories import router as categories_router
from ledgerboard.api.routers.transactions import router as transactions_router
from ledgerboard.api.routers.budgets import router as budgets_router
from ledgerboard.api.routers.reports import router as reports_router
from ledgerboard.api.routers.dashboard import router as dashboard_router

__all__ = [
    "accounts_router",
    "categories_router",
    "transactions_router",
    "budgets_router",
    "reports_router",
    "dashboard_router",
]
