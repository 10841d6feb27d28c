"""Service layer."""

from ledgerboard.services.ledger_service import (
    AccountCreate,
    BudgetCreate,
    CategoryCreate,
    LedgerService,
    TransactionCreate,
)
from ledgerboard.services.report_service import ReportService
from ledgerboard.services.budget_service import BudgetService

__all__ = [
    "LedgerService",
    "AccountCreate",
    "CategoryCreate",
    "TransactionCreate",
    "BudgetCreate",
    "ReportService",
    "BudgetService",
]
