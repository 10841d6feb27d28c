"""Domain layer - pure business models with no external dependencies."""

from ledgerboard.domain.models import (
    Account,
    Category,
    Transaction,
    Budget,
    DateRange,
    TransactionFilter,
    AccountType,
    CategoryType,
    TransactionType,
    BudgetPeriod,
)
from ledgerboard.domain.snapshot import LedgerSnapshot

__all__ = [
    "Account",
    "Category",
    "Transaction",
    "Budget",
    "DateRange",
    "TransactionFilter",
    "AccountType",
    "CategoryType",
    "TransactionType",
    "BudgetPeriod",
    "LedgerSnapshot",
]
