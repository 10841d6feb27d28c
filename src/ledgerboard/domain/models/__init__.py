"""Domain models package."""

from ledgerboard.domain.models.enums import (
    AccountType,
    CategoryType,
    TransactionType,
    BudgetPeriod,
)
from ledgerboard.domain.models.account import Account
from ledgerboard.domain.models.category import Category
from ledgerboard.domain.models.transaction import Transaction
from ledgerboard.domain.models.budget import Budget
from ledgerboard.domain.models.date_range import DateRange
from ledgerboard.domain.models.filters import TransactionFilter, ALL_TRANSACTION_TYPES

__all__ = [
    "AccountType",
    "CategoryType",
    "TransactionType",
    "BudgetPeriod",
    "Account",
    "Category",
    "Transaction",
    "Budget",
    "DateRange",
    "TransactionFilter",
    "ALL_TRANSACTION_TYPES",
]
