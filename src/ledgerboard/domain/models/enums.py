"""Enumerations for domain models."""

from enum import Enum


class AccountType(str, Enum):
    """Kinds of money-holding accounts."""

    BANK = "bank"
    CASH = "cash"
    MOBILE_MONEY = "mobile_money"
    CREDIT_CARD = "credit_card"
    INVESTMENT = "investment"


class CategoryType(str, Enum):
    """Whether a category groups income or expenses."""

    INCOME = "income"
    EXPENSE = "expense"


class TransactionType(str, Enum):
    """Types of ledger transactions."""

    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


class BudgetPeriod(str, Enum):
    """Budget recurrence periods."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
