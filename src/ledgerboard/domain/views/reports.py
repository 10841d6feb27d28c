"""View models for aggregator and report outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ledgerboard.domain.models import DateRange, Transaction


@dataclass
class BudgetProgress:
    """Spend against a budget for its current window."""

    budget_id: str
    category_id: str
    amount: Decimal
    spent: Decimal
    window: DateRange
    progress_percent: Decimal  # clamped to 0..100 for progress bars
    used_percent: Optional[Decimal]  # unclamped; None when the cap is zero
    is_over_budget: bool
    remaining: Decimal = field(default_factory=lambda: Decimal("0"))
    over_amount: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class MonthlyBucket:
    """Income and expense totals for one calendar month."""

    key: str  # YYYY-MM
    label: str  # e.g. "Jan 2024"
    start: datetime
    income: Decimal = field(default_factory=lambda: Decimal("0"))
    expense: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


@dataclass
class BalancePoint:
    """Account balance at a sample instant."""

    date: datetime
    balance: Decimal


@dataclass
class AccountBalanceSeries:
    """Balance evolution of one account over a report range."""

    account_id: str
    name: str
    color: str
    initial_balance: Decimal
    points: list[BalancePoint] = field(default_factory=list)


@dataclass
class CategoryShare:
    """One slice of a category distribution."""

    category_id: str
    name: str
    color: str
    amount: Decimal
    percentage: Decimal


@dataclass
class CashFlowSummary:
    """Income, expense and net totals of a set of transactions."""

    total_income: Decimal = field(default_factory=lambda: Decimal("0"))
    total_expenses: Decimal = field(default_factory=lambda: Decimal("0"))
    transaction_count: int = 0

    @property
    def net_cash_flow(self) -> Decimal:
        return self.total_income - self.total_expenses


@dataclass
class TimeRange:
    """Named report period preset."""

    key: str
    label: str
    start: datetime
    end: datetime

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.start, end=self.end)


@dataclass
class AccountBalanceView:
    """Account with its derived current balance."""

    account_id: str
    name: str
    currency: str
    color: str
    initial_balance: Decimal
    current_balance: Decimal


@dataclass
class DashboardView:
    """Overview numbers shown on the dashboard."""

    total_balance: Decimal
    accounts: list[AccountBalanceView] = field(default_factory=list)
    month: Optional[TimeRange] = None
    monthly_income: Decimal = field(default_factory=lambda: Decimal("0"))
    monthly_expenses: Decimal = field(default_factory=lambda: Decimal("0"))
    recent_transactions: list[Transaction] = field(default_factory=list)
    expense_distribution: list[CategoryShare] = field(default_factory=list)
