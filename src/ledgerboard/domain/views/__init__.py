"""View models for service outputs."""

from ledgerboard.domain.views.reports import (
    BudgetProgress,
    MonthlyBucket,
    BalancePoint,
    AccountBalanceSeries,
    CategoryShare,
    CashFlowSummary,
    TimeRange,
    AccountBalanceView,
    DashboardView,
)

__all__ = [
    "BudgetProgress",
    "MonthlyBucket",
    "BalancePoint",
    "AccountBalanceSeries",
    "CategoryShare",
    "CashFlowSummary",
    "TimeRange",
    "AccountBalanceView",
    "DashboardView",
]
