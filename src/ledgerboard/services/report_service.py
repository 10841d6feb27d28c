"""Report service: dashboard and report views over one ledger snapshot."""

from datetime import datetime
from typing import Optional

from ledgerboard.domain.models import (
    CategoryType,
    DateRange,
    Transaction,
    TransactionFilter,
    TransactionType,
)
from ledgerboard.domain.views import (
    AccountBalanceSeries,
    AccountBalanceView,
    CashFlowSummary,
    CategoryShare,
    DashboardView,
    MonthlyBucket,
    TimeRange,
)
from ledgerboard.services import aggregator
from ledgerboard.services.ledger_service import LedgerService


class ReportService:
    """
    Service for dashboard and report queries.

    Each method reads the ledger snapshot once, so all numbers it returns are
    consistent with each other even while edits happen concurrently.
    """

    def __init__(
        self,
        ledger: LedgerService,
        sample_days: int = aggregator.DEFAULT_SAMPLE_DAYS,
        recent_limit: int = 5,
    ):
        self._ledger = ledger
        self._sample_days = sample_days
        self._recent_limit = recent_limit

    def filtered_transactions(self, report_filter: TransactionFilter) -> list[Transaction]:
        """Transactions matching the filter, newest first."""
        snapshot = self._ledger.snapshot()
        return aggregator.sort_newest_first(
            aggregator.filter_transactions(snapshot.transactions, report_filter)
        )

    def summary(self, report_filter: TransactionFilter) -> CashFlowSummary:
        """Total income, expenses and net flow of the filtered transactions."""
        snapshot = self._ledger.snapshot()
        return aggregator.cash_flow_summary(
            aggregator.filter_transactions(snapshot.transactions, report_filter)
        )

    def income_expense(self, report_filter: TransactionFilter) -> list[MonthlyBucket]:
        """Monthly income vs expense buckets across the filter's date range."""
        date_range = self.resolve_range(report_filter)
        snapshot = self._ledger.snapshot()
        filtered = aggregator.filter_transactions(snapshot.transactions, report_filter)
        return aggregator.monthly_income_expense(filtered, date_range)

    def balance_evolution(self, report_filter: TransactionFilter) -> list[AccountBalanceSeries]:
        """
        Balance series for the filtered accounts (all accounts when none selected).

        Every ledger transaction is replayed, not just the filtered ones, so the
        series show real balances rather than partial sums.
        """
        date_range = self.resolve_range(report_filter)
        snapshot = self._ledger.snapshot()
        accounts = [
            a
            for a in snapshot.accounts
            if not report_filter.account_ids or a.id in report_filter.account_ids
        ]
        return aggregator.balance_evolution(
            accounts, snapshot.transactions, date_range, self._sample_days
        )

    def category_distribution(
        self,
        report_filter: TransactionFilter,
        category_type: Optional[CategoryType] = CategoryType.EXPENSE,
    ) -> list[CategoryShare]:
        """Share of each category in the filtered transactions."""
        snapshot = self._ledger.snapshot()
        filtered = aggregator.filter_transactions(snapshot.transactions, report_filter)
        return aggregator.category_distribution(filtered, snapshot.categories, category_type)

    def dashboard(self, now: Optional[datetime] = None) -> DashboardView:
        """Total balance, per-account balances and the current month at a glance."""
        now = now or self._ledger.now()
        snapshot = self._ledger.snapshot()

        balances = aggregator.current_balances(snapshot.accounts, snapshot.transactions)
        accounts = [
            AccountBalanceView(
                account_id=a.id,
                name=a.name,
                currency=a.currency,
                color=snapshot.account_color(a.id),
                initial_balance=a.initial_balance,
                current_balance=balances[a.id],
            )
            for a in snapshot.accounts
        ]

        month = aggregator.preset_time_ranges(now)["this_month"]
        month_txns = aggregator.filter_transactions(
            snapshot.transactions, TransactionFilter(date_range=month.date_range)
        )
        flow = aggregator.cash_flow_summary(month_txns)
        expenses = [t for t in month_txns if t.type == TransactionType.EXPENSE]

        return DashboardView(
            total_balance=sum(balances.values(), aggregator.ZERO),
            accounts=accounts,
            month=month,
            monthly_income=flow.total_income,
            monthly_expenses=flow.total_expenses,
            recent_transactions=aggregator.recent_transactions(
                snapshot.transactions, self._recent_limit
            ),
            expense_distribution=aggregator.category_distribution(
                expenses, snapshot.categories, CategoryType.EXPENSE
            ),
        )

    def time_ranges(self, now: Optional[datetime] = None) -> list[TimeRange]:
        """Report period presets relative to now."""
        return list(aggregator.preset_time_ranges(now or self._ledger.now()).values())

    def resolve_range(self, report_filter: TransactionFilter) -> DateRange:
        """The filter's date range, or the current month when it has none."""
        if report_filter.date_range is not None:
            return report_filter.date_range
        return aggregator.preset_time_ranges(self._ledger.now())["this_month"].date_range
