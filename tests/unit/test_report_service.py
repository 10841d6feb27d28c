"""
Unit tests for ReportService.

Tests cover:
- Filtered transaction lists (newest first)
- Cash flow summary
- Default report range
- Balance evolution account restriction
- Dashboard view
"""

from decimal import Decimal

from ledgerboard.domain.models import DateRange, TransactionFilter, TransactionType
from ledgerboard.services import ReportService

from conftest import utc_datetime

JUNE = DateRange(utc_datetime(2024, 6, 1, 0), utc_datetime(2024, 6, 30, 23))


class TestFilteredQueries:
    """Tests for filter-driven report queries."""

    def test_filtered_transactions_newest_first(self, report_service: ReportService):
        result = report_service.filtered_transactions(TransactionFilter(date_range=JUNE))

        assert [t.id for t in result] == ["t4", "t3", "t2", "t1"]

    def test_summary_over_june(self, report_service: ReportService):
        """
        GIVEN the seeded ledger
        WHEN I summarize June
        THEN income 3000, expenses 1250 and net 1750 are reported
        """
        summary = report_service.summary(TransactionFilter(date_range=JUNE))

        assert summary.total_income == Decimal("3000")
        assert summary.total_expenses == Decimal("1250")
        assert summary.net_cash_flow == Decimal("1750")
        assert summary.transaction_count == 4

    def test_income_expense_defaults_to_current_month(self, report_service: ReportService):
        buckets = report_service.income_expense(TransactionFilter())

        assert [b.key for b in buckets] == ["2024-06"]

    def test_income_expense_respects_type_filter(self, report_service: ReportService):
        report_filter = TransactionFilter(
            date_range=DateRange(utc_datetime(2024, 5, 1, 0), utc_datetime(2024, 6, 30, 0)),
            transaction_types={TransactionType.INCOME},
        )

        buckets = report_service.income_expense(report_filter)

        assert [(b.key, b.income, b.expense) for b in buckets] == [
            ("2024-05", Decimal("500"), Decimal("0")),
            ("2024-06", Decimal("3000"), Decimal("0")),
        ]


class TestBalanceEvolution:
    """Tests for balance series through the service."""

    def test_restricts_accounts_but_replays_whole_ledger(self, report_service: ReportService):
        """
        GIVEN a filter selecting only the wallet and only expenses
        WHEN I request balance evolution for June
        THEN one series is returned and the incoming transfer still counts
        """
        report_filter = TransactionFilter(
            date_range=DateRange(utc_datetime(2024, 6, 1, 0), utc_datetime(2024, 6, 15, 0)),
            account_ids={"acc-wallet"},
            transaction_types={TransactionType.EXPENSE},
        )

        series = report_service.balance_evolution(report_filter)

        assert [s.account_id for s in series] == ["acc-wallet"]
        assert series[0].points[-1].balance == Decimal("250")

    def test_all_accounts_when_none_selected(self, report_service: ReportService):
        series = report_service.balance_evolution(TransactionFilter(date_range=JUNE))

        assert {s.account_id for s in series} == {"acc-checking", "acc-wallet"}


class TestDashboard:
    """Tests for the dashboard view."""

    def test_dashboard_numbers(self, report_service: ReportService):
        """
        GIVEN the seeded ledger and now = 2024-06-15
        WHEN I build the dashboard
        THEN totals, balances, this month's flow and recent activity match
        """
        view = report_service.dashboard()

        assert view.total_balance == Decimal("3270")
        assert {a.account_id: a.current_balance for a in view.accounts} == {
            "acc-checking": Decimal("3020"),
            "acc-wallet": Decimal("250"),
        }
        assert view.monthly_income == Decimal("3000")
        assert view.monthly_expenses == Decimal("1250")
        assert [t.id for t in view.recent_transactions] == ["t4", "t3", "t2", "t1", "t5"]
        assert [s.category_id for s in view.expense_distribution] == ["cat-rent", "cat-food"]
        assert view.month.key == "this_month"

    def test_recent_limit_is_configurable(self, seeded_ledger):
        reports = ReportService(seeded_ledger, recent_limit=2)

        assert len(reports.dashboard().recent_transactions) == 2

    def test_time_ranges(self, report_service: ReportService):
        keys = [r.key for r in report_service.time_ranges()]

        assert keys == ["this_month", "last_month", "this_week", "this_year", "custom"]
