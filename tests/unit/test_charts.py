"""
Unit tests for chart rendering.

Tests cover:
- Each chart renders PNG bytes from aggregator series
- Empty inputs still render
- Charts looked up by name
"""

import pytest

from ledgerboard.charts import (
    CHART_NAMES,
    render_balance_evolution,
    render_category_distribution,
    render_chart,
    render_income_expense,
)
from ledgerboard.core.exceptions import NotFoundError
from ledgerboard.domain.models import DateRange, TransactionFilter
from ledgerboard.services import ReportService

from conftest import utc_datetime

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
RANGE = DateRange(utc_datetime(2024, 5, 1, 0), utc_datetime(2024, 6, 30, 0))


class TestCharts:
    """Tests for PNG chart rendering."""

    def test_income_expense_chart(self, report_service: ReportService):
        buckets = report_service.income_expense(TransactionFilter(date_range=RANGE))

        assert render_income_expense(buckets).startswith(PNG_MAGIC)

    def test_balance_evolution_chart(self, report_service: ReportService):
        series = report_service.balance_evolution(TransactionFilter(date_range=RANGE))

        assert render_balance_evolution(series).startswith(PNG_MAGIC)

    def test_category_distribution_chart(self, report_service: ReportService):
        shares = report_service.category_distribution(TransactionFilter(date_range=RANGE))

        assert render_category_distribution(shares, "KES").startswith(PNG_MAGIC)

    @pytest.mark.parametrize(
        "render",
        [render_income_expense, render_balance_evolution, render_category_distribution],
    )
    def test_empty_input_renders_placeholder(self, render):
        assert render([]).startswith(PNG_MAGIC)


class TestRenderChart:
    """Tests for rendering a chart by name."""

    @pytest.mark.parametrize("name", CHART_NAMES)
    def test_every_named_chart_renders(self, report_service: ReportService, name):
        image = render_chart(name, report_service, TransactionFilter(date_range=RANGE), "USD")

        assert image.startswith(PNG_MAGIC)

    def test_unknown_name_raises_not_found(self, report_service: ReportService):
        with pytest.raises(NotFoundError):
            render_chart("radar", report_service, TransactionFilter(date_range=RANGE))
