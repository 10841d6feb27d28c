"""Chart rendering to PNG bytes.

Figures are built directly (no pyplot state machine) so rendering is safe
from the HTTP thread pool.
"""

import io
from decimal import Decimal
from typing import Callable

# Import matplotlib with a non-interactive backend
import matplotlib
matplotlib.use("Agg")
from matplotlib.figure import Figure

from ledgerboard.core.exceptions import NotFoundError
from ledgerboard.core.formatters import format_currency, format_date_range, format_percentage
from ledgerboard.domain.models import TransactionFilter
from ledgerboard.domain.views import AccountBalanceSeries, CategoryShare, MonthlyBucket
from ledgerboard.services import ReportService

INCOME_COLOR = "#10B981"
EXPENSE_COLOR = "#EF4444"

def _to_png(figure: Figure) -> bytes:
    figure.tight_layout()
    buffer = io.BytesIO()
    figure.savefig(buffer, format="png")
    return buffer.getvalue()


def _empty(ax, message: str) -> None:
    ax.text(0.5, 0.5, message, ha="center", va="center", fontsize=14)
    ax.set_axis_off()


def render_income_expense(buckets: list[MonthlyBucket], currency: str = "USD") -> bytes:
    """Grouped bar chart of monthly income vs expenses."""
    figure = Figure(figsize=(8, 4), dpi=100)
    ax = figure.add_subplot(111)

    if not buckets:
        _empty(ax, "No data")
        return _to_png(figure)

    positions = range(len(buckets))
    width = 0.4
    ax.bar(
        [p - width / 2 for p in positions],
        [float(b.income) for b in buckets],
        width,
        label="Income",
        color=INCOME_COLOR,
    )
    ax.bar(
        [p + width / 2 for p in positions],
        [float(b.expense) for b in buckets],
        width,
        label="Expenses",
        color=EXPENSE_COLOR,
    )
    ax.set_xticks(list(positions))
    ax.set_xticklabels([b.label for b in buckets], rotation=45, ha="right", fontsize=8)
    ax.legend()

    net = sum((b.net for b in buckets), Decimal("0"))
    ax.set_title(f"Income vs Expenses (net {format_currency(net, currency)})", fontsize=10)
    return _to_png(figure)


def render_balance_evolution(series: list[AccountBalanceSeries]) -> bytes:
    """Line chart of account balances at each sample date."""
    figure = Figure(figsize=(8, 4), dpi=100)
    ax = figure.add_subplot(111)

    if not series or not series[0].points:
        _empty(ax, "No accounts")
        return _to_png(figure)

    for account_series in series:
        ax.plot(
            [p.date for p in account_series.points],
            [float(p.balance) for p in account_series.points],
            label=account_series.name,
            color=account_series.color,
            marker="o",
            markersize=3,
        )
    ax.legend(fontsize=8)
    first, last = series[0].points[0].date, series[0].points[-1].date
    ax.set_title(f"Balance Evolution: {format_date_range(first, last)}", fontsize=10)
    figure.autofmt_xdate()
    return _to_png(figure)


def render_category_distribution(shares: list[CategoryShare], currency: str = "USD") -> bytes:
    """Pie chart of category shares."""
    figure = Figure(figsize=(5, 4), dpi=100)
    ax = figure.add_subplot(111)

    if not shares:
        _empty(ax, "No data")
        return _to_png(figure)

    _, texts = ax.pie(
        [float(s.amount) for s in shares],
        labels=[f"{s.name} ({format_percentage(s.percentage)})" for s in shares],
        colors=[s.color for s in shares],
        startangle=90,
    )
    for text in texts:
        text.set_fontsize(9)

    total = sum((s.amount for s in shares), Decimal("0"))
    ax.set_title(f"Total: {format_currency(total, currency)}", fontsize=10, pad=10)
    ax.set_aspect("equal")
    return _to_png(figure)


ChartRenderer = Callable[[ReportService, TransactionFilter, str], bytes]

CHART_RENDERERS: dict[str, ChartRenderer] = {
    "income-expense": lambda reports, report_filter, currency: render_income_expense(
        reports.income_expense(report_filter), currency
    ),
    "balance-evolution": lambda reports, report_filter, currency: render_balance_evolution(
        reports.balance_evolution(report_filter)
    ),
    "category-distribution": lambda reports, report_filter, currency: render_category_distribution(
        reports.category_distribution(report_filter), currency
    ),
}

CHART_NAMES = tuple(CHART_RENDERERS)


def render_chart(
    name: str,
    reports: ReportService,
    report_filter: TransactionFilter,
    currency: str = "USD",
) -> bytes:
    """Render the named report chart. Raises NotFoundError for an unknown name."""
    renderer = CHART_RENDERERS.get(name)
    if renderer is None:
        raise NotFoundError("Chart", name)
    return renderer(reports, report_filter, currency)
