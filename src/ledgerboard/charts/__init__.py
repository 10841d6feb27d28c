"""PNG chart rendering."""

from ledgerboard.charts.renderer import (
    CHART_NAMES,
    render_balance_evolution,
    render_category_distribution,
    render_chart,
    render_income_expense,
)

__all__ = [
    "CHART_NAMES",
    "render_chart",
    "render_income_expense",
    "render_balance_evolution",
    "render_category_distribution",
]
