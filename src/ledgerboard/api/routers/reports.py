"""Report endpoints: summaries, chart series, CSV export and chart images."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from ledgerboard.api.deps import (
    get_context,
    get_csv_exporter,
    get_report_filter,
    get_report_service,
)
from ledgerboard.api.schemas import (
    AccountBalanceSeriesResponse,
    BalanceEvolutionResponse,
    CashFlowSummaryResponse,
    CategoryDistributionResponse,
    CategoryShareResponse,
    IncomeExpenseResponse,
    MonthlyBucketResponse,
    TimeRangeResponse,
)
from ledgerboard.app_context import AppContext
from ledgerboard.charts import render_chart
from ledgerboard.csv import CsvExporter
from ledgerboard.domain.models import CategoryType, TransactionFilter
from ledgerboard.services import ReportService
from ledgerboard.services.aggregator import ZERO

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/summary", response_model=CashFlowSummaryResponse)
def get_summary(
    report_filter: TransactionFilter = Depends(get_report_filter),
    reports: ReportService = Depends(get_report_service),
) -> CashFlowSummaryResponse:
    """Total income, expenses and net cash flow of the filtered transactions."""
    summary = reports.summary(report_filter)
    return CashFlowSummaryResponse(
        total_income=summary.total_income,
        total_expenses=summary.total_expenses,
        net_cash_flow=summary.net_cash_flow,
        transaction_count=summary.transaction_count,
    )


@router.get("/income-expense", response_model=IncomeExpenseResponse)
def get_income_expense(
    report_filter: TransactionFilter = Depends(get_report_filter),
    reports: ReportService = Depends(get_report_service),
) -> IncomeExpenseResponse:
    """Monthly income vs expense buckets (current month when no range is given)."""
    buckets = reports.income_expense(report_filter)
    date_range = reports.resolve_range(report_filter)
    return IncomeExpenseResponse(
        start=date_range.start,
        end=date_range.end,
        months=[MonthlyBucketResponse.model_validate(b) for b in buckets],
    )


@router.get("/balance-evolution", response_model=BalanceEvolutionResponse)
def get_balance_evolution(
    report_filter: TransactionFilter = Depends(get_report_filter),
    reports: ReportService = Depends(get_report_service),
) -> BalanceEvolutionResponse:
    """Balance of each selected account at regular sample dates."""
    series = reports.balance_evolution(report_filter)
    date_range = reports.resolve_range(report_filter)
    return BalanceEvolutionResponse(
        start=date_range.start,
        end=date_range.end,
        series=[AccountBalanceSeriesResponse.model_validate(s) for s in series],
    )


@router.get("/category-distribution", response_model=CategoryDistributionResponse)
def get_category_distribution(
    category_type: Optional[CategoryType] = Query(
        CategoryType.EXPENSE, description="Category type to break down"
    ),
    report_filter: TransactionFilter = Depends(get_report_filter),
    reports: ReportService = Depends(get_report_service),
) -> CategoryDistributionResponse:
    """Share of each category in the filtered transactions."""
    shares = reports.category_distribution(report_filter, category_type)
    return CategoryDistributionResponse(
        items=[CategoryShareResponse.model_validate(s) for s in shares],
        total=sum((s.amount for s in shares), ZERO),
    )


@router.get("/time-ranges", response_model=list[TimeRangeResponse])
def get_time_ranges(
    reports: ReportService = Depends(get_report_service),
) -> list[TimeRangeResponse]:
    """Report period presets relative to now."""
    return [TimeRangeResponse.model_validate(r) for r in reports.time_ranges()]


@router.get("/export")
def export_csv(
    report_filter: TransactionFilter = Depends(get_report_filter),
    exporter: CsvExporter = Depends(get_csv_exporter),
) -> Response:
    """Export the filtered transactions as CSV."""
    return Response(
        content=exporter.export_text(report_filter),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="transactions.csv"'},
    )


@router.get("/charts/{name}.png")
def get_chart(
    name: str,
    report_filter: TransactionFilter = Depends(get_report_filter),
    context: AppContext = Depends(get_context),
) -> Response:
    """Render a report chart as a PNG image."""
    image = render_chart(name, context.reports, report_filter, context.settings.currency)
    return Response(content=image, media_type="image/png")
