"""Dependency injection for FastAPI."""

from datetime import datetime
from typing import Optional

from fastapi import Depends, Query

from ledgerboard.app_context import AppContext, get_app_context
from ledgerboard.core.exceptions import ValidationError
from ledgerboard.core.timezone import to_local
from ledgerboard.csv import CsvExporter
from ledgerboard.domain.models import DateRange, TransactionFilter, TransactionType
from ledgerboard.domain.models.filters import ALL_TRANSACTION_TYPES
from ledgerboard.services import BudgetService, LedgerService, ReportService
from ledgerboard.services.aggregator import preset_time_ranges


def get_context() -> AppContext:
    """Provide the application context."""
    return get_app_context()


def get_ledger_service(context: AppContext = Depends(get_context)) -> LedgerService:
    """Provide LedgerService instance."""
    return context.ledger


def get_report_service(context: AppContext = Depends(get_context)) -> ReportService:
    """Provide ReportService instance."""
    return context.reports


def get_budget_service(context: AppContext = Depends(get_context)) -> BudgetService:
    """Provide BudgetService instance."""
    return context.budgets


def get_csv_exporter(context: AppContext = Depends(get_context)) -> CsvExporter:
    """Provide CsvExporter instance."""
    return context.csv_exporter


def _split_ids(value: Optional[str]) -> frozenset[str]:
    if not value:
        return frozenset()
    return frozenset(part.strip() for part in value.split(",") if part.strip())


def _parse_types(value: Optional[str]) -> frozenset[TransactionType]:
    if value is None:
        return ALL_TRANSACTION_TYPES
    types = set()
    for part in _split_ids(value):
        try:
            types.add(TransactionType(part.lower()))
        except ValueError:
            raise ValidationError(f"Unknown transaction type: {part}")
    return frozenset(types)


def get_report_filter(
    period: Optional[str] = Query(
        None, description="Preset range: this_month, last_month, this_week, this_year, custom"
    ),
    start: Optional[datetime] = Query(None, description="Range start (inclusive)"),
    end: Optional[datetime] = Query(None, description="Range end (inclusive)"),
    account_ids: Optional[str] = Query(None, description="Comma-separated account IDs (all if empty)"),
    category_ids: Optional[str] = Query(None, description="Comma-separated category IDs (all if empty)"),
    types: Optional[str] = Query(None, description="Comma-separated transaction types (all if omitted)"),
    search: Optional[str] = Query(None, description="Case-insensitive description match"),
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionFilter:
    """
    Build a TransactionFilter from query parameters.

    A preset period gives both bounds; explicit start/end override either
    bound. With neither, the range is unbounded.
    """
    range_start: Optional[datetime] = None
    range_end: Optional[datetime] = None

    if period:
        presets = preset_time_ranges(ledger.now())
        preset = presets.get(period)
        if preset is None:
            raise ValidationError(f"Unknown period: {period}")
        range_start, range_end = preset.start, preset.end

    if start is not None:
        range_start = to_local(start)
    if end is not None:
        range_end = to_local(end)

    date_range = None
    if range_start is not None or range_end is not None:
        if range_start is None or range_end is None:
            raise ValidationError("Both start and end are required for a custom range")
        date_range = DateRange(start=range_start, end=range_end)

    return TransactionFilter(
        date_range=date_range,
        account_ids=_split_ids(account_ids),
        category_ids=_split_ids(category_ids),
        transaction_types=_parse_types(types),
        search=search,
    )
