"""Dashboard endpoint."""

from fastapi import APIRouter, Depends

from ledgerboard.api.deps import get_ledger_service, get_report_service
from ledgerboard.api.schemas import (
    AccountBalanceResponse,
    CategoryShareResponse,
    DashboardResponse,
    TimeRangeResponse,
    transaction_response,
)
from ledgerboard.services import LedgerService, ReportService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    ledger: LedgerService = Depends(get_ledger_service),
    reports: ReportService = Depends(get_report_service),
) -> DashboardResponse:
    """Total balance, account balances, this month's flow and recent activity."""
    view = reports.dashboard()
    snapshot = ledger.snapshot()
    return DashboardResponse(
        total_balance=view.total_balance,
        accounts=[AccountBalanceResponse.model_validate(a) for a in view.accounts],
        month=TimeRangeResponse.model_validate(view.month) if view.month else None,
        monthly_income=view.monthly_income,
        monthly_expenses=view.monthly_expenses,
        recent_transactions=[
            transaction_response(t, snapshot) for t in view.recent_transactions
        ],
        expense_distribution=[
            CategoryShareResponse.model_validate(s) for s in view.expense_distribution
        ],
    )
