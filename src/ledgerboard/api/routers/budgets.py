"""Budget management and progress endpoints."""

from dataclasses import replace

from fastapi import APIRouter, Depends, Response

from ledgerboard.api.deps import get_budget_service, get_ledger_service
from ledgerboard.api.schemas import (
    BudgetCreateRequest,
    BudgetListResponse,
    BudgetProgressListResponse,
    BudgetProgressResponse,
    BudgetResponse,
)
from ledgerboard.domain.snapshot import LedgerSnapshot
from ledgerboard.domain.views import BudgetProgress
from ledgerboard.services import BudgetCreate, BudgetService, LedgerService

router = APIRouter(prefix="/budgets", tags=["budgets"])


def _progress_response(progress: BudgetProgress, snapshot: LedgerSnapshot) -> BudgetProgressResponse:
    budget = snapshot.budgets_by_id[progress.budget_id]
    return BudgetProgressResponse(
        budget_id=progress.budget_id,
        category_id=progress.category_id,
        category_name=snapshot.category_name(progress.category_id),
        category_color=snapshot.category_color(progress.category_id),
        period=budget.period,
        amount=progress.amount,
        spent=progress.spent,
        window_start=progress.window.start,
        window_end=progress.window.end,
        progress_percent=progress.progress_percent,
        used_percent=progress.used_percent,
        is_over_budget=progress.is_over_budget,
        remaining=progress.remaining,
        over_amount=progress.over_amount,
    )


@router.get("", response_model=BudgetListResponse)
def list_budgets(
    ledger: LedgerService = Depends(get_ledger_service),
) -> BudgetListResponse:
    """List all budgets."""
    budgets = [BudgetResponse.model_validate(b) for b in ledger.list_budgets()]
    return BudgetListResponse(budgets=budgets, count=len(budgets))


@router.post("", response_model=BudgetResponse, status_code=201)
def create_budget(
    request: BudgetCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> BudgetResponse:
    """Create a new budget for a category."""
    budget = ledger.add_budget(BudgetCreate(**request.model_dump()))
    return BudgetResponse.model_validate(budget)


@router.get("/progress", response_model=BudgetProgressListResponse)
def all_budget_progress(
    ledger: LedgerService = Depends(get_ledger_service),
    budgets: BudgetService = Depends(get_budget_service),
) -> BudgetProgressListResponse:
    """Progress of every budget in its current period window."""
    snapshot = ledger.snapshot()
    items = [
        _progress_response(p, snapshot)
        for p in budgets.all_progress()
        if p.budget_id in snapshot.budgets_by_id
    ]
    return BudgetProgressListResponse(
        items=items,
        over_budget_count=sum(1 for item in items if item.is_over_budget),
    )


@router.get("/{budget_id}", response_model=BudgetResponse)
def get_budget(
    budget_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> BudgetResponse:
    """Get budget by ID."""
    return BudgetResponse.model_validate(ledger.get_budget(budget_id))


@router.get("/{budget_id}/progress", response_model=BudgetProgressResponse)
def budget_progress(
    budget_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
    budgets: BudgetService = Depends(get_budget_service),
) -> BudgetProgressResponse:
    """Progress of one budget in its current period window."""
    progress = budgets.progress_for(budget_id)
    return _progress_response(progress, ledger.snapshot())


@router.put("/{budget_id}", response_model=BudgetResponse)
def update_budget(
    budget_id: str,
    request: BudgetCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> BudgetResponse:
    """Replace a budget's fields; a missing start date keeps the current one."""
    existing = ledger.get_budget(budget_id)
    updated = replace(
        existing,
        category_id=request.category_id,
        amount=request.amount,
        period=request.period,
        start_date=request.start_date or existing.start_date,
        account_id=request.account_id,
    )
    return BudgetResponse.model_validate(ledger.update_budget(updated))


@router.delete("/{budget_id}", status_code=204)
def delete_budget(
    budget_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Delete a budget."""
    ledger.delete_budget(budget_id)
    return Response(status_code=204)
