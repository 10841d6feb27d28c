"""Pydantic schemas for budget endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from ledgerboard.domain.models.enums import BudgetPeriod


class BudgetCreateRequest(BaseModel):
    """Request schema for creating or replacing a budget."""

    category_id: str
    amount: Decimal = Field(..., description="Spending cap per period")
    period: BudgetPeriod = BudgetPeriod.MONTHLY
    start_date: Optional[datetime] = Field(default=None, description="Defaults to today")
    account_id: Optional[str] = None


class BudgetResponse(BaseModel):
    """Response schema for a single budget."""

    model_config = {"from_attributes": True}

    id: str
    category_id: str
    amount: Decimal
    period: BudgetPeriod
    start_date: datetime
    account_id: Optional[str] = None


class BudgetListResponse(BaseModel):
    budgets: list[BudgetResponse]
    count: int


class BudgetProgressResponse(BaseModel):
    """Spend against a budget in its current window."""

    budget_id: str
    category_id: str
    category_name: str
    category_color: str
    period: BudgetPeriod
    amount: Decimal
    spent: Decimal
    window_start: datetime
    window_end: datetime
    progress_percent: Decimal
    used_percent: Optional[Decimal] = None
    is_over_budget: bool
    remaining: Decimal
    over_amount: Decimal


class BudgetProgressListResponse(BaseModel):
    items: list[BudgetProgressResponse]
    over_budget_count: int
