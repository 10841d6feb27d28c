"""Pydantic schemas for report and dashboard endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from ledgerboard.api.schemas.transaction import TransactionResponse


class CashFlowSummaryResponse(BaseModel):
    """Income, expenses and net flow of the filtered transactions."""

    total_income: Decimal
    total_expenses: Decimal
    net_cash_flow: Decimal
    transaction_count: int


class MonthlyBucketResponse(BaseModel):
    model_config = {"from_attributes": True}

    key: str
    label: str
    income: Decimal
    expense: Decimal
    net: Decimal


class IncomeExpenseResponse(BaseModel):
    start: datetime
    end: datetime
    months: list[MonthlyBucketResponse]


class BalancePointResponse(BaseModel):
    model_config = {"from_attributes": True}

    date: datetime
    balance: Decimal


class AccountBalanceSeriesResponse(BaseModel):
    model_config = {"from_attributes": True}

    account_id: str
    name: str
    color: str
    initial_balance: Decimal
    points: list[BalancePointResponse]


class BalanceEvolutionResponse(BaseModel):
    start: datetime
    end: datetime
    series: list[AccountBalanceSeriesResponse]


class CategoryShareResponse(BaseModel):
    model_config = {"from_attributes": True}

    category_id: str
    name: str
    color: str
    amount: Decimal
    percentage: Decimal


class CategoryDistributionResponse(BaseModel):
    items: list[CategoryShareResponse]
    total: Decimal


class TimeRangeResponse(BaseModel):
    model_config = {"from_attributes": True}

    key: str
    label: str
    start: datetime
    end: datetime


class AccountBalanceResponse(BaseModel):
    model_config = {"from_attributes": True}

    account_id: str
    name: str
    currency: str
    color: str
    initial_balance: Decimal
    current_balance: Decimal


class DashboardResponse(BaseModel):
    """Overview numbers for the dashboard."""

    total_balance: Decimal
    accounts: list[AccountBalanceResponse]
    month: Optional[TimeRangeResponse] = None
    monthly_income: Decimal
    monthly_expenses: Decimal
    recent_transactions: list[TransactionResponse]
    expense_distribution: list[CategoryShareResponse]
