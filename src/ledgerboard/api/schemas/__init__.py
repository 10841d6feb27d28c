"""Pydantic schemas for API request/response validation."""

from ledgerboard.api.schemas.account import (
    AccountCreateRequest,
    AccountListResponse,
    AccountResponse,
)
from ledgerboard.api.schemas.category import (
    CategoryCreateRequest,
    CategoryListResponse,
    CategoryResponse,
)
from ledgerboard.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
    TransactionUpdateRequest,
    transaction_response,
)
from ledgerboard.api.schemas.budget import (
    BudgetCreateRequest,
    BudgetListResponse,
    BudgetProgressListResponse,
    BudgetProgressResponse,
    BudgetResponse,
)
from ledgerboard.api.schemas.report import (
    AccountBalanceResponse,
    AccountBalanceSeriesResponse,
    BalanceEvolutionResponse,
    BalancePointResponse,
    CashFlowSummaryResponse,
    CategoryDistributionResponse,
    CategoryShareResponse,
    DashboardResponse,
    IncomeExpenseResponse,
    MonthlyBucketResponse,
    TimeRangeResponse,
)

__all__ = [
    # Account
    "AccountCreateRequest",
    "AccountResponse",
    "AccountListResponse",
    # Category
    "CategoryCreateRequest",
    "CategoryResponse",
    "CategoryListResponse",
    # Transaction
    "TransactionCreateRequest",
    "TransactionUpdateRequest",
    "TransactionResponse",
    "TransactionListResponse",
    "transaction_response",
    # Budget
    "BudgetCreateRequest",
    "BudgetResponse",
    "BudgetListResponse",
    "BudgetProgressResponse",
    "BudgetProgressListResponse",
    # Reports
    "CashFlowSummaryResponse",
    "MonthlyBucketResponse",
    "IncomeExpenseResponse",
    "BalancePointResponse",
    "AccountBalanceSeriesResponse",
    "BalanceEvolutionResponse",
    "CategoryShareResponse",
    "CategoryDistributionResponse",
    "TimeRangeResponse",
    "AccountBalanceResponse",
    "DashboardResponse",
]
