"""
Pytest configuration and fixtures for ledger tests.

This module provides:
- Time helpers and a fixed "now"
- Factory helpers for accounts, categories, transactions and budgets
- A seeded ledger snapshot with hand-checked balances
- Service fixtures bound to an in-memory repository
- A FastAPI test client bound to a fresh AppContext
"""

from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
import pytz
from fastapi.testclient import TestClient

from ledgerboard.api.deps import get_context
from ledgerboard.app_context import AppContext, set_app_context
from ledgerboard.config.settings import Settings, reset_settings, set_settings
from ledgerboard.domain import (
    Account,
    AccountType,
    Budget,
    BudgetPeriod,
    Category,
    CategoryType,
    LedgerSnapshot,
    Transaction,
    TransactionType,
)
from ledgerboard.main import app
from ledgerboard.repositories import InMemorySnapshotRepository
from ledgerboard.services import BudgetService, LedgerService, ReportService


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in UTC."""
    return pytz.utc.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests (a Saturday)."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture(autouse=True)
def test_settings():
    """Install UTC settings without a data file for every test."""
    settings = Settings(timezone="UTC", currency="USD", data_file=None, log_level="DEBUG")
    set_settings(settings)
    yield settings
    reset_settings()


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def make_account() -> Callable[..., Account]:
    """Factory for Account entities."""

    def _make(
        account_id: str = "acc-1",
        name: str = "Checking",
        account_type: AccountType = AccountType.BANK,
        initial_balance: str = "0",
        currency: str = "USD",
        color: Optional[str] = None,
    ) -> Account:
        return Account(
            id=account_id,
            name=name,
            type=account_type,
            currency=currency,
            initial_balance=Decimal(initial_balance),
            color=color,
        )

    return _make


@pytest.fixture
def make_category() -> Callable[..., Category]:
    """Factory for Category entities."""

    def _make(
        category_id: str = "cat-1",
        name: str = "Food",
        category_type: CategoryType = CategoryType.EXPENSE,
        color: str = "#F59E0B",
        parent_id: Optional[str] = None,
    ) -> Category:
        return Category(
            id=category_id,
            name=name,
            type=category_type,
            color=color,
            parent_id=parent_id,
        )

    return _make


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for Transaction entities."""

    def _make(
        txn_id: str = "txn-1",
        account_id: str = "acc-1",
        amount: str = "10",
        txn_type: TransactionType = TransactionType.EXPENSE,
        date: Optional[datetime] = None,
        category_id: str = "cat-1",
        target_account_id: Optional[str] = None,
        description: str = "",
    ) -> Transaction:
        return Transaction(
            id=txn_id,
            account_id=account_id,
            category_id=category_id,
            amount=Decimal(amount),
            description=description,
            date=date or utc_datetime(2024, 6, 10),
            type=txn_type,
            target_account_id=target_account_id,
        )

    return _make


@pytest.fixture
def make_budget() -> Callable[..., Budget]:
    """Factory for Budget entities."""

    def _make(
        budget_id: str = "bud-1",
        category_id: str = "cat-1",
        amount: str = "100",
        period: BudgetPeriod = BudgetPeriod.MONTHLY,
        start_date: Optional[datetime] = None,
    ) -> Budget:
        return Budget(
            id=budget_id,
            category_id=category_id,
            amount=Decimal(amount),
            period=period,
            start_date=start_date or utc_datetime(2024, 1, 1, 0),
        )

    return _make


# =============================================================================
# SEEDED LEDGER
# =============================================================================


@pytest.fixture
def seeded_snapshot() -> LedgerSnapshot:
    """
    Small ledger with hand-checked numbers.

    Balances at 2024-06-15:
        checking: 1000 + 3000 - 1200 - 200 - 80 + 500 = 3020
        wallet:    100 -   50 +  200             =  250
    June 2024: income 3000, expenses 1250 (rent 1200, food 50)
    """
    accounts = (
        Account("acc-checking", "Checking", AccountType.BANK, "USD", Decimal("1000"), "#3B82F6"),
        Account("acc-wallet", "Wallet", AccountType.CASH, "USD", Decimal("100"), "#10B981"),
    )
    categories = (
        Category("cat-salary", "Salary", CategoryType.INCOME, "#22C55E"),
        Category("cat-rent", "Rent", CategoryType.EXPENSE, "#EF4444"),
        Category("cat-food", "Food", CategoryType.EXPENSE, "#F59E0B"),
        Category("cat-groceries", "Groceries", CategoryType.EXPENSE, "#FBBF24", parent_id="cat-food"),
    )
    transactions = (
        Transaction("t1", "acc-checking", "cat-salary", Decimal("3000"), "June salary",
                    utc_datetime(2024, 6, 1, 9), TransactionType.INCOME),
        Transaction("t2", "acc-checking", "cat-rent", Decimal("1200"), "June rent",
                    utc_datetime(2024, 6, 2), TransactionType.EXPENSE),
        Transaction("t3", "acc-wallet", "cat-food", Decimal("50"), "Lunch with team",
                    utc_datetime(2024, 6, 10, 12), TransactionType.EXPENSE),
        Transaction("t4", "acc-checking", "", Decimal("200"), "Cash withdrawal",
                    utc_datetime(2024, 6, 12), TransactionType.TRANSFER,
                    target_account_id="acc-wallet"),
        Transaction("t5", "acc-checking", "cat-food", Decimal("80"), "Groceries",
                    utc_datetime(2024, 5, 20), TransactionType.EXPENSE),
        Transaction("t6", "acc-checking", "cat-salary", Decimal("500"), "Bonus",
                    utc_datetime(2024, 5, 1), TransactionType.INCOME),
    )
    budgets = (
        Budget("b-food", "cat-food", Decimal("100"), BudgetPeriod.MONTHLY, utc_datetime(2024, 1, 1, 0)),
        Budget("b-rent", "cat-rent", Decimal("1000"), BudgetPeriod.MONTHLY, utc_datetime(2024, 1, 1, 0)),
        Budget("b-food-week", "cat-food", Decimal("40"), BudgetPeriod.WEEKLY, utc_datetime(2024, 1, 1, 0)),
    )
    return LedgerSnapshot(
        accounts=accounts,
        transactions=transactions,
        categories=categories,
        budgets=budgets,
    )


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(fixed_now) -> LedgerService:
    """Provide an empty LedgerService with a fixed clock."""
    return LedgerService(InMemorySnapshotRepository(), clock=lambda: fixed_now)


@pytest.fixture
def seeded_ledger(seeded_snapshot, fixed_now) -> LedgerService:
    """Provide a LedgerService loaded with the seeded snapshot."""
    return LedgerService(InMemorySnapshotRepository(seeded_snapshot), clock=lambda: fixed_now)


@pytest.fixture
def report_service(seeded_ledger) -> ReportService:
    """Provide ReportService over the seeded ledger."""
    return ReportService(seeded_ledger)


@pytest.fixture
def budget_service(seeded_ledger) -> BudgetService:
    """Provide BudgetService over the seeded ledger."""
    return BudgetService(seeded_ledger)


# =============================================================================
# API FIXTURES
# =============================================================================


def _client_for(context: AppContext):
    set_app_context(context)
    app.dependency_overrides[get_context] = lambda: context
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    set_app_context(None)


@pytest.fixture
def app_context(test_settings, fixed_now) -> AppContext:
    """Provide an initialized AppContext with an empty in-memory ledger."""
    context = AppContext()
    context.initialize(
        settings=test_settings,
        repository=InMemorySnapshotRepository(),
        clock=lambda: fixed_now,
    )
    return context


@pytest.fixture
def client(app_context):
    """Provide FastAPI test client bound to an empty ledger."""
    yield from _client_for(app_context)


@pytest.fixture
def seeded_client(test_settings, seeded_snapshot, fixed_now):
    """Provide FastAPI test client bound to the seeded ledger."""
    context = AppContext()
    context.initialize(
        settings=test_settings,
        repository=InMemorySnapshotRepository(seeded_snapshot),
        clock=lambda: fixed_now,
    )
    yield from _client_for(context)
