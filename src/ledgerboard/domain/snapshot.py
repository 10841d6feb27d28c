"""Immutable view of the four entity collections at one point in time."""

from dataclasses import dataclass
from functools import cached_property
from typing import Optional

from ledgerboard.domain.models import Account, Budget, Category, Transaction

UNKNOWN_ACCOUNT_NAME = "Unknown Account"
UNCATEGORIZED_NAME = "Uncategorized"
DEFAULT_CATEGORY_COLOR = "#CBD5E1"
DEFAULT_ACCOUNT_COLOR = "#3B82F6"


@dataclass(frozen=True)
class LedgerSnapshot:
    """
    Snapshot of accounts, transactions, categories and budgets.

    Collections are tuples and are never mutated; edits produce a new
    snapshot. Id lookups are indexed lazily, once per snapshot, so a batch of
    queries against the same snapshot shares them.
    """

    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    categories: tuple[Category, ...] = ()
    budgets: tuple[Budget, ...] = ()

    def __post_init__(self) -> None:
        for name in ("accounts", "transactions", "categories", "budgets"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @cached_property
    def accounts_by_id(self) -> dict[str, Account]:
        return {a.id: a for a in self.accounts}

    @cached_property
    def transactions_by_id(self) -> dict[str, Transaction]:
        return {t.id: t for t in self.transactions}

    @cached_property
    def categories_by_id(self) -> dict[str, Category]:
        return {c.id: c for c in self.categories}

    @cached_property
    def budgets_by_id(self) -> dict[str, Budget]:
        return {b.id: b for b in self.budgets}

    def account(self, account_id: Optional[str]) -> Optional[Account]:
        return self.accounts_by_id.get(account_id) if account_id else None

    def category(self, category_id: Optional[str]) -> Optional[Category]:
        return self.categories_by_id.get(category_id) if category_id else None

    def account_name(self, account_id: Optional[str]) -> str:
        account = self.account(account_id)
        return account.name if account else UNKNOWN_ACCOUNT_NAME

    def account_color(self, account_id: Optional[str]) -> str:
        account = self.account(account_id)
        return account.color if account and account.color else DEFAULT_ACCOUNT_COLOR

    def category_name(self, category_id: Optional[str]) -> str:
        category = self.category(category_id)
        return category.name if category else UNCATEGORIZED_NAME

    def category_color(self, category_id: Optional[str]) -> str:
        category = self.category(category_id)
        return category.color if category else DEFAULT_CATEGORY_COLOR
