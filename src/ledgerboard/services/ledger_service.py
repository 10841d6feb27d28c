"""Ledger service: the state holder and edit surface for all entity collections."""

import logging
import threading
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, TypeVar

from ledgerboard.core.dates import start_of_day
from ledgerboard.core.exceptions import NotFoundError, ValidationError
from ledgerboard.core.timezone import now_local, to_local
from ledgerboard.domain.models import (
    Account,
    AccountType,
    Budget,
    BudgetPeriod,
    Category,
    CategoryType,
    Transaction,
    TransactionType,
)
from ledgerboard.domain.models._coerce import to_decimal
from ledgerboard.domain.snapshot import DEFAULT_CATEGORY_COLOR, LedgerSnapshot
from ledgerboard.repositories.protocols import SnapshotRepository

logger = logging.getLogger(__name__)

_Entity = TypeVar("_Entity", Account, Category, Transaction, Budget)


@dataclass
class AccountCreate:
    """Input data for creating an account."""

    name: str
    type: AccountType = AccountType.BANK
    currency: str = "USD"
    initial_balance: Decimal = Decimal("0")
    color: Optional[str] = None
    icon: Optional[str] = None


@dataclass
class CategoryCreate:
    """Input data for creating a category."""

    name: str
    type: CategoryType
    color: str = DEFAULT_CATEGORY_COLOR
    parent_id: Optional[str] = None
    icon: Optional[str] = None


@dataclass
class TransactionCreate:
    """Input data for creating a transaction."""

    account_id: str
    category_id: str
    amount: Decimal
    type: TransactionType
    description: str = ""
    date: Optional[datetime] = None
    target_account_id: Optional[str] = None
    tags: tuple[str, ...] = ()


@dataclass
class BudgetCreate:
    """Input data for creating a budget."""

    category_id: str
    amount: Decimal
    period: BudgetPeriod = BudgetPeriod.MONTHLY
    start_date: Optional[datetime] = None
    account_id: Optional[str] = None


def _replace_item(items: tuple[_Entity, ...], updated: _Entity) -> tuple[_Entity, ...]:
    return tuple(updated if item.id == updated.id else item for item in items)


def _remove_item(items: tuple[_Entity, ...], entity_id: str) -> tuple[_Entity, ...]:
    return tuple(item for item in items if item.id != entity_id)


class LedgerService:
    """
    Sole writer of the accounts, transactions, categories and budgets.

    The current state is one immutable LedgerSnapshot. Every edit builds new
    collections and swaps in a new snapshot, so readers holding an older
    snapshot keep a consistent view without locking. Writers are serialized
    by a lock; each committed snapshot is handed to the repository.
    """

    def __init__(
        self,
        repository: SnapshotRepository,
        clock: Callable[[], datetime] = now_local,
    ):
        self._repository = repository
        self._clock = clock
        self._lock = threading.Lock()
        self._snapshot = repository.load()

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def snapshot(self) -> LedgerSnapshot:
        """Return the current immutable snapshot."""
        return self._snapshot

    def now(self) -> datetime:
        """Current time according to the service clock."""
        return self._clock()

    def list_accounts(self) -> list[Account]:
        return list(self._snapshot.accounts)

    def list_categories(self) -> list[Category]:
        return list(self._snapshot.categories)

    def list_transactions(self) -> list[Transaction]:
        return list(self._snapshot.transactions)

    def list_budgets(self) -> list[Budget]:
        return list(self._snapshot.budgets)

    def get_account(self, account_id: str) -> Account:
        """Get account by ID."""
        account = self._snapshot.accounts_by_id.get(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return account

    def get_category(self, category_id: str) -> Category:
        """Get category by ID."""
        category = self._snapshot.categories_by_id.get(category_id)
        if not category:
            raise NotFoundError("Category", category_id)
        return category

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Get transaction by ID."""
        transaction = self._snapshot.transactions_by_id.get(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    def get_budget(self, budget_id: str) -> Budget:
        """Get budget by ID."""
        budget = self._snapshot.budgets_by_id.get(budget_id)
        if not budget:
            raise NotFoundError("Budget", budget_id)
        return budget

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    def add_account(self, data: AccountCreate) -> Account:
        """Create a new account with a fresh id."""
        account = Account(
            id=str(uuid.uuid4()),
            name=data.name,
            type=data.type,
            currency=data.currency,
            initial_balance=data.initial_balance,
            color=data.color,
            icon=data.icon,
        )
        with self._lock:
            account = self._validate_account(account)
            snapshot = self._snapshot
            self._commit(replace(snapshot, accounts=snapshot.accounts + (account,)))
        logger.info("Created account %s (%s)", account.id, account.name)
        return account

    def update_account(self, account: Account) -> Account:
        """Replace an existing account."""
        with self._lock:
            snapshot = self._snapshot
            if account.id not in snapshot.accounts_by_id:
                raise NotFoundError("Account", account.id)
            account = self._validate_account(account)
            self._commit(replace(snapshot, accounts=_replace_item(snapshot.accounts, account)))
        logger.info("Updated account %s", account.id)
        return account

    def delete_account(self, account_id: str) -> None:
        """
        Delete an account.

        Transactions referencing it are kept; queries report them under
        "Unknown Account".
        """
        with self._lock:
            snapshot = self._snapshot
            if account_id not in snapshot.accounts_by_id:
                raise NotFoundError("Account", account_id)
            self._commit(replace(snapshot, accounts=_remove_item(snapshot.accounts, account_id)))
            orphaned = sum(
                1
                for t in snapshot.transactions
                if t.account_id == account_id or t.target_account_id == account_id
            )
        if orphaned:
            logger.warning(
                "Deleted account %s still referenced by %d transaction(s)", account_id, orphaned
            )
        else:
            logger.info("Deleted account %s", account_id)

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------

    def add_category(self, data: CategoryCreate) -> Category:
        """Create a new category with a fresh id."""
        category = Category(
            id=str(uuid.uuid4()),
            name=data.name,
            type=data.type,
            color=data.color,
            parent_id=data.parent_id or None,
            icon=data.icon,
        )
        with self._lock:
            snapshot = self._snapshot
            category = self._validate_category(category, snapshot)
            self._commit(replace(snapshot, categories=snapshot.categories + (category,)))
        logger.info("Created category %s (%s)", category.id, category.name)
        return category

    def update_category(self, category: Category) -> Category:
        """Replace an existing category."""
        with self._lock:
            snapshot = self._snapshot
            if category.id not in snapshot.categories_by_id:
                raise NotFoundError("Category", category.id)
            category = self._validate_category(category, snapshot)
            self._commit(
                replace(snapshot, categories=_replace_item(snapshot.categories, category))
            )
        logger.info("Updated category %s", category.id)
        return category

    def delete_category(self, category_id: str) -> None:
        """
        Delete a category.

        Subcategories become top-level; transactions and budgets referencing
        it are kept and reported as "Uncategorized".
        """
        with self._lock:
            snapshot = self._snapshot
            if category_id not in snapshot.categories_by_id:
                raise NotFoundError("Category", category_id)
            categories = tuple(
                replace(c, parent_id=None) if c.parent_id == category_id else c
                for c in _remove_item(snapshot.categories, category_id)
            )
            self._commit(replace(snapshot, categories=categories))
        logger.info("Deleted category %s", category_id)

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    def add_transaction(self, data: TransactionCreate) -> Transaction:
        """
        Add a new transaction to the ledger.

        The date defaults to now (configured timezone).
        """
        transaction = Transaction(
            id=str(uuid.uuid4()),
            account_id=data.account_id,
            category_id=data.category_id,
            amount=data.amount,
            description=data.description,
            date=data.date or self._clock(),
            type=data.type,
            target_account_id=data.target_account_id,
            tags=data.tags,
        )
        with self._lock:
            snapshot = self._snapshot
            transaction = self._validate_transaction(transaction, snapshot)
            self._commit(replace(snapshot, transactions=snapshot.transactions + (transaction,)))
        logger.info(
            "Added %s transaction %s of %s on account %s",
            transaction.type.value,
            transaction.id,
            transaction.amount,
            transaction.account_id,
        )
        return transaction

    def update_transaction(self, transaction: Transaction) -> Transaction:
        """Replace an existing transaction."""
        with self._lock:
            snapshot = self._snapshot
            if transaction.id not in snapshot.transactions_by_id:
                raise NotFoundError("Transaction", transaction.id)
            transaction = self._validate_transaction(transaction, snapshot)
            self._commit(
                replace(snapshot, transactions=_replace_item(snapshot.transactions, transaction))
            )
        logger.info("Updated transaction %s", transaction.id)
        return transaction

    def delete_transaction(self, transaction_id: str) -> None:
        """Remove a transaction from the ledger."""
        with self._lock:
            snapshot = self._snapshot
            if transaction_id not in snapshot.transactions_by_id:
                raise NotFoundError("Transaction", transaction_id)
            self._commit(
                replace(snapshot, transactions=_remove_item(snapshot.transactions, transaction_id))
            )
        logger.info("Deleted transaction %s", transaction_id)

    # -------------------------------------------------------------------------
    # Budgets
    # -------------------------------------------------------------------------

    def add_budget(self, data: BudgetCreate) -> Budget:
        """Create a new budget; the start date defaults to today."""
        budget = Budget(
            id=str(uuid.uuid4()),
            category_id=data.category_id,
            amount=data.amount,
            period=data.period,
            start_date=data.start_date or start_of_day(self._clock()),
            account_id=data.account_id or None,
        )
        with self._lock:
            snapshot = self._snapshot
            budget = self._validate_budget(budget, snapshot)
            self._commit(replace(snapshot, budgets=snapshot.budgets + (budget,)))
        logger.info("Created %s budget %s for category %s", budget.period.value, budget.id, budget.category_id)
        return budget

    def update_budget(self, budget: Budget) -> Budget:
        """Replace an existing budget."""
        with self._lock:
            snapshot = self._snapshot
            if budget.id not in snapshot.budgets_by_id:
                raise NotFoundError("Budget", budget.id)
            budget = self._validate_budget(budget, snapshot)
            self._commit(replace(snapshot, budgets=_replace_item(snapshot.budgets, budget)))
        logger.info("Updated budget %s", budget.id)
        return budget

    def delete_budget(self, budget_id: str) -> None:
        """Delete a budget."""
        with self._lock:
            snapshot = self._snapshot
            if budget_id not in snapshot.budgets_by_id:
                raise NotFoundError("Budget", budget_id)
            self._commit(replace(snapshot, budgets=_remove_item(snapshot.budgets, budget_id)))
        logger.info("Deleted budget %s", budget_id)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _commit(self, snapshot: LedgerSnapshot) -> None:
        """Persist and publish a new snapshot. Caller must hold the lock."""
        self._repository.save(snapshot)
        self._snapshot = snapshot

    @staticmethod
    def _validate_account(account: Account) -> Account:
        name = account.name.strip()
        if not name:
            raise ValidationError("Account name is required")
        currency = account.currency.strip().upper()
        if not currency:
            raise ValidationError("Account currency is required")
        return replace(account, name=name, currency=currency)

    @staticmethod
    def _validate_category(category: Category, snapshot: LedgerSnapshot) -> Category:
        name = category.name.strip()
        if not name:
            raise ValidationError("Category name is required")

        parent_id = category.parent_id or None
        if parent_id is not None:
            if parent_id == category.id:
                raise ValidationError("A category cannot be its own parent")
            parent = snapshot.categories_by_id.get(parent_id)
            if not parent:
                raise NotFoundError("Category", parent_id)
            if parent.parent_id is not None:
                raise ValidationError("Subcategories cannot be nested more than one level")
            if parent.type != category.type:
                raise ValidationError(
                    f"Parent category is {parent.type.value}, subcategory is {category.type.value}"
                )
            if any(c.parent_id == category.id for c in snapshot.categories):
                raise ValidationError("A category with subcategories cannot become a subcategory")
        elif any(
            c.parent_id == category.id and c.type != category.type for c in snapshot.categories
        ):
            raise ValidationError(
                f"Subcategories of a {category.type.value} category must be {category.type.value}"
            )

        return replace(category, name=name, parent_id=parent_id)

    @staticmethod
    def _validate_transaction(transaction: Transaction, snapshot: LedgerSnapshot) -> Transaction:
        if transaction.amount < 0:
            raise ValidationError("Transaction amount cannot be negative")
        if transaction.account_id not in snapshot.accounts_by_id:
            raise NotFoundError("Account", transaction.account_id)

        target_id = transaction.target_account_id or None
        if transaction.type == TransactionType.TRANSFER:
            if target_id is None:
                raise ValidationError("Transfer requires a target account")
            if target_id == transaction.account_id:
                raise ValidationError("Transfer source and target accounts must differ")
            if target_id not in snapshot.accounts_by_id:
                raise NotFoundError("Account", target_id)
        else:
            # Target account is only meaningful for transfers
            target_id = None

        return replace(
            transaction,
            date=to_local(transaction.date),
            target_account_id=target_id,
            description=transaction.description.strip(),
        )

    @staticmethod
    def _validate_budget(budget: Budget, snapshot: LedgerSnapshot) -> Budget:
        if budget.amount < 0:
            raise ValidationError("Budget amount cannot be negative")
        if budget.category_id not in snapshot.categories_by_id:
            raise NotFoundError("Category", budget.category_id)
        account_id = budget.account_id or None
        if account_id is not None and account_id not in snapshot.accounts_by_id:
            raise NotFoundError("Account", account_id)
        return replace(
            budget,
            amount=to_decimal(budget.amount),
            start_date=to_local(budget.start_date),
            account_id=account_id,
        )
