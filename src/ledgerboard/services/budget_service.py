"""Budget service: progress of every budget against its current window."""

import logging
from datetime import datetime
from typing import Optional

from ledgerboard.core.formatters import format_currency
from ledgerboard.domain.views import BudgetProgress
from ledgerboard.services import aggregator
from ledgerboard.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)


class BudgetService:
    """Computes budget progress from the ledger; nothing is stored."""

    def __init__(self, ledger: LedgerService, currency: str = "USD"):
        self._ledger = ledger
        self._currency = currency

    def progress_for(self, budget_id: str, now: Optional[datetime] = None) -> BudgetProgress:
        """Progress of one budget. Raises NotFoundError for an unknown id."""
        budget = self._ledger.get_budget(budget_id)
        snapshot = self._ledger.snapshot()
        return self._progress(budget, snapshot.transactions, now or self._ledger.now())

    def all_progress(self, now: Optional[datetime] = None) -> list[BudgetProgress]:
        """Progress of every budget, in budget order."""
        snapshot = self._ledger.snapshot()
        now = now or self._ledger.now()
        return [self._progress(b, snapshot.transactions, now) for b in snapshot.budgets]

    def _progress(self, budget, transactions, now: datetime) -> BudgetProgress:
        progress = aggregator.budget_progress(budget, transactions, now)
        if progress.is_over_budget:
            logger.warning(
                "Budget %s over its %s cap by %s (spent %s)",
                budget.id,
                budget.period.value,
                format_currency(progress.over_amount, self._currency),
                format_currency(progress.spent, self._currency),
            )
        return progress
