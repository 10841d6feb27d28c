"""Budget domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ledgerboard.domain.models._coerce import set_field, to_decimal
from ledgerboard.domain.models.enums import BudgetPeriod


@dataclass(frozen=True)
class Budget:
    """
    Spending cap for a category over a recurring period.

    Spend against the cap is never stored; it is recomputed from the ledger
    for the current period window on every query.
    """

    id: str
    category_id: str
    amount: Decimal
    period: BudgetPeriod
    start_date: datetime
    account_id: Optional[str] = None

    def __post_init__(self) -> None:
        set_field(self, "period", BudgetPeriod(self.period))
        set_field(self, "amount", to_decimal(self.amount))
