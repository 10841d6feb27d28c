"""Transaction domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ledgerboard.domain.models._coerce import set_field, to_decimal
from ledgerboard.domain.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """
    Ledger transaction entry (source of truth for balances).

    - amount is a non-negative magnitude; direction comes from the type
    - INCOME credits account_id, EXPENSE debits it
    - TRANSFER debits account_id and credits target_account_id
    """

    id: str
    account_id: str
    category_id: str
    amount: Decimal
    description: str
    date: datetime
    type: TransactionType
    target_account_id: Optional[str] = None
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        set_field(self, "type", TransactionType(self.type))
        set_field(self, "amount", to_decimal(self.amount))
        set_field(self, "tags", tuple(self.tags))

    @property
    def is_transfer(self) -> bool:
        """Return True if this moves money between two accounts."""
        return self.type == TransactionType.TRANSFER

    def balance_effect(self, account_id: str) -> Decimal:
        """
        Signed effect of this transaction on the given account's balance.

        Positive = money arriving, Negative = money leaving.
        """
        effect = Decimal("0")
        if self.account_id == account_id:
            if self.type == TransactionType.INCOME:
                effect += self.amount
            else:
                # EXPENSE, and TRANSFER leaving the source account
                effect -= self.amount
        if self.is_transfer and self.target_account_id == account_id:
            effect += self.amount
        return effect
