"""Account domain model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ledgerboard.domain.models._coerce import set_field, to_decimal
from ledgerboard.domain.models.enums import AccountType


@dataclass(frozen=True)
class Account:
    """
    Money-holding account (bank, wallet, card...).

    The initial balance is a fixed baseline. The current balance is never
    stored; it is always derived from the ledger.
    """

    id: str
    name: str
    type: AccountType
    currency: str
    initial_balance: Decimal
    color: Optional[str] = None
    icon: Optional[str] = None

    def __post_init__(self) -> None:
        set_field(self, "type", AccountType(self.type))
        set_field(self, "initial_balance", to_decimal(self.initial_balance))
