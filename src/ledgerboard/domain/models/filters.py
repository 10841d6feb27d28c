"""Report filter criteria."""

from dataclasses import dataclass, field
from typing import Optional

from ledgerboard.domain.models._coerce import set_field
from ledgerboard.domain.models.date_range import DateRange
from ledgerboard.domain.models.enums import TransactionType


ALL_TRANSACTION_TYPES: frozenset[TransactionType] = frozenset(TransactionType)


@dataclass(frozen=True)
class TransactionFilter:
    """
    Criteria for selecting transactions.

    Empty account_ids / category_ids mean "all". transaction_types is the set
    of types to keep (empty keeps nothing). date_range None means unbounded.
    search is a case-insensitive substring match on the description.
    """

    date_range: Optional[DateRange] = None
    account_ids: frozenset[str] = field(default_factory=frozenset)
    category_ids: frozenset[str] = field(default_factory=frozenset)
    transaction_types: frozenset[TransactionType] = ALL_TRANSACTION_TYPES
    search: Optional[str] = None

    def __post_init__(self) -> None:
        set_field(self, "account_ids", frozenset(self.account_ids))
        set_field(self, "category_ids", frozenset(self.category_ids))
        set_field(
            self,
            "transaction_types",
            frozenset(TransactionType(t) for t in self.transaction_types),
        )
