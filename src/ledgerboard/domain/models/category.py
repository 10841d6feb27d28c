"""Category domain model."""

from dataclasses import dataclass
from typing import Optional

from ledgerboard.domain.models._coerce import set_field
from ledgerboard.domain.models.enums import CategoryType


@dataclass(frozen=True)
class Category:
    """Income or expense category, optionally nested one level under a parent."""

    id: str
    name: str
    type: CategoryType
    color: str
    parent_id: Optional[str] = None
    icon: Optional[str] = None

    def __post_init__(self) -> None:
        set_field(self, "type", CategoryType(self.type))

    @property
    def is_subcategory(self) -> bool:
        return self.parent_id is not None
