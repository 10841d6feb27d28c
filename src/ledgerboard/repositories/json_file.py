"""JSON file snapshot repository.

The file holds one object per entity collection, each keyed by identity:

    {
      "accounts": {"<id>": {"name": "...", "initial_balance": "5000.00", ...}},
      "categories": {...},
      "transactions": {"<id>": {"date": "2024-01-15T10:30:00+00:00", ...}},
      "budgets": {...}
    }

Decimals are stored as strings and datetimes as ISO 8601. Naive datetimes are
read as local time.
"""

import json
import logging
import os
from dataclasses import asdict, fields
from datetime import datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union

from ledgerboard.core.exceptions import ValidationError
from ledgerboard.core.timezone import parse_datetime_local
from ledgerboard.domain.models import Account, Budget, Category, Transaction
from ledgerboard.domain.snapshot import LedgerSnapshot

logger = logging.getLogger(__name__)

_COLLECTIONS: dict[str, type] = {
    "accounts": Account,
    "categories": Category,
    "transactions": Transaction,
    "budgets": Budget,
}
_DATETIME_FIELDS = {"date", "start_date"}


def encode_entity(entity: Any) -> dict[str, Any]:
    """Serialize an entity to a JSON-compatible dict (without its id)."""
    data = asdict(entity)
    data.pop("id", None)
    for key, value in data.items():
        if isinstance(value, Enum):
            data[key] = value.value
        elif isinstance(value, Decimal):
            data[key] = str(value)
        elif isinstance(value, datetime):
            data[key] = value.isoformat()
        elif isinstance(value, tuple):
            data[key] = list(value)
    return data


def decode_entity(entity_cls: type, entity_id: str, body: dict[str, Any]) -> Any:
    """Build an entity from its stored dict; unknown keys are ignored."""
    names = {f.name for f in fields(entity_cls)}
    kwargs = {k: v for k, v in body.items() if k in names and k != "id"}
    try:
        for key in _DATETIME_FIELDS & kwargs.keys():
            kwargs[key] = parse_datetime_local(kwargs[key])
        if "tags" in kwargs:
            kwargs["tags"] = tuple(kwargs["tags"] or ())
        return entity_cls(id=entity_id, **kwargs)
    except (TypeError, ValueError, ArithmeticError) as e:
        raise ValidationError(
            f"Invalid {entity_cls.__name__.lower()} '{entity_id}': {e}"
        ) from e


def snapshot_to_document(snapshot: LedgerSnapshot) -> dict[str, dict[str, Any]]:
    return {
        name: {entity.id: encode_entity(entity) for entity in getattr(snapshot, name)}
        for name in _COLLECTIONS
    }


def snapshot_from_document(document: dict[str, Any]) -> LedgerSnapshot:
    if not isinstance(document, dict):
        raise ValidationError("Snapshot document must be a JSON object")
    collections = {}
    for name, entity_cls in _COLLECTIONS.items():
        items = document.get(name) or {}
        if not isinstance(items, dict):
            raise ValidationError(f"'{name}' must be an object keyed by id")
        collections[name] = tuple(
            decode_entity(entity_cls, entity_id, body) for entity_id, body in items.items()
        )
    return LedgerSnapshot(**collections)


class JsonSnapshotRepository:
    """Stores the snapshot as a single JSON document on disk."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LedgerSnapshot:
        if not self._path.exists():
            logger.info("Snapshot file %s not found, starting empty", self._path)
            return LedgerSnapshot()

        with open(self._path, "r", encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Invalid snapshot file {self._path}: {e}") from e

        snapshot = snapshot_from_document(document)
        logger.info(
            "Loaded %d accounts, %d transactions, %d categories, %d budgets from %s",
            len(snapshot.accounts),
            len(snapshot.transactions),
            len(snapshot.categories),
            len(snapshot.budgets),
            self._path,
        )
        return snapshot

    def save(self, snapshot: LedgerSnapshot) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(snapshot_to_document(snapshot), f, indent=2)
            # Atomic on POSIX and Windows
            os.replace(tmp_path, self._path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
