"""Repository layer - snapshot storage abstractions and implementations."""

from ledgerboard.repositories.protocols import SnapshotRepository
from ledgerboard.repositories.memory import InMemorySnapshotRepository
from ledgerboard.repositories.json_file import JsonSnapshotRepository

__all__ = [
    "SnapshotRepository",
    "InMemorySnapshotRepository",
    "JsonSnapshotRepository",
]
