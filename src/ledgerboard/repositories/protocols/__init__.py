"""Repository protocol definitions (interfaces)."""

from ledgerboard.repositories.protocols.snapshot_repo import SnapshotRepository

__all__ = [
    "SnapshotRepository",
]
