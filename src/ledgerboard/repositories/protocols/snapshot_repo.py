"""Snapshot repository protocol."""

from typing import Protocol

from ledgerboard.domain.snapshot import LedgerSnapshot


class SnapshotRepository(Protocol):
    """Interface for loading and storing the entity collections."""

    def load(self) -> LedgerSnapshot:
        """Return the stored snapshot (empty when nothing is stored)."""
        ...

    def save(self, snapshot: LedgerSnapshot) -> None:
        """Replace the stored snapshot."""
        ...
