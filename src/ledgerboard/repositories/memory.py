"""In-memory snapshot repository."""

from typing import Optional

from ledgerboard.domain.snapshot import LedgerSnapshot


class InMemorySnapshotRepository:
    """Keeps the latest snapshot in process memory only."""

    def __init__(self, initial: Optional[LedgerSnapshot] = None):
        self._snapshot = initial or LedgerSnapshot()

    def load(self) -> LedgerSnapshot:
        return self._snapshot

    def save(self, snapshot: LedgerSnapshot) -> None:
        self._snapshot = snapshot
