"""Application context for in-process service management.

Owns the settings, the snapshot repository and the services built on it.
The HTTP layer and tests reach every service through one context instead of
module-level state.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from ledgerboard.config.settings import Settings, get_settings, set_settings
from ledgerboard.core.exceptions import ContextNotInitializedError
from ledgerboard.core.timezone import now_local
from ledgerboard.csv import CsvExporter
from ledgerboard.repositories import (
    InMemorySnapshotRepository,
    JsonSnapshotRepository,
    SnapshotRepository,
)
from ledgerboard.services import BudgetService, LedgerService, ReportService

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing access to all services.

    Services are created by ``initialize()``; touching them before that raises
    ContextNotInitializedError.
    """

    def __init__(self):
        self._settings: Optional[Settings] = None
        self._repository: Optional[SnapshotRepository] = None
        self._ledger_service: Optional[LedgerService] = None
        self._report_service: Optional[ReportService] = None
        self._budget_service: Optional[BudgetService] = None
        self._csv_exporter: Optional[CsvExporter] = None

    def initialize(
        self,
        settings: Optional[Settings] = None,
        repository: Optional[SnapshotRepository] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize or reinitialize the context.

        Args:
            settings: Settings to install globally. Uses the current ones if not provided.
            repository: Snapshot store. Defaults to a JSON file when
                ``data_file`` is configured, in-memory otherwise.
            clock: Source of "now" for the services. Defaults to the
                current time in the configured timezone.
        """
        if settings is not None:
            set_settings(settings)
        settings = get_settings()

        if repository is None:
            data_file = settings.get_data_file()
            if data_file is not None:
                repository = JsonSnapshotRepository(data_file)
            else:
                repository = InMemorySnapshotRepository()

        self._settings = settings
        self._repository = repository
        self._ledger_service = LedgerService(repository, clock=clock or now_local)
        self._report_service = ReportService(
            self._ledger_service,
            sample_days=settings.balance_sample_days,
            recent_limit=settings.recent_transactions_limit,
        )
        self._budget_service = BudgetService(self._ledger_service, currency=settings.currency)
        self._csv_exporter = CsvExporter(self._report_service, self._ledger_service)

        snapshot = self._ledger_service.snapshot()
        logger.info(
            "Context initialized with %s (%d accounts, %d transactions)",
            type(repository).__name__,
            len(snapshot.accounts),
            len(snapshot.transactions),
        )

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._ledger_service is not None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            raise ContextNotInitializedError("settings")
        return self._settings

    @property
    def repository(self) -> SnapshotRepository:
        if self._repository is None:
            raise ContextNotInitializedError("repository")
        return self._repository

    @property
    def ledger(self) -> LedgerService:
        """Get the LedgerService instance."""
        if self._ledger_service is None:
            raise ContextNotInitializedError("ledger")
        return self._ledger_service

    @property
    def reports(self) -> ReportService:
        """Get the ReportService instance."""
        if self._report_service is None:
            raise ContextNotInitializedError("reports")
        return self._report_service

    @property
    def budgets(self) -> BudgetService:
        """Get the BudgetService instance."""
        if self._budget_service is None:
            raise ContextNotInitializedError("budgets")
        return self._budget_service

    @property
    def csv_exporter(self) -> CsvExporter:
        """Get the CsvExporter instance."""
        if self._csv_exporter is None:
            raise ContextNotInitializedError("csv_exporter")
        return self._csv_exporter


# Global application context
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear) the global application context."""
    global _app_context
    _app_context = context
