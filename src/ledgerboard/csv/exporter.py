"""CSV export functionality."""

import csv
import io
import logging
from pathlib import Path
from typing import Optional, TextIO

from ledgerboard.core.formatters import format_number
from ledgerboard.domain.models import TransactionFilter
from ledgerboard.services.ledger_service import LedgerService
from ledgerboard.services.report_service import ReportService

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "date",
    "type",
    "account",
    "target_account",
    "category",
    "amount",
    "description",
    "tags",
]


class CsvExporter:
    """
    CSV exporter for transaction data.

    Exports the transactions of a report filter, newest first, with account
    and category names resolved from the same snapshot.
    """

    def __init__(self, report_service: ReportService, ledger_service: LedgerService):
        self._reports = report_service
        self._ledger = ledger_service

    def write(self, out: TextIO, report_filter: Optional[TransactionFilter] = None) -> int:
        """Write matching transactions to a text stream. Returns the row count."""
        snapshot = self._ledger.snapshot()
        transactions = self._reports.filtered_transactions(report_filter or TransactionFilter())

        writer = csv.DictWriter(out, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for txn in transactions:
            writer.writerow({
                "date": txn.date.isoformat(),
                "type": txn.type.value,
                "account": snapshot.account_name(txn.account_id),
                "target_account": (
                    snapshot.account_name(txn.target_account_id) if txn.is_transfer else ""
                ),
                "category": snapshot.category_name(txn.category_id),
                "amount": str(txn.amount),
                "description": txn.description,
                "tags": ";".join(txn.tags),
            })
        return len(transactions)

    def export_text(self, report_filter: Optional[TransactionFilter] = None) -> str:
        """Return matching transactions as CSV text."""
        buffer = io.StringIO()
        self.write(buffer, report_filter)
        return buffer.getvalue()

    def export_csv(self, path: str, report_filter: Optional[TransactionFilter] = None) -> int:
        """
        Export transactions to a CSV file.

        Args:
            path: Output file path
            report_filter: Optional filter (None = all transactions)
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", newline="", encoding="utf-8") as csvfile:
            count = self.write(csvfile, report_filter)
        logger.info("Exported %s transactions to %s", format_number(count), file_path)
        return count
