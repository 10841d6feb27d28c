"""CSV export utilities."""

from ledgerboard.csv.exporter import CSV_COLUMNS, CsvExporter

__all__ = [
    "CsvExporter",
    "CSV_COLUMNS",
]
