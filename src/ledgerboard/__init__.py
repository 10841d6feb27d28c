"""Personal finance dashboard backend: ledger, budgets and reports."""

__version__ = "0.1.0"
