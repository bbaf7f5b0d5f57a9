"""Domain models package."""

from .ledger import LedgerPage, LedgerView
from .reports import (
    BranchReport,
    BranchSummary,
    CurrencySummary,
    GrandTotals,
    ReportWindow,
)
from .transactions import TransactionRecord, TransactionType

__all__ = [
    "TransactionRecord",
    "TransactionType",
    "CurrencySummary",
    "BranchSummary",
    "BranchReport",
    "GrandTotals",
    "ReportWindow",
    "LedgerPage",
    "LedgerView",
]
