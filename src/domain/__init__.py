"""Domain package for business rules and core models."""

from .constants import BASE_CURRENCY, CURRENCY_PRIORITY, UNKNOWN_KEY
from .models import (
    BranchReport,
    BranchSummary,
    CurrencySummary,
    GrandTotals,
    LedgerPage,
    LedgerView,
    ReportWindow,
    TransactionRecord,
    TransactionType,
)
from .services import (
    aggregate_transactions,
    compute_grand_totals,
    filter_transactions,
    parse_transaction_record,
)

__all__ = [
    "BASE_CURRENCY",
    "CURRENCY_PRIORITY",
    "UNKNOWN_KEY",
    "BranchReport",
    "BranchSummary",
    "CurrencySummary",
    "GrandTotals",
    "LedgerPage",
    "LedgerView",
    "ReportWindow",
    "TransactionRecord",
    "TransactionType",
    "aggregate_transactions",
    "compute_grand_totals",
    "filter_transactions",
    "parse_transaction_record",
]
