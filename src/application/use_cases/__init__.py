"""Application use cases package."""

from .get_branch_report import BranchReportView, GetBranchReportUseCase
from .get_transaction_ledger import GetTransactionLedgerUseCase

__all__ = [
    "BranchReportView",
    "GetBranchReportUseCase",
    "GetTransactionLedgerUseCase",
]
