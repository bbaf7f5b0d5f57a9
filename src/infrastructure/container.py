"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.get_branch_report import GetBranchReportUseCase
from src.application.use_cases.get_transaction_ledger import (
    GetTransactionLedgerUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: ReportSettings | None = None,
) -> TransactionsRepositoryPort:
    """Return the configured transactions repository."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or ReportSettings.from_env()
    return SqlAlchemyTransactionsRepository(
        resolved_db,
        table_name=resolved_settings.transactions_table,
    )


def build_branch_report_use_case(
    settings: ReportSettings | None = None,
) -> GetBranchReportUseCase:
    """Return the branch report use case wired to the database."""
    resolved_settings = settings or ReportSettings.from_env()
    return GetBranchReportUseCase(
        build_transactions_repository(settings=resolved_settings),
        logger=get_app_logger(),
        timezone=resolved_settings.timezone,
    )


def build_transaction_ledger_use_case(
    settings: ReportSettings | None = None,
) -> GetTransactionLedgerUseCase:
    """Return the transaction ledger use case wired to the database."""
    resolved_settings = settings or ReportSettings.from_env()
    return GetTransactionLedgerUseCase(
        build_transactions_repository(settings=resolved_settings),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_transactions_repository",
    "build_branch_report_use_case",
    "build_transaction_ledger_use_case",
]
