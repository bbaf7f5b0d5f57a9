"""SQLAlchemy-backed repository for recorded exchange transactions."""

from sqlalchemy import column, select, table
from sqlalchemy.sql import Select

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import TransactionRecord
from src.domain.services.normalization import parse_transaction_record
from src.infrastructure.settings import DEFAULT_TRANSACTIONS_TABLE

TRANSACTION_COLUMNS = (
    "id",
    "created_at",
    "Currency",
    "Cur",
    "Rate",
    "Amount",
    "Total_TH",
    "Branch",
    "Transaction_Type",
    "Customer_Passport_no",
    "Customer_Nationality",
    "Customer_Name",
)


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository reading exchange transactions through SQLAlchemy."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        table_name: str = DEFAULT_TRANSACTIONS_TABLE,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the exchange engine.
            table_name: Table holding the recorded transactions.
        """
        self._db_port = db_port
        self._table = table(
            table_name,
            *(column(name) for name in TRANSACTION_COLUMNS),
        )

    def fetch_transactions(
        self,
        branch_id: str | None = None,
    ) -> list[TransactionRecord]:
        query = self._build_query(branch_id)
        engine = self._db_port.get_exchange_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
        return [parse_transaction_record(row) for row in rows]

    def _build_query(self, branch_id: str | None) -> Select:
        query = select(self._table).order_by(
            self._table.c.created_at.desc()
        )
        if branch_id:
            query = query.where(self._table.c.Branch == branch_id)
        return query


__all__ = ["SqlAlchemyTransactionsRepository", "TRANSACTION_COLUMNS"]
