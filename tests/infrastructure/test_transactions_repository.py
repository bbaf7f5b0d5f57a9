"""Tests for the SQLAlchemy transactions repository."""

from decimal import Decimal
from unittest.mock import MagicMock

from sqlalchemy.dialects import postgresql

from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def _build_db_port(rows: list[dict]) -> MagicMock:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.return_value.mappings.return_value.all.return_value = rows

    db_port = MagicMock()
    db_port.get_exchange_engine.return_value = engine
    return db_port


def _compiled(db_port: MagicMock) -> str:
    conn = db_port.get_exchange_engine.return_value.connect.return_value
    query = conn.__enter__.return_value.execute.call_args.args[0]
    return str(query.compile(dialect=postgresql.dialect()))


def test_fetch_transactions_parses_rows() -> None:
    """Rows should be parsed into transaction records."""
    rows = [
        {
            "id": 1,
            "created_at": "2024-01-01T10:00:00+00:00",
            "Currency": "US Dollar",
            "Cur": "USD",
            "Rate": "35.5",
            "Amount": "100",
            "Total_TH": "3550",
            "Branch": None,
            "Transaction_Type": "Buying",
        }
    ]
    db_port = _build_db_port(rows)

    repository = SqlAlchemyTransactionsRepository(db_port)

    result = repository.fetch_transactions()

    assert len(result) == 1
    assert result[0].branch_id == "Unknown"
    assert result[0].total_base == Decimal("3550")
    sql = _compiled(db_port)
    assert '"Peter_Exchange_Transaction"' in sql
    assert "ORDER BY" in sql and "created_at DESC" in sql
    assert "WHERE" not in sql


def test_fetch_transactions_filters_by_branch() -> None:
    """A branch id should add a WHERE clause on the Branch column."""
    db_port = _build_db_port([])

    repository = SqlAlchemyTransactionsRepository(
        db_port,
        table_name="exchange_transactions",
    )

    assert repository.fetch_transactions(branch_id="Silom") == []
    sql = _compiled(db_port)
    assert "exchange_transactions" in sql
    assert '"Branch" = %(Branch_1)s' in sql
