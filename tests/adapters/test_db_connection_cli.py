"""Tests for the exchange database health check CLI."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.adapters import check_db_connection


@pytest.fixture
def exchange_engine(monkeypatch):
    engine = MagicMock()
    engine.url = "postgresql://reports@exchange-db/branches"
    adapter = MagicMock()
    adapter.get_exchange_engine.return_value = engine
    logger = MagicMock()
    monkeypatch.setattr(
        check_db_connection, "build_database_adapter", lambda: adapter
    )
    monkeypatch.setattr(check_db_connection, "get_app_logger", lambda: logger)
    return engine, logger


def test_main_pings_exchange_database(exchange_engine):
    """A healthy engine should receive SELECT 1 and both log lines."""
    engine, logger = exchange_engine
    conn = engine.connect.return_value.__enter__.return_value

    check_db_connection.main()

    conn.exec_driver_sql.assert_called_once_with("SELECT 1")
    messages = [call.args[0] for call in logger.info.call_args_list]
    assert messages == [
        "Exchange DB: postgresql://reports@exchange-db/branches",
        "Exchange database connection is working.",
    ]


def test_main_propagates_connection_failure(exchange_engine):
    """A failing connection should surface and skip the success message."""
    engine, logger = exchange_engine
    engine.connect.side_effect = OperationalError(
        "SELECT 1", {}, Exception("connection refused")
    )

    with pytest.raises(OperationalError):
        check_db_connection.main()

    messages = [call.args[0] for call in logger.info.call_args_list]
    assert messages == [
        "Exchange DB: postgresql://reports@exchange-db/branches"
    ]
