"""SQLAlchemy engine for the branch transactions database.

The connection URL comes from ``EXCHANGE_DB_URL`` (a ``.env`` file in the
working directory is loaded first). One pooled engine is shared by the
report, ledger and health check entry points.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

EXCHANGE_DB_URL_VAR = "EXCHANGE_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required setting from the environment or ``.env``.

    Raises:
        RuntimeError: If the setting is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    # Small pool with pre-ping for short read-only report queries.
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_exchange_engine: Optional[Engine] = None


def get_exchange_engine() -> Engine:
    """Return the shared engine for the transactions database.

    The engine is created on first use from ``EXCHANGE_DB_URL``.

    Returns:
        Engine: Pooled engine reading the branch transactions table.
    """
    global _exchange_engine
    if _exchange_engine is None:
        _exchange_engine = _create_engine(_get_env_var(EXCHANGE_DB_URL_VAR))
    return _exchange_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Engine port used by the transactions repository and health check."""

    def get_exchange_engine(self) -> Engine:
        return get_exchange_engine()


__all__ = [
    "EXCHANGE_DB_URL_VAR",
    "get_exchange_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
