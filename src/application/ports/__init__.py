"""Application ports package."""

from .database import DatabaseEnginePort
from .transactions_repository import TransactionsRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "TransactionsRepositoryPort",
]
