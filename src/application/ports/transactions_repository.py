"""Application port for exchange transaction reads."""

from typing import Protocol

from src.domain.models import TransactionRecord


class TransactionsRepositoryPort(Protocol):
    """Port exposing read access to recorded exchange transactions."""

    def fetch_transactions(
        self,
        branch_id: str | None = None,
    ) -> list[TransactionRecord]:
        """Return transactions, newest first, optionally for one branch."""


__all__ = ["TransactionsRepositoryPort"]
