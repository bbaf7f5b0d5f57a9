"""Domain models for browsing transaction lists."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.transactions import TransactionRecord


@dataclass(frozen=True)
class LedgerPage:
    """A single page of a filtered and sorted transaction list.

    Attributes:
        items: Records shown on the page.
        page: One-based page number after clamping.
        per_page: Maximum number of records per page.
        total_items: Number of records across all pages.
        total_pages: Number of pages, zero when there are no records.
    """

    items: list[TransactionRecord]
    page: int
    per_page: int
    total_items: int
    total_pages: int

    @property
    def start_index(self) -> int:
        """Return the zero-based index of the first record on the page."""
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class LedgerView:
    """Ledger page with the data needed by list screens."""

    page: LedgerPage
    currency_codes: list[str]
    total_base: Decimal


__all__ = ["LedgerPage", "LedgerView"]
