"""Search, sort and paging helpers for transaction lists."""

from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal
from enum import Enum
from math import ceil

from src.domain.constants import DEFAULT_PAGE_SIZE
from src.domain.models import LedgerPage, TransactionRecord
from src.domain.services.time_window import to_local

SORTABLE_FIELDS = (
    "id",
    "created_at",
    "currency_code",
    "currency_name",
    "rate",
    "amount",
    "total_base",
    "branch_id",
    "transaction_type",
)


def _matches_term(transaction: TransactionRecord, term: str) -> bool:
    lowered = term.lower()
    if lowered in transaction.currency_code.lower():
        return True
    if lowered in transaction.branch_id.lower():
        return True
    if lowered in transaction.transaction_type.value.lower():
        return True
    if term in transaction.raw_amount or term in transaction.raw_rate:
        return True
    if term in transaction.raw_total_base:
        return True
    return transaction.id is not None and term in str(transaction.id)


def search_transactions(
    transactions: Iterable[TransactionRecord],
    term: str | None = None,
    currency: str | None = None,
) -> list[TransactionRecord]:
    """Filter transactions by free text and currency code.

    Args:
        transactions: Records to search.
        term: Case-insensitive text for codes, branch and direction; plain
            substring for the stored amount, rate, total and id.
        currency: Exact currency code to keep, all codes when empty.

    Returns:
        list[TransactionRecord]: Matching records in input order.
    """
    return [
        tx
        for tx in transactions
        if (not term or _matches_term(tx, term))
        and (not currency or tx.currency_code == currency)
    ]


def _sort_value(transaction: TransactionRecord, field: str):
    value = getattr(transaction, field)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return to_local(value)
    return value


def sort_transactions(
    transactions: Iterable[TransactionRecord],
    field: str = "created_at",
    descending: bool = True,
) -> list[TransactionRecord]:
    """Sort transactions by a record field.

    Records without a value for the field keep their relative order after
    every record that has one.

    Raises:
        ValueError: If the field is not sortable.
    """
    if field not in SORTABLE_FIELDS:
        raise ValueError(f"Unsupported sort field: {field}")
    present: list[TransactionRecord] = []
    missing: list[TransactionRecord] = []
    for transaction in transactions:
        if getattr(transaction, field) is None:
            missing.append(transaction)
        else:
            present.append(transaction)
    present.sort(key=lambda tx: _sort_value(tx, field), reverse=descending)
    return present + missing


def paginate(
    items: Sequence[TransactionRecord],
    page: int = 1,
    per_page: int = DEFAULT_PAGE_SIZE,
) -> LedgerPage:
    """Return one page of records, clamping the page number into range."""
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    total_items = len(items)
    total_pages = ceil(total_items / per_page)
    current = max(1, min(page, total_pages))
    start = (current - 1) * per_page
    return LedgerPage(
        items=list(items[start:start + per_page]),
        page=current,
        per_page=per_page,
        total_items=total_items,
        total_pages=total_pages,
    )


def list_currency_codes(
    transactions: Iterable[TransactionRecord],
) -> list[str]:
    """Return the distinct currency codes, sorted."""
    return sorted({tx.currency_code for tx in transactions})


def sum_total_base(transactions: Iterable[TransactionRecord]) -> Decimal:
    """Return the sum of base currency totals."""
    return sum((tx.total_base for tx in transactions), Decimal("0"))


__all__ = [
    "SORTABLE_FIELDS",
    "search_transactions",
    "sort_transactions",
    "paginate",
    "list_currency_codes",
    "sum_total_base",
]
