"""Domain normalization helpers for raw transaction records."""

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from src.domain.constants import UNKNOWN_KEY
from src.domain.models import TransactionRecord, TransactionType
from src.utils.decimal_utils import coerce_decimal


def parse_decimal(value: Any) -> Decimal:
    """Parse a text or numeric value, falling back to zero.

    Args:
        value: Raw value from the source collection.

    Returns:
        Decimal: Parsed value, zero when missing or unparsable.
    """
    return coerce_decimal(value)


def normalize_key(value: Any) -> str:
    """Normalize a grouping key, using the Unknown sentinel when blank.

    Args:
        value: Raw branch or currency value.

    Returns:
        str: Stripped key or ``"Unknown"``.
    """
    if value is None:
        return UNKNOWN_KEY
    cleaned = str(value).strip()
    return cleaned if cleaned else UNKNOWN_KEY


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp.

    Args:
        value: Timestamp string or datetime from the source.

    Returns:
        datetime | None: Parsed timestamp, None when missing or invalid.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    raw = str(value).strip()
    if not raw:
        return None
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def parse_transaction_type(value: Any) -> TransactionType:
    """Map a raw direction value to a TransactionType.

    Only the exact ``"Buying"`` marker selects the buying bucket; every other
    value counts as selling.
    """
    if isinstance(value, TransactionType):
        return value
    if value == TransactionType.BUYING.value:
        return TransactionType.BUYING
    return TransactionType.SELLING


def _parse_id(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


def _raw_text(value: Any) -> str:
    return "" if value is None else str(value)


def parse_transaction_record(record: Mapping[str, Any]) -> TransactionRecord:
    """Build a TransactionRecord from a source row.

    Args:
        record: Mapping keyed by the source column names (``Cur``,
            ``Amount``, ``Total_TH``, ``Branch``, ``Transaction_Type``...).

    Returns:
        TransactionRecord: Record with numeric fields parsed once.
    """
    return TransactionRecord(
        id=_parse_id(record.get("id")),
        created_at=parse_timestamp(record.get("created_at")),
        currency_code=normalize_key(record.get("Cur")),
        currency_name=_raw_text(record.get("Currency")),
        rate=parse_decimal(record.get("Rate")),
        amount=parse_decimal(record.get("Amount")),
        total_base=parse_decimal(record.get("Total_TH")),
        branch_id=normalize_key(record.get("Branch")),
        transaction_type=parse_transaction_type(
            record.get("Transaction_Type")
        ),
        raw_amount=_raw_text(record.get("Amount")),
        raw_rate=_raw_text(record.get("Rate")),
        raw_total_base=_raw_text(record.get("Total_TH")),
        customer_name=_optional_text(record.get("Customer_Name")),
        customer_passport_no=_optional_text(
            record.get("Customer_Passport_no")
        ),
        customer_nationality=_optional_text(
            record.get("Customer_Nationality")
        ),
    )


__all__ = [
    "parse_decimal",
    "normalize_key",
    "parse_timestamp",
    "parse_transaction_type",
    "parse_transaction_record",
]
