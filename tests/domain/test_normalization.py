"""Tests for raw transaction normalization."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from src.domain.models import TransactionType
from src.domain.services.normalization import (
    normalize_key,
    parse_decimal,
    parse_timestamp,
    parse_transaction_record,
    parse_transaction_type,
)


def test_parse_decimal_reads_text_values() -> None:
    """Numeric text should become Decimal without float noise."""
    assert parse_decimal("35.125") == Decimal("35.125")
    assert parse_decimal(" 100 ") == Decimal("100")
    assert parse_decimal(12) == Decimal("12")


def test_parse_decimal_falls_back_to_zero() -> None:
    """Missing, malformed, and non-finite values should count as zero."""
    for raw in (None, "", "abc", "12,5x", "NaN", "Infinity"):
        assert parse_decimal(raw) == Decimal("0")


def test_parse_decimal_rejects_out_of_range_magnitudes() -> None:
    """Exponents beyond what report arithmetic can hold should count as zero."""
    assert parse_decimal("1e9999999") == Decimal("0")
    assert parse_decimal("-5E+600000") == Decimal("0")
    assert parse_decimal("1e-9999999") == Decimal("0")
    assert parse_decimal(Decimal("1e9999999")) == Decimal("0")
    assert parse_decimal("1e6") == Decimal("1000000")


def test_parse_decimal_rejects_separators_and_non_ascii_digits() -> None:
    """Only plain ASCII digits should parse."""
    assert parse_decimal("1_000") == Decimal("0")
    assert parse_decimal("\uff11\uff12") == Decimal("0")
    assert parse_decimal("\u0661\u0662") == Decimal("0")


def test_normalize_key_uses_unknown_sentinel() -> None:
    """Blank keys should normalize to Unknown."""
    assert normalize_key(None) == "Unknown"
    assert normalize_key("   ") == "Unknown"
    assert normalize_key(" B01 ") == "B01"


def test_parse_timestamp_handles_offsets_and_invalid_values() -> None:
    """ISO timestamps should parse, including a Z suffix."""
    parsed = parse_timestamp("2024-01-01T10:00:00Z")
    assert parsed == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    offset = parse_timestamp("2024-01-01T10:00:00+07:00")
    assert offset.utcoffset() == timedelta(hours=7)
    assert parse_timestamp("2024-01-01T10:00:00") == datetime(2024, 1, 1, 10)
    assert parse_timestamp("yesterday") is None
    assert parse_timestamp(None) is None


def test_parse_transaction_type_defaults_to_selling() -> None:
    """Only the Buying marker should select the buying bucket."""
    assert parse_transaction_type("Buying") is TransactionType.BUYING
    assert parse_transaction_type("Selling") is TransactionType.SELLING
    assert parse_transaction_type(None) is TransactionType.SELLING


def test_parse_transaction_record_maps_source_columns() -> None:
    """Source rows should map onto the transaction record fields."""
    record = parse_transaction_record(
        {
            "id": 7,
            "created_at": "2024-03-05T09:30:00+00:00",
            "Currency": "US Dollar",
            "Cur": "USD",
            "Rate": "35.50",
            "Amount": "100",
            "Total_TH": "3550",
            "Branch": "B01",
            "Transaction_Type": "Buying",
            "Customer_Name": "Jane Doe",
        }
    )

    assert record.id == 7
    assert record.created_at == datetime(2024, 3, 5, 9, 30, tzinfo=timezone.utc)
    assert record.currency_code == "USD"
    assert record.currency_name == "US Dollar"
    assert record.rate == Decimal("35.50")
    assert record.amount == Decimal("100")
    assert record.total_base == Decimal("3550")
    assert record.branch_id == "B01"
    assert record.is_buying
    assert record.raw_total_base == "3550"
    assert record.customer_name == "Jane Doe"
    assert record.customer_passport_no is None


def test_parse_transaction_record_tolerates_missing_fields() -> None:
    """Missing keys should degrade to sentinels and zeros."""
    record = parse_transaction_record({"Amount": "oops"})

    assert record.id is None
    assert record.created_at is None
    assert record.currency_code == "Unknown"
    assert record.branch_id == "Unknown"
    assert record.amount == Decimal("0")
    assert record.transaction_type is TransactionType.SELLING
