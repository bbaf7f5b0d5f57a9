"""Helpers for Decimal normalization."""

from decimal import DefaultContext, Decimal, InvalidOperation

# Half of the default exponent range, so sums and pairwise products of
# accepted values stay inside the default context without overflowing.
_MAX_ADJUSTED = DefaultContext.Emax // 2
_MIN_ADJUSTED = DefaultContext.Emin // 2


def _in_range(value: Decimal) -> bool:
    if not value.is_finite():
        return False
    if value.is_zero():
        return True
    return _MIN_ADJUSTED <= value.adjusted() <= _MAX_ADJUSTED


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Text must use plain ASCII digits; digit separators such as ``_`` are not
    accepted.

    Args:
        value: Raw numeric value from SQL, adapters, or text columns.

    Returns:
        Decimal: Normalized numeric value, zero when the value is missing,
        unparsable, not finite, or too large or small in magnitude.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if _in_range(value) else Decimal("0")
    try:
        text = str(value).strip()
    except ValueError:
        return Decimal("0")
    if "_" in text or not text.isascii():
        return Decimal("0")
    try:
        result = Decimal(text)
    except (InvalidOperation, ValueError):
        return Decimal("0")
    return result if _in_range(result) else Decimal("0")


__all__ = ["coerce_decimal"]
