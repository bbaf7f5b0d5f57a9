"""Exchange arithmetic helpers."""

from decimal import ROUND_FLOOR, Decimal

from src.domain.services.normalization import parse_decimal


def calculate_exchange_total(rate, amount) -> Decimal:
    """Return the base currency total for an exchange, rounded down.

    Args:
        rate: Exchange rate, as text or number.
        amount: Foreign currency amount, as text or number.

    Returns:
        Decimal: ``rate * amount`` floored to a whole unit. Unparsable
        inputs count as zero.
    """
    total = parse_decimal(rate) * parse_decimal(amount)
    return total.to_integral_value(rounding=ROUND_FLOOR)


__all__ = ["calculate_exchange_total"]
