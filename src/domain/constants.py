"""Domain constants for branch exchange reporting."""

BASE_CURRENCY = "THB"

UNKNOWN_KEY = "Unknown"

CURRENCY_PRIORITY = (
    "USD",
    "USD2",
    "USD1",
    "EUR",
    "JPY",
    "GBP",
    "SGD",
    "AUD",
    "CHF",
    "HKD",
    "CAD",
    "NZD",
    "TWD",
    "MYR",
    "CNY",
    "KRW",
)

DEFAULT_PAGE_SIZE = 10


__all__ = [
    "BASE_CURRENCY",
    "UNKNOWN_KEY",
    "CURRENCY_PRIORITY",
    "DEFAULT_PAGE_SIZE",
]
