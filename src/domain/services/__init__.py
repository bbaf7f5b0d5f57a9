"""Domain services package."""

from .exchange import calculate_exchange_total
from .ledger import (
    list_currency_codes,
    paginate,
    search_transactions,
    sort_transactions,
    sum_total_base,
)
from .normalization import (
    normalize_key,
    parse_decimal,
    parse_timestamp,
    parse_transaction_record,
    parse_transaction_type,
)
from .ordering import (
    currency_sort_key,
    order_branch_summaries,
    order_currency_summaries,
)
from .reports import (
    aggregate_transactions,
    compute_grand_totals,
    rollup_currency_summaries,
)
from .time_window import filter_transactions

__all__ = [
    "aggregate_transactions",
    "calculate_exchange_total",
    "compute_grand_totals",
    "currency_sort_key",
    "filter_transactions",
    "list_currency_codes",
    "normalize_key",
    "order_branch_summaries",
    "order_currency_summaries",
    "paginate",
    "parse_decimal",
    "parse_timestamp",
    "parse_transaction_record",
    "parse_transaction_type",
    "rollup_currency_summaries",
    "search_transactions",
    "sort_transactions",
    "sum_total_base",
]
