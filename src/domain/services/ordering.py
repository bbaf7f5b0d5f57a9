"""Deterministic ordering rules for report output."""

from collections.abc import Iterable, Mapping

from src.domain.constants import CURRENCY_PRIORITY
from src.domain.models import BranchSummary, CurrencySummary

_PRIORITY_INDEX = {code: index for index, code in enumerate(CURRENCY_PRIORITY)}


def currency_sort_key(code: str) -> tuple[int, int, str]:
    """Return the sort key of a currency code.

    Listed codes sort by their priority index ahead of every unlisted code;
    unlisted codes sort by case-sensitive code comparison.
    """
    index = _PRIORITY_INDEX.get(code)
    if index is not None:
        return (0, index, "")
    return (1, 0, code)


def order_currency_summaries(
    summaries: Mapping[str, CurrencySummary],
) -> dict[str, CurrencySummary]:
    """Return a new mapping ordered by the currency priority rule."""
    return {
        code: summaries[code]
        for code in sorted(summaries, key=currency_sort_key)
    }


def order_branch_summaries(
    branches: Iterable[BranchSummary],
) -> list[BranchSummary]:
    """Return branch summaries sorted by branch identifier."""
    return sorted(branches, key=lambda branch: branch.branch_id)


__all__ = [
    "currency_sort_key",
    "order_currency_summaries",
    "order_branch_summaries",
]
