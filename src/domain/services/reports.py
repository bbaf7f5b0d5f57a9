"""Domain services for branch and currency report aggregates."""

from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal

from src.domain.models import (
    BranchReport,
    BranchSummary,
    CurrencySummary,
    GrandTotals,
    TransactionRecord,
)
from src.domain.services.ordering import (
    order_branch_summaries,
    order_currency_summaries,
)


def aggregate_transactions(
    transactions: Iterable[TransactionRecord],
) -> BranchReport:
    """Fold filtered transactions into branch and currency summaries.

    Each branch entry is inserted zero-valued the first time its key is
    seen, then accumulated. The direction bucket comes from the
    transaction type only, never from the sign of the amounts.

    Args:
        transactions: Records already filtered by the reporting window.

    Returns:
        BranchReport: Branches sorted by id, each with ordered currencies,
        and the ordered cross-branch currency rollup.
    """
    branches: dict[str, BranchSummary] = {}
    for transaction in transactions:
        key = transaction.branch_id
        current = branches.setdefault(key, BranchSummary(branch_id=key))
        branches[key] = current.accumulate(transaction)

    branch_summaries = [
        replace(branch, currencies=order_currency_summaries(branch.currencies))
        for branch in order_branch_summaries(branches.values())
    ]
    return BranchReport(
        branch_summaries=branch_summaries,
        overall_currency_summary=rollup_currency_summaries(branch_summaries),
    )


def rollup_currency_summaries(
    branch_summaries: Iterable[BranchSummary],
) -> dict[str, CurrencySummary]:
    """Sum every branch's currency summaries into one ordered mapping."""
    overall: dict[str, CurrencySummary] = {}
    for branch in branch_summaries:
        for code, summary in branch.currencies.items():
            current = overall.setdefault(code, CurrencySummary(currency=code))
            overall[code] = current.merge(summary)
    return order_currency_summaries(overall)


def compute_grand_totals(
    branch_summaries: Iterable[BranchSummary],
) -> GrandTotals:
    """Derive cross-branch totals from the branch summaries.

    Args:
        branch_summaries: Branch summaries from ``aggregate_transactions``.

    Returns:
        GrandTotals: Branch count, counts and base currency sums.
    """
    branches = list(branch_summaries)
    return GrandTotals(
        branch_count=len(branches),
        net_total_base=sum(
            (branch.net_total_base for branch in branches), Decimal("0")
        ),
        buying_count=sum(branch.buying_count for branch in branches),
        selling_count=sum(branch.selling_count for branch in branches),
        buying_total=sum(
            (branch.buying_total for branch in branches), Decimal("0")
        ),
        selling_total=sum(
            (branch.selling_total for branch in branches), Decimal("0")
        ),
    )


__all__ = [
    "aggregate_transactions",
    "rollup_currency_summaries",
    "compute_grand_totals",
]
