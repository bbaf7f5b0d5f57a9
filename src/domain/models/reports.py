"""Domain models for branch and currency report aggregates."""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal

from src.domain.models.transactions import TransactionRecord

_ZERO = Decimal("0")


@dataclass(frozen=True)
class CurrencySummary:
    """Buying and selling totals for a single currency.

    Attributes:
        currency: Currency code used as the grouping key.
        buying_amount: Foreign amount of buying transactions.
        selling_amount: Foreign amount of selling transactions.
        buying_total_base: Base currency value of buying transactions.
        selling_total_base: Base currency value of selling transactions.
    """

    currency: str
    buying_amount: Decimal = _ZERO
    selling_amount: Decimal = _ZERO
    buying_total_base: Decimal = _ZERO
    selling_total_base: Decimal = _ZERO

    @property
    def net_amount(self) -> Decimal:
        """Return buying plus selling foreign amounts."""
        return self.buying_amount + self.selling_amount

    @property
    def net_total_base(self) -> Decimal:
        """Return buying plus selling base currency values."""
        return self.buying_total_base + self.selling_total_base

    def accumulate(self, transaction: TransactionRecord) -> "CurrencySummary":
        """Return a new summary including the given transaction."""
        if transaction.is_buying:
            return replace(
                self,
                buying_amount=self.buying_amount + transaction.amount,
                buying_total_base=(
                    self.buying_total_base + transaction.total_base
                ),
            )
        return replace(
            self,
            selling_amount=self.selling_amount + transaction.amount,
            selling_total_base=(
                self.selling_total_base + transaction.total_base
            ),
        )

    def merge(self, other: "CurrencySummary") -> "CurrencySummary":
        """Return the field-wise sum of two summaries for one currency."""
        return replace(
            self,
            buying_amount=self.buying_amount + other.buying_amount,
            selling_amount=self.selling_amount + other.selling_amount,
            buying_total_base=(
                self.buying_total_base + other.buying_total_base
            ),
            selling_total_base=(
                self.selling_total_base + other.selling_total_base
            ),
        )


@dataclass(frozen=True)
class BranchSummary:
    """Totals for a single branch, with its per-currency breakdown."""

    branch_id: str
    total_transactions: int = 0
    total_amount: Decimal = _ZERO
    net_total_base: Decimal = _ZERO
    buying_count: int = 0
    selling_count: int = 0
    buying_total: Decimal = _ZERO
    selling_total: Decimal = _ZERO
    currencies: dict[str, CurrencySummary] = field(default_factory=dict)

    def accumulate(self, transaction: TransactionRecord) -> "BranchSummary":
        """Return a new branch summary including the given transaction.

        The currency entry is created zero-valued on first sight and then
        accumulated like any other.
        """
        currencies = dict(self.currencies)
        code = transaction.currency_code
        current = currencies.setdefault(code, CurrencySummary(currency=code))
        currencies[code] = current.accumulate(transaction)

        if transaction.is_buying:
            direction = {
                "buying_count": self.buying_count + 1,
                "buying_total": self.buying_total + transaction.total_base,
            }
        else:
            direction = {
                "selling_count": self.selling_count + 1,
                "selling_total": self.selling_total + transaction.total_base,
            }
        return replace(
            self,
            total_transactions=self.total_transactions + 1,
            total_amount=self.total_amount + transaction.amount,
            net_total_base=self.net_total_base + transaction.total_base,
            currencies=currencies,
            **direction,
        )


@dataclass(frozen=True)
class GrandTotals:
    """Cross-branch totals derived from branch summaries."""

    branch_count: int
    net_total_base: Decimal
    buying_count: int
    selling_count: int
    buying_total: Decimal
    selling_total: Decimal


@dataclass(frozen=True)
class BranchReport:
    """Ordered branch summaries and the cross-branch currency rollup."""

    branch_summaries: list[BranchSummary]
    overall_currency_summary: dict[str, CurrencySummary]


@dataclass(frozen=True)
class ReportWindow:
    """Reporting period applied before aggregation.

    Attributes:
        today_only: Keep only records created on the current local day.
        date_from: Inclusive first calendar day of an explicit range.
        date_to: Inclusive last calendar day of an explicit range.
    """

    today_only: bool = True
    date_from: date | None = None
    date_to: date | None = None

    @property
    def mode(self) -> str:
        """Return the active filter mode: today, range, or all."""
        if self.today_only:
            return "today"
        if self.date_from is not None and self.date_to is not None:
            return "range"
        return "all"


__all__ = [
    "CurrencySummary",
    "BranchSummary",
    "GrandTotals",
    "BranchReport",
    "ReportWindow",
]
