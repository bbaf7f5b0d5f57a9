"""CLI adapter printing the supervisory branch report.

The reporting window is read from ``REPORT_TODAY_ONLY``, ``REPORT_DATE_FROM``
and ``REPORT_DATE_TO``; the optional branch from ``REPORT_BRANCH``.
"""

from datetime import date
from decimal import Decimal
import os

from src.application.use_cases.get_branch_report import BranchReportView
from src.domain.constants import BASE_CURRENCY
from src.domain.models import CurrencySummary, ReportWindow
from src.infrastructure.container import build_branch_report_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings

_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _read_window(logger) -> ReportWindow:
    """Build the reporting window from environment variables."""
    raw_today = os.getenv("REPORT_TODAY_ONLY", "true").strip().lower()
    return ReportWindow(
        today_only=raw_today not in _FALSE_VALUES,
        date_from=_parse_date(os.getenv("REPORT_DATE_FROM"), logger),
        date_to=_parse_date(os.getenv("REPORT_DATE_TO"), logger),
    )


def _format_amount(value: Decimal) -> str:
    """Format amounts with thousands separators and two decimals."""
    return f"{value:,.2f}"


def _currency_rows(summaries: dict[str, CurrencySummary]) -> list[str]:
    header = (
        f"{'Currency':<10}{'Buy amt':>16}{'Buy THB':>18}"
        f"{'Sell amt':>16}{'Sell THB':>18}{'Net amt':>16}{'Net THB':>18}"
    )
    lines = [header]
    for summary in summaries.values():
        lines.append(
            f"{summary.currency:<10}"
            f"{_format_amount(summary.buying_amount):>16}"
            f"{_format_amount(summary.buying_total_base):>18}"
            f"{_format_amount(summary.selling_amount):>16}"
            f"{_format_amount(summary.selling_total_base):>18}"
            f"{_format_amount(summary.net_amount):>16}"
            f"{_format_amount(summary.net_total_base):>18}"
        )
    return lines


def render_report(view: BranchReportView) -> str:
    """Render a branch report view as plain text tables."""
    totals = view.totals
    lines = [
        f"Branch report (window={view.window.mode}, "
        f"from={view.window.date_from}, to={view.window.date_to})",
        f"Branches: {totals.branch_count}",
        f"Buying: {totals.buying_count} "
        f"({_format_amount(totals.buying_total)} {BASE_CURRENCY})",
        f"Selling: {totals.selling_count} "
        f"({_format_amount(totals.selling_total)} {BASE_CURRENCY})",
        f"Net total: {_format_amount(totals.net_total_base)} {BASE_CURRENCY}",
        "",
        "Overall currency summary (all branches)",
    ]
    lines.extend(_currency_rows(view.report.overall_currency_summary))
    for branch in view.report.branch_summaries:
        lines.extend(
            [
                "",
                f"Branch: {branch.branch_id} "
                f"(total={branch.total_transactions}, "
                f"buy={branch.buying_count}, sell={branch.selling_count}, "
                f"net={_format_amount(branch.net_total_base)} {BASE_CURRENCY})",
            ]
        )
        lines.extend(_currency_rows(branch.currencies))
    return "\n".join(lines)


def main() -> None:
    """Run the branch report and print it."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    window = _read_window(logger)
    use_case = build_branch_report_use_case(settings)

    view = use_case.execute(window=window, branch_id=settings.branch_id)

    print(render_report(view))


if __name__ == "__main__":  # pragma: no cover
    main()
