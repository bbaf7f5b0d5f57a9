"""Invariant checks for computed branch reports."""

from decimal import Decimal

from src.domain.models import BranchReport


def check_report_completeness(
    report: BranchReport,
    expected_count: int,
    logger,
) -> bool:
    """Warn when the branch counts do not cover every filtered record.

    Args:
        report: Report computed from the filtered records.
        expected_count: Number of filtered records.
        logger: Logger used for warnings.

    Returns:
        bool: True when the counts match.
    """
    counted = sum(
        branch.total_transactions for branch in report.branch_summaries
    )
    if counted != expected_count:
        logger.warning(
            f"Report covers {counted} transactions, expected {expected_count}"
        )
        return False
    return True


def check_rollup_additivity(report: BranchReport, logger) -> bool:
    """Warn when the currency rollup differs from the branch sums.

    Args:
        report: Report to verify.
        logger: Logger used for warnings.

    Returns:
        bool: True when every currency total matches.
    """
    consistent = True
    for code, overall in report.overall_currency_summary.items():
        branch_total = sum(
            (
                branch.currencies[code].net_total_base
                for branch in report.branch_summaries
                if code in branch.currencies
            ),
            Decimal("0"),
        )
        if branch_total != overall.net_total_base:
            logger.warning(
                f"Rollup mismatch for currency={code}: "
                f"overall={overall.net_total_base}, branches={branch_total}"
            )
            consistent = False
    return consistent


__all__ = ["check_report_completeness", "check_rollup_additivity"]
