"""Use case to compute the supervisory branch report for a period."""

from dataclasses import dataclass
from datetime import date, tzinfo

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.report_invariants import (
    check_report_completeness,
    check_rollup_additivity,
)
from src.domain.models import BranchReport, GrandTotals, ReportWindow
from src.domain.services.reports import (
    aggregate_transactions,
    compute_grand_totals,
)
from src.domain.services.time_window import filter_transactions
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BranchReportView:
    """Branch report and grand totals for presentation layers.

    Attributes:
        window: Reporting window that was applied.
        report: Ordered branch summaries and currency rollup.
        totals: Grand totals derived from the branch summaries.
        transaction_count: Number of records inside the window.
    """

    window: ReportWindow
    report: BranchReport
    totals: GrandTotals
    transaction_count: int


class GetBranchReportUseCase:
    """Compute branch and currency summaries from recorded transactions."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
        timezone: tzinfo | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            transactions_repository: Port providing transaction records.
            logger: Optional logger compatible with logging.Logger-like API.
            timezone: Viewer time zone for day boundaries, system local
                when None.
        """
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()
        self._timezone = timezone

    def execute(
        self,
        window: ReportWindow | None = None,
        branch_id: str | None = None,
        today: date | None = None,
    ) -> BranchReportView:
        """Return the report for the requested window.

        Args:
            window: Reporting window, today only when None.
            branch_id: Optional branch to restrict the source records to.
            today: Current local date override.

        Returns:
            BranchReportView: Report, totals and the applied window.
        """
        resolved_window = window or ReportWindow()
        transactions = self._transactions_repository.fetch_transactions(
            branch_id=branch_id
        )
        self._logger.info(f"Fetched {len(transactions)} transactions")

        filtered = filter_transactions(
            transactions,
            resolved_window,
            today=today,
            tz=self._timezone,
        )
        self._logger.info(
            f"Kept {len(filtered)} transactions for window={resolved_window.mode}"
        )

        report = aggregate_transactions(filtered)
        check_report_completeness(report, len(filtered), self._logger)
        check_rollup_additivity(report, self._logger)
        totals = compute_grand_totals(report.branch_summaries)
        self._logger.info(
            f"Branch report computed: branches={totals.branch_count}, "
            f"net_total_base={totals.net_total_base}"
        )
        return BranchReportView(
            window=resolved_window,
            report=report,
            totals=totals,
            transaction_count=len(filtered),
        )


__all__ = ["GetBranchReportUseCase", "BranchReportView"]
