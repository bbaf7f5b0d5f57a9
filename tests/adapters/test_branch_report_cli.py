"""Tests for the branch_report_cli adapter."""

from datetime import date
from unittest.mock import MagicMock

from src.adapters import branch_report_cli
from src.application.use_cases.get_branch_report import GetBranchReportUseCase
from src.domain.models import ReportWindow
from src.domain.services.normalization import parse_transaction_record
from src.infrastructure.settings import ReportSettings


def _rows() -> list:
    return [
        parse_transaction_record(
            {
                "created_at": "2024-05-02T10:00:00",
                "Cur": currency,
                "Amount": "10",
                "Total_TH": total,
                "Branch": branch,
                "Transaction_Type": tx_type,
            }
        )
        for branch, currency, tx_type, total in (
            ("B", "USD", "Buying", "3500"),
            ("A", "EUR", "Selling", "1900.5"),
            ("A", "USD", "Buying", "1234567.891"),
        )
    ]


def test_read_window_parses_environment(monkeypatch) -> None:
    """Window variables should be parsed, invalid dates dropped."""
    logger = MagicMock()
    monkeypatch.setenv("REPORT_TODAY_ONLY", "false")
    monkeypatch.setenv("REPORT_DATE_FROM", "2024-05-01")
    monkeypatch.setenv("REPORT_DATE_TO", "05/31/2024")

    window = branch_report_cli._read_window(logger)

    assert window == ReportWindow(
        today_only=False,
        date_from=date(2024, 5, 1),
        date_to=None,
    )
    assert window.mode == "all"
    logger.warning.assert_called_once()


def test_main_prints_report(monkeypatch, capsys) -> None:
    """The CLI should run the use case and print the tables."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = _rows()
    use_case = GetBranchReportUseCase(repository, logger=MagicMock())
    captured = {}

    def _fake_build(settings):
        captured["settings"] = settings
        return use_case

    monkeypatch.setattr(branch_report_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        branch_report_cli.ReportSettings,
        "from_env",
        classmethod(lambda cls: ReportSettings(branch_id=None)),
    )
    monkeypatch.setattr(
        branch_report_cli,
        "build_branch_report_use_case",
        _fake_build,
    )
    monkeypatch.setenv("REPORT_TODAY_ONLY", "no")
    monkeypatch.delenv("REPORT_DATE_FROM", raising=False)
    monkeypatch.delenv("REPORT_DATE_TO", raising=False)

    branch_report_cli.main()

    out = capsys.readouterr().out
    assert "window=all" in out
    assert "Branches: 2" in out
    assert "1,234,567.89" in out
    assert out.index("Branch: A") < out.index("Branch: B")
    overall = out.split("Overall currency summary")[1].split("Branch: A")[0]
    assert overall.index("USD") < overall.index("EUR")
    assert captured["settings"] == ReportSettings(branch_id=None)
