"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import dotenv

from src.infrastructure.logging.logger import get_app_logger

DEFAULT_TRANSACTIONS_TABLE = "Peter_Exchange_Transaction"


@dataclass(frozen=True)
class ReportSettings:
    """Settings for reading and reporting exchange transactions.

    Attributes:
        transactions_table: Table holding the recorded transactions.
        timezone: Viewer time zone for day boundaries, system local when None.
        branch_id: Optional branch restricting the source records.
    """

    transactions_table: str = DEFAULT_TRANSACTIONS_TABLE
    timezone: Optional[ZoneInfo] = None
    branch_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        table = (
            os.getenv("TRANSACTIONS_TABLE", "").strip()
            or DEFAULT_TRANSACTIONS_TABLE
        )
        timezone = cls._parse_timezone(os.getenv("REPORT_TIMEZONE"), logger)
        branch_id = os.getenv("REPORT_BRANCH", "").strip() or None
        return cls(
            transactions_table=table,
            timezone=timezone,
            branch_id=branch_id,
        )

    @staticmethod
    def _parse_timezone(raw_value: str | None, logger) -> ZoneInfo | None:
        """Resolve an IANA time zone name.

        Args:
            raw_value: Time zone name such as ``Asia/Bangkok``.
            logger: Logger used for warnings.

        Returns:
            ZoneInfo | None: Time zone, None when unset or unknown.
        """
        if not raw_value or not raw_value.strip():
            return None
        name = raw_value.strip()
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                f"Unknown time zone '{name}'. Using the system local zone."
            )
            return None


__all__ = ["ReportSettings", "DEFAULT_TRANSACTIONS_TABLE"]
