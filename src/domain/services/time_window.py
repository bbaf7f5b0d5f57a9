"""Time window filtering for report generation."""

from collections.abc import Iterable
from datetime import date, datetime, time, tzinfo

from src.domain.models import ReportWindow, TransactionRecord

_END_OF_DAY = time(23, 59, 59, 999000)


def to_local(timestamp: datetime, tz: tzinfo | None = None) -> datetime:
    """Express a timestamp as naive wall-clock time in the viewer's zone.

    Args:
        timestamp: Aware or naive timestamp. Naive values are taken as
            already local.
        tz: Viewer time zone, the system local zone when None.

    Returns:
        datetime: Naive local timestamp.
    """
    if timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone(tz).replace(tzinfo=None)


def current_local_date(tz: tzinfo | None = None) -> date:
    """Return today's calendar date in the viewer's zone."""
    return datetime.now(tz).date()


def is_on_day(
    timestamp: datetime,
    day: date,
    tz: tzinfo | None = None,
) -> bool:
    """Return True when the timestamp falls on the given local day."""
    return to_local(timestamp, tz).date() == day


def is_within_range(
    timestamp: datetime,
    date_from: date,
    date_to: date,
    tz: tzinfo | None = None,
) -> bool:
    """Return True when the timestamp lies inside the inclusive day range."""
    local = to_local(timestamp, tz)
    start = datetime.combine(date_from, time.min)
    end = datetime.combine(date_to, _END_OF_DAY)
    return start <= local <= end


def filter_transactions(
    transactions: Iterable[TransactionRecord],
    window: ReportWindow,
    *,
    today: date | None = None,
    tz: tzinfo | None = None,
) -> list[TransactionRecord]:
    """Select the transactions created inside the reporting window.

    Records without a creation timestamp are excluded in every mode. The
    input order is preserved.

    Args:
        transactions: Records from the source collection.
        window: Active reporting window.
        today: Current local date, computed from ``tz`` when None.
        tz: Viewer time zone, the system local zone when None.

    Returns:
        list[TransactionRecord]: Records inside the window.
    """
    timestamped = [tx for tx in transactions if tx.created_at is not None]
    mode = window.mode
    if mode == "today":
        day = today or current_local_date(tz)
        return [tx for tx in timestamped if is_on_day(tx.created_at, day, tz)]
    if mode == "range":
        if window.date_from > window.date_to:
            return []
        return [
            tx
            for tx in timestamped
            if is_within_range(
                tx.created_at,
                window.date_from,
                window.date_to,
                tz,
            )
        ]
    return timestamped


__all__ = [
    "to_local",
    "current_local_date",
    "is_on_day",
    "is_within_range",
    "filter_transactions",
]
