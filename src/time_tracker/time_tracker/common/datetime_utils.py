from __future__ import annotations

import time
from datetime import datetime, timedelta

from ..core.enums import ReportPeriod


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return int(time.time() * 1000)


def now_local() -> datetime:
    return datetime.now()


def elapsed_seconds(start_ms: int, end_ms: int) -> int:
    """Whole seconds between two epoch-ms instants, floored."""
    return (int(end_ms) - int(start_ms)) // 1000


def period_start(period: ReportPeriod, now: datetime) -> datetime | None:
    """Start of the current day/week/month/year in local time.

    Month and year keep the time of day of ``now``; only day and week are
    truncated to midnight. Returns None for ``ReportPeriod.ALL``.
    """
    if period == ReportPeriod.DAY:
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == ReportPeriod.WEEK:
        monday = now - timedelta(days=now.weekday())
        return monday.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == ReportPeriod.MONTH:
        return now.replace(day=1)
    if period == ReportPeriod.YEAR:
        return now.replace(month=1, day=1)
    return None


def to_epoch_ms(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def format_duration(total_seconds: int) -> str:
    hours = int(total_seconds) // 3600
    minutes = (int(total_seconds) % 3600) // 60
    return f"{hours}h {minutes}m"


def format_clock(total_seconds: int) -> str:
    """HH:MM:SS, used for live timer display."""
    seconds = int(total_seconds)
    return f"{seconds // 3600:02d}:{(seconds % 3600) // 60:02d}:{seconds % 60:02d}"
