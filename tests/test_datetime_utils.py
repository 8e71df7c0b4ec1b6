from datetime import datetime

from src.time_tracker.time_tracker.common.datetime_utils import (
    elapsed_seconds,
    format_clock,
    format_duration,
    period_start,
)
from src.time_tracker.time_tracker.core.enums import ReportPeriod


def test_elapsed_seconds_floors():
    assert elapsed_seconds(0, 999) == 0
    assert elapsed_seconds(1_000, 2_999) == 1
    assert elapsed_seconds(0, 25_000) == 25


def test_week_starts_on_monday():
    sunday = datetime(2024, 8, 25, 18, 30)

    assert period_start(ReportPeriod.WEEK, sunday) == datetime(2024, 8, 19)


def test_period_starts():
    now = datetime(2024, 8, 20, 15, 45, 10)

    assert period_start(ReportPeriod.ALL, now) is None
    assert period_start(ReportPeriod.DAY, now) == datetime(2024, 8, 20)
    assert period_start(ReportPeriod.MONTH, now) == datetime(2024, 8, 1, 15, 45, 10)
    assert period_start(ReportPeriod.YEAR, now) == datetime(2024, 1, 1, 15, 45, 10)


def test_formatting():
    assert format_duration(9000) == "2h 30m"
    assert format_duration(59) == "0h 0m"
    assert format_clock(3723) == "01:02:03"
