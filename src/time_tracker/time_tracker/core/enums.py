from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Vai trò người dùng dùng cho phân quyền."""

    ADMIN = "Admin"
    MEMBER = "Member"


class TaskStatus(str, Enum):
    """Trạng thái công việc, lưu theo giá trị hiển thị trong snapshot."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class TimerState(str, Enum):
    RUNNING = "Running"
    PAUSED = "Paused"
    STOPPED = "Stopped"


class ReportPeriod(str, Enum):
    ALL = "all"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
