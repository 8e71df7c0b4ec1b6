from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import format_duration, now_local, period_start, to_epoch_ms
from ..core.constants import DEFAULT_TOP_TASKS
from ..core.enums import ReportPeriod, Role, TaskStatus
from ..projects.repository import ProjectRepository
from ..tasks.model import Task
from ..tasks.repository import TaskRepository
from ..timelogs.model import TimeLog
from ..timelogs.repository import TimeLogRepository
from ..users.model import User
from ..users.repository import UserRepository


@dataclass(frozen=True)
class ReportData:
    period: ReportPeriod
    project_hours: list[dict] = field(default_factory=list)
    member_hours: list[dict] = field(default_factory=list)
    task_hours: list[dict] = field(default_factory=list)
    total_seconds: int = 0
    completed_tasks: list[Task] = field(default_factory=list)

    @property
    def total_time(self) -> str:
        return format_duration(self.total_seconds)


def _to_hours(seconds: int) -> float:
    return round(seconds / 3600, 2)


def _rows(totals: dict[str, int]) -> list[dict]:
    return [{"name": name, "hours": _to_hours(seconds)} for name, seconds in totals.items()]


class ReportService:
    """Group-by-and-sum over closed time (``duration``) of time logs.

    Admins see every log plus per-member and top-task breakdowns; members see
    only their own logs, their total and their completed tasks.
    """

    def __init__(
        self,
        time_logs: TimeLogRepository,
        tasks: TaskRepository,
        projects: ProjectRepository,
        users: UserRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        top_tasks: int = DEFAULT_TOP_TASKS,
    ):
        self._time_logs = time_logs
        self._tasks = tasks
        self._projects = projects
        self._users = users
        self._clock = clock
        self._top_tasks = int(top_tasks)

    def _filter(self, logs: Iterable[TimeLog], period: ReportPeriod, now: datetime) -> list[TimeLog]:
        start = period_start(period, now)
        if start is None:
            return list(logs)
        start_ms = to_epoch_ms(start)
        return [log for log in logs if log.start_time >= start_ms]

    def build(
        self,
        viewer: User,
        period: ReportPeriod = ReportPeriod.ALL,
        *,
        now: Optional[datetime] = None,
    ) -> ReportData:
        now = now or self._clock()
        is_admin = viewer.role == Role.ADMIN

        source = self._time_logs.list_all() if is_admin else self._time_logs.list_for_user(viewer.user_id)
        logs = self._filter(source, period, now)

        tasks = {t.task_id: t for t in self._tasks.list_all()}
        projects = {p.project_id: p for p in self._projects.list_all()}

        per_project: dict[str, int] = {}
        for log in logs:
            task = tasks.get(log.task_id)
            project = projects.get(task.project_id) if task else None
            if project:
                per_project[project.name] = per_project.get(project.name, 0) + log.duration

        if not is_admin:
            return ReportData(
                period=period,
                project_hours=_rows(per_project),
                total_seconds=sum(log.duration for log in logs),
                completed_tasks=[
                    t for t in tasks.values() if t.assignee_id == viewer.user_id and t.status == TaskStatus.DONE
                ],
            )

        users = {u.user_id: u for u in self._users.list_all()}
        per_member: dict[str, int] = {}
        per_task: dict[str, int] = {}
        for log in logs:
            member = users.get(log.user_id)
            if member:
                per_member[member.name] = per_member.get(member.name, 0) + log.duration
            task = tasks.get(log.task_id)
            if task:
                per_task[task.title] = per_task.get(task.title, 0) + log.duration

        task_rows = sorted(_rows(per_task), key=lambda r: r["hours"], reverse=True)[: self._top_tasks]
        return ReportData(
            period=period,
            project_hours=_rows(per_project),
            member_hours=_rows(per_member),
            task_hours=task_rows,
            total_seconds=sum(log.duration for log in logs),
        )
