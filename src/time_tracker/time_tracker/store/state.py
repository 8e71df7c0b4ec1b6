from __future__ import annotations

from dataclasses import dataclass, field

from ..projects.model import Project
from ..tasks.model import Task
from ..timelogs.model import TimeLog
from ..users.model import User


@dataclass
class StoreState:
    """Every entity collection held by the data store.

    Entities are frozen, so a shallow copy of the lists is an independent copy.
    """

    users: list[User] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)
    time_logs: list[TimeLog] = field(default_factory=list)
    departments: list[str] = field(default_factory=list)

    def copy(self) -> "StoreState":
        return StoreState(
            users=list(self.users),
            projects=list(self.projects),
            tasks=list(self.tasks),
            time_logs=list(self.time_logs),
            departments=list(self.departments),
        )

    def restore(self, other: "StoreState") -> None:
        self.users = list(other.users)
        self.projects = list(other.projects)
        self.tasks = list(other.tasks)
        self.time_logs = list(other.time_logs)
        self.departments = list(other.departments)

    def all_ids(self) -> set[str]:
        ids: set[str] = set()
        ids.update(u.user_id for u in self.users)
        ids.update(p.project_id for p in self.projects)
        ids.update(t.task_id for t in self.tasks)
        ids.update(log.log_id for log in self.time_logs)
        return ids
