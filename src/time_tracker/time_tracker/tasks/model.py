from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import TaskStatus


@dataclass(frozen=True)
class Task:
    """Thực thể miền (domain): Task.

    ``assignee_id`` is an empty string when the task has nobody to inherit it.
    """

    task_id: str
    title: str
    description: str
    project_id: str
    assignee_id: str
    due_date: str
    status: TaskStatus
    department: str
