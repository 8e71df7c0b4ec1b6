from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Callable, Optional, Sequence

from ..common.validators import require_non_empty
from ..timelogs.repository import TimeLogRepository
from .model import Task
from .repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(
        self,
        tasks: TaskRepository,
        time_logs: TimeLogRepository,
        *,
        transaction: Callable[[], AbstractContextManager],
    ):
        self._tasks = tasks
        self._time_logs = time_logs
        self._transaction = transaction

    def list_tasks(self) -> Sequence[Task]:
        return self._tasks.list_all()

    def get_task(self, task_id: str) -> Optional[Task]:
        return self._tasks.get_by_id(task_id)

    def list_tasks_for_user(self, user_id: str) -> Sequence[Task]:
        return self._tasks.list_for_assignee(user_id)

    def add_task(self, task: Task) -> Task:
        require_non_empty(task.title, "Title")
        return self._tasks.create(task)

    def update_task(self, task: Task) -> Optional[Task]:
        if not self._tasks.update(task):
            return None
        return task

    def delete_task(self, task_id: str) -> bool:
        """Delete a task together with every time log recorded against it."""
        with self._transaction():
            if not self._tasks.delete_by_id(task_id):
                return False
            removed = self._time_logs.delete_for_task(task_id)
        logger.info("Deleted task %s (time logs removed: %d)", task_id, removed)
        return True
