from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.constants import TASK_ID_PREFIX
from ..store.store import DataStore
from .model import Task
from .repository import TaskRepository


class StoreTaskRepository(TaskRepository):
    def __init__(self, store: DataStore):
        self._store = store

    def list_all(self) -> Sequence[Task]:
        with self._store.reading() as state:
            return list(state.tasks)

    def get_by_id(self, task_id: str) -> Optional[Task]:
        with self._store.reading() as state:
            return next((t for t in state.tasks if t.task_id == task_id), None)

    def list_for_assignee(self, user_id: str) -> Sequence[Task]:
        with self._store.reading() as state:
            return [t for t in state.tasks if t.assignee_id == user_id]

    def create(self, task: Task) -> Task:
        with self._store.transaction() as state:
            stored = replace(task, task_id=self._store.new_id(TASK_ID_PREFIX))
            state.tasks.append(stored)
            return stored

    def update(self, task: Task) -> bool:
        with self._store.transaction() as state:
            for i, existing in enumerate(state.tasks):
                if existing.task_id == task.task_id:
                    state.tasks[i] = task
                    return True
            return False

    def delete_by_id(self, task_id: str) -> bool:
        with self._store.transaction() as state:
            remaining = [t for t in state.tasks if t.task_id != task_id]
            if len(remaining) == len(state.tasks):
                return False
            state.tasks = remaining
            return True

    def reassign(self, *, from_user_id: str, to_user_id: str) -> int:
        count = 0
        with self._store.transaction() as state:
            for i, task in enumerate(state.tasks):
                if task.assignee_id == from_user_id:
                    state.tasks[i] = replace(task, assignee_id=to_user_id)
                    count += 1
        return count
