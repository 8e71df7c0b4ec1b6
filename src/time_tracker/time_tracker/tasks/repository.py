from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Task


class TaskRepository(Protocol):
    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def get_by_id(self, task_id: str) -> Optional[Task]:
        raise NotImplementedError

    def list_for_assignee(self, user_id: str) -> Sequence[Task]:
        raise NotImplementedError

    def create(self, task: Task) -> Task:
        raise NotImplementedError

    def update(self, task: Task) -> bool:
        raise NotImplementedError

    def delete_by_id(self, task_id: str) -> bool:
        raise NotImplementedError

    def reassign(self, *, from_user_id: str, to_user_id: str) -> int:
        """Move every task of ``from_user_id`` to ``to_user_id``; returns the count."""

        raise NotImplementedError
