from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TimeLog


class TimeLogRepository(Protocol):
    def list_all(self) -> Sequence[TimeLog]:
        raise NotImplementedError

    def list_for_user(self, user_id: str) -> Sequence[TimeLog]:
        raise NotImplementedError

    def get_by_id(self, log_id: str) -> Optional[TimeLog]:
        raise NotImplementedError

    def get_active(self, *, task_id: str, user_id: str) -> Optional[TimeLog]:
        raise NotImplementedError

    def create(self, log: TimeLog) -> TimeLog:
        raise NotImplementedError

    def update(self, log: TimeLog) -> bool:
        raise NotImplementedError

    def delete_for_task(self, task_id: str) -> int:
        raise NotImplementedError

    def delete_for_user(self, user_id: str) -> int:
        raise NotImplementedError
