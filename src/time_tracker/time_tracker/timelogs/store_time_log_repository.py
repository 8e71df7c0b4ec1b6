from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.constants import TIME_LOG_ID_PREFIX
from ..store.store import DataStore
from .model import TimeLog
from .repository import TimeLogRepository


class StoreTimeLogRepository(TimeLogRepository):
    def __init__(self, store: DataStore):
        self._store = store

    def list_all(self) -> Sequence[TimeLog]:
        with self._store.reading() as state:
            return list(state.time_logs)

    def list_for_user(self, user_id: str) -> Sequence[TimeLog]:
        with self._store.reading() as state:
            return [log for log in state.time_logs if log.user_id == user_id]

    def get_by_id(self, log_id: str) -> Optional[TimeLog]:
        with self._store.reading() as state:
            return next((log for log in state.time_logs if log.log_id == log_id), None)

    def get_active(self, *, task_id: str, user_id: str) -> Optional[TimeLog]:
        with self._store.reading() as state:
            return next(
                (
                    log
                    for log in state.time_logs
                    if log.task_id == task_id and log.user_id == user_id and log.is_active
                ),
                None,
            )

    def create(self, log: TimeLog) -> TimeLog:
        with self._store.transaction() as state:
            stored = replace(log, log_id=self._store.new_id(TIME_LOG_ID_PREFIX))
            state.time_logs.append(stored)
            return stored

    def update(self, log: TimeLog) -> bool:
        with self._store.transaction() as state:
            for i, existing in enumerate(state.time_logs):
                if existing.log_id == log.log_id:
                    state.time_logs[i] = log
                    return True
            return False

    def _delete_where(self, predicate) -> int:
        with self._store.transaction() as state:
            remaining = [log for log in state.time_logs if not predicate(log)]
            removed = len(state.time_logs) - len(remaining)
            state.time_logs = remaining
            return removed

    def delete_for_task(self, task_id: str) -> int:
        return self._delete_where(lambda log: log.task_id == task_id)

    def delete_for_user(self, user_id: str) -> int:
        return self._delete_where(lambda log: log.user_id == user_id)
