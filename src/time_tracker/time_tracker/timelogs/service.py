from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import replace
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import elapsed_seconds, now_ms
from ..core.enums import TimerState
from .model import TimeLog
from .repository import TimeLogRepository


class TimerService:
    """Start / pause / resume / stop on a single time log.

    Running -> Paused -> Running ... -> Stopped (terminal). Every interval is
    floored to whole seconds when it is closed, so fractions of a second are
    dropped at each pause and stop.

    Transitions that are not legal from the current state, and unknown log
    ids, return None instead of raising: clients may act on stale state.
    """

    def __init__(
        self,
        time_logs: TimeLogRepository,
        *,
        transaction: Callable[[], AbstractContextManager],
        clock: Callable[[], int] = now_ms,
    ):
        self._time_logs = time_logs
        self._transaction = transaction
        self._clock = clock

    def _now(self, now: Optional[int]) -> int:
        return int(now) if now is not None else int(self._clock())

    def list_time_logs(self) -> Sequence[TimeLog]:
        return self._time_logs.list_all()

    def list_time_logs_for_user(self, user_id: str) -> Sequence[TimeLog]:
        return self._time_logs.list_for_user(user_id)

    def get_active_log(self, task_id: str, user_id: str) -> Optional[TimeLog]:
        return self._time_logs.get_active(task_id=task_id, user_id=user_id)

    def start(self, task_id: str, user_id: str, *, now: Optional[int] = None) -> TimeLog:
        """Open a new running log, stopping any active one for the same task and user."""
        now = self._now(now)
        with self._transaction():
            active = self._time_logs.get_active(task_id=task_id, user_id=user_id)
            if active:
                self.stop(active.log_id, now=now)

            return self._time_logs.create(
                TimeLog(
                    log_id="",
                    task_id=task_id,
                    user_id=user_id,
                    start_time=now,
                    end_time=None,
                    duration=0,
                    is_paused=False,
                )
            )

    def pause(self, log_id: str, *, now: Optional[int] = None) -> Optional[TimeLog]:
        now = self._now(now)
        with self._transaction():
            log = self._time_logs.get_by_id(log_id)
            if not log or log.state != TimerState.RUNNING:
                return None
            paused = replace(
                log,
                duration=log.duration + elapsed_seconds(log.start_time, now),
                is_paused=True,
            )
            self._time_logs.update(paused)
            return paused

    def resume(self, log_id: str, *, now: Optional[int] = None) -> Optional[TimeLog]:
        now = self._now(now)
        with self._transaction():
            log = self._time_logs.get_by_id(log_id)
            if not log or log.state != TimerState.PAUSED:
                return None
            resumed = replace(log, start_time=now, is_paused=False)
            self._time_logs.update(resumed)
            return resumed

    def stop(self, log_id: str, *, now: Optional[int] = None) -> Optional[TimeLog]:
        now = self._now(now)
        with self._transaction():
            log = self._time_logs.get_by_id(log_id)
            if not log or log.state == TimerState.STOPPED:
                return None
            duration = log.duration
            if not log.is_paused:
                duration += elapsed_seconds(log.start_time, now)
            stopped = replace(log, end_time=now, duration=duration, is_paused=False)
            self._time_logs.update(stopped)
            return stopped

    def session_seconds(self, log: TimeLog, *, now: Optional[int] = None) -> int:
        """Time to display for ``log``: closed intervals plus the open one while running."""
        if log.state != TimerState.RUNNING:
            return log.duration
        return log.duration + elapsed_seconds(log.start_time, self._now(now))
