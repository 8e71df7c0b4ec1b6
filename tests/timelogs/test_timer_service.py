from __future__ import annotations

from contextlib import nullcontext
from dataclasses import replace
from typing import Optional

from src.time_tracker.time_tracker.core.enums import TimerState
from src.time_tracker.time_tracker.timelogs.model import TimeLog
from src.time_tracker.time_tracker.timelogs.service import TimerService


class InMemoryTimeLogs:
    def __init__(self):
        self._logs: dict[str, TimeLog] = {}
        self._id = 0

    def list_all(self):
        return list(self._logs.values())

    def list_for_user(self, user_id: str):
        return [log for log in self._logs.values() if log.user_id == user_id]

    def get_by_id(self, log_id: str) -> Optional[TimeLog]:
        return self._logs.get(log_id)

    def get_active(self, *, task_id: str, user_id: str) -> Optional[TimeLog]:
        for log in self._logs.values():
            if log.task_id == task_id and log.user_id == user_id and log.is_active:
                return log
        return None

    def create(self, log: TimeLog) -> TimeLog:
        self._id += 1
        stored = replace(log, log_id=f"log-{self._id}")
        self._logs[stored.log_id] = stored
        return stored

    def update(self, log: TimeLog) -> bool:
        if log.log_id not in self._logs:
            return False
        self._logs[log.log_id] = log
        return True

    def active_count(self, task_id: str, user_id: str) -> int:
        return sum(
            1
            for log in self._logs.values()
            if log.task_id == task_id and log.user_id == user_id and log.end_time is None
        )


def _timer(repo: InMemoryTimeLogs) -> TimerService:
    return TimerService(repo, transaction=nullcontext, clock=lambda: 0)


def test_start_pause_resume_stop_accumulates_running_intervals():
    repo = InMemoryTimeLogs()
    timer = _timer(repo)

    log = timer.start("task-1", "user-2", now=0)
    assert log.state == TimerState.RUNNING
    assert log.duration == 0

    paused = timer.pause(log.log_id, now=10_000)
    assert paused.duration == 10
    assert paused.is_paused

    resumed = timer.resume(log.log_id, now=10_000)
    assert resumed.start_time == 10_000
    assert not resumed.is_paused

    stopped = timer.stop(log.log_id, now=25_000)
    assert stopped.duration == 25
    assert stopped.end_time == 25_000
    assert stopped.is_paused is False
    assert stopped.state == TimerState.STOPPED


def test_each_interval_is_floored_to_whole_seconds():
    timer = _timer(InMemoryTimeLogs())

    log = timer.start("task-1", "user-2", now=0)
    timer.pause(log.log_id, now=1_500)
    timer.resume(log.log_id, now=2_000)
    paused = timer.pause(log.log_id, now=4_999)

    # 1.5s -> 1, 2.999s -> 2
    assert paused.duration == 3


def test_stop_while_paused_adds_nothing():
    timer = _timer(InMemoryTimeLogs())

    log = timer.start("task-1", "user-2", now=0)
    timer.pause(log.log_id, now=7_000)
    stopped = timer.stop(log.log_id, now=60_000)

    assert stopped.duration == 7
    assert stopped.end_time == 60_000
    assert not stopped.is_paused


def test_start_while_active_stops_previous_log_first():
    repo = InMemoryTimeLogs()
    timer = _timer(repo)

    first = timer.start("task-1", "user-2", now=0)
    second = timer.start("task-1", "user-2", now=5_000)

    previous = repo.get_by_id(first.log_id)
    assert previous.end_time == 5_000
    assert previous.duration == 5
    assert second.log_id != first.log_id
    assert repo.active_count("task-1", "user-2") == 1
    assert timer.get_active_log("task-1", "user-2").log_id == second.log_id


def test_start_on_other_task_keeps_existing_timer_running():
    repo = InMemoryTimeLogs()
    timer = _timer(repo)

    first = timer.start("task-1", "user-2", now=0)
    timer.start("task-2", "user-2", now=1_000)

    assert repo.get_by_id(first.log_id).end_time is None


def test_illegal_transitions_are_noops():
    repo = InMemoryTimeLogs()
    timer = _timer(repo)

    log = timer.start("task-1", "user-2", now=0)
    assert timer.resume(log.log_id, now=1_000) is None

    timer.pause(log.log_id, now=2_000)
    assert timer.pause(log.log_id, now=3_000) is None

    timer.stop(log.log_id, now=4_000)
    before = repo.get_by_id(log.log_id)
    assert timer.pause(log.log_id, now=5_000) is None
    assert timer.resume(log.log_id, now=5_000) is None
    assert timer.stop(log.log_id, now=5_000) is None
    assert repo.get_by_id(log.log_id) == before


def test_unknown_log_returns_none():
    timer = _timer(InMemoryTimeLogs())

    assert timer.pause("log-missing", now=1) is None
    assert timer.resume("log-missing", now=1) is None
    assert timer.stop("log-missing", now=1) is None


def test_session_seconds_counts_open_interval_only_while_running():
    timer = _timer(InMemoryTimeLogs())

    log = timer.start("task-1", "user-2", now=0)
    assert timer.session_seconds(log, now=3_700) == 3

    paused = timer.pause(log.log_id, now=4_000)
    assert timer.session_seconds(paused, now=100_000) == 4

    resumed = timer.resume(paused.log_id, now=100_000)
    assert timer.session_seconds(resumed, now=102_500) == 6


def test_uses_clock_when_now_is_omitted():
    ticks = iter([1_000, 4_000])
    timer = TimerService(InMemoryTimeLogs(), transaction=nullcontext, clock=lambda: next(ticks))

    log = timer.start("task-1", "user-2")
    stopped = timer.stop(log.log_id)

    assert log.start_time == 1_000
    assert stopped.duration == 3
