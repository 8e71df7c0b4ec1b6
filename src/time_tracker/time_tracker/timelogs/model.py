from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import TimerState


@dataclass(frozen=True)
class TimeLog:
    """Thực thể miền (domain): Bản ghi thời gian làm việc.

    ``start_time`` is the start of the currently open interval (epoch ms);
    ``duration`` holds the whole seconds of every closed interval.
    """

    log_id: str
    task_id: str
    user_id: str
    start_time: int
    end_time: Optional[int]
    duration: int
    is_paused: bool = False

    @property
    def state(self) -> TimerState:
        if self.end_time is not None:
            return TimerState.STOPPED
        if self.is_paused:
            return TimerState.PAUSED
        return TimerState.RUNNING

    @property
    def is_active(self) -> bool:
        return self.end_time is None
