from __future__ import annotations

import threading
from typing import Callable, Container

from .datetime_utils import now_ms


class IdGenerator:
    """Timestamp-based ids (``task-1723280400000``).

    Two ids handed out in the same millisecond would collide, so the numeric
    part is kept strictly increasing and skips values already taken.
    """

    def __init__(self, clock: Callable[[], int] = now_ms):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self, prefix: str, *, taken: Container[str] = ()) -> str:
        with self._lock:
            value = max(int(self._clock()), self._last + 1)
            while f"{prefix}-{value}" in taken:
                value += 1
            self._last = value
            return f"{prefix}-{value}"
