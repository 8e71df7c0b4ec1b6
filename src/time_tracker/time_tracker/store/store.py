from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from ..common.ids import IdGenerator
from ..core.exceptions import PersistenceError
from ..storage.snapshot import SnapshotPersistence
from .codec import SnapshotFormatError, state_from_snapshot, state_to_snapshot
from .seed import SEED_DEPARTMENTS, build_seed_state
from .state import StoreState

logger = logging.getLogger(__name__)


class DataStore:
    """Single source of truth for every entity collection.

    State is hydrated lazily on first access: from the persisted snapshot if
    there is a usable one, otherwise from seed data (which is persisted right
    away). Every mutation goes through ``transaction()``, which persists the
    whole snapshot once the block succeeds and the state actually changed.

    A failed save is logged and the in-memory state stays authoritative for
    the session. A failure to *load* is raised to the caller.
    """

    def __init__(
        self,
        persistence: SnapshotPersistence,
        *,
        seed_factory: Callable[[], StoreState] = build_seed_state,
        id_generator: Optional[IdGenerator] = None,
    ):
        self._persistence = persistence
        self._seed_factory = seed_factory
        self._ids = id_generator or IdGenerator()
        self._state: Optional[StoreState] = None
        self._lock = threading.RLock()
        self._depth = 0
        self._last_save_ok = True

    @property
    def last_save_ok(self) -> bool:
        return self._last_save_ok

    def _ensure_loaded(self) -> StoreState:
        if self._state is not None:
            return self._state

        seeded = False
        snapshot = self._persistence.load()
        if snapshot is None:
            state = self._seed_factory()
            seeded = True
        else:
            try:
                state = state_from_snapshot(snapshot, default_departments=SEED_DEPARTMENTS)
            except SnapshotFormatError as e:
                logger.warning("Stored snapshot is unusable (%s), falling back to seed data", e)
                state = self._seed_factory()
                seeded = True

        self._state = state
        if seeded:
            logger.info("Initialized store from seed data")
            self._persist()
        return state

    def _persist(self) -> None:
        assert self._state is not None
        try:
            self._persistence.save(state_to_snapshot(self._state))
            self._last_save_ok = True
        except PersistenceError as e:
            self._last_save_ok = False
            logger.error("Failed to persist snapshot: %s", e)

    @contextmanager
    def reading(self) -> Iterator[StoreState]:
        """Read-only access; callers copy what they hand out."""
        with self._lock:
            yield self._ensure_loaded()

    @contextmanager
    def transaction(self) -> Iterator[StoreState]:
        """Apply several changes together and persist once.

        Nested transactions join the outermost one. If the block raises, the
        state is rolled back to what it was on entry and nothing is written.
        """
        with self._lock:
            state = self._ensure_loaded()
            outermost = self._depth == 0
            before = state.copy() if outermost else None
            self._depth += 1
            try:
                yield state
            except BaseException:
                if outermost:
                    state.restore(before)
                raise
            finally:
                self._depth -= 1
            if outermost and state != before:
                self._persist()

    def new_id(self, prefix: str) -> str:
        with self._lock:
            return self._ids.next_id(prefix, taken=self._ensure_loaded().all_ids())

    def snapshot(self) -> dict[str, Any]:
        with self.reading() as state:
            return state_to_snapshot(state)

    def reset_to_seed(self) -> None:
        with self._lock:
            self._state = self._seed_factory()
            logger.info("Store reset to seed data")
            self._persist()
