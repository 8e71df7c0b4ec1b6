from __future__ import annotations

from typing import Sequence

from ..store.store import DataStore
from .repository import DepartmentRepository


class StoreDepartmentRepository(DepartmentRepository):
    def __init__(self, store: DataStore):
        self._store = store

    def list_all(self) -> Sequence[str]:
        with self._store.reading() as state:
            return list(state.departments)

    def add(self, name: str) -> bool:
        with self._store.transaction() as state:
            if name in state.departments:
                return False
            state.departments.append(name)
            return True

    def remove(self, name: str) -> bool:
        with self._store.transaction() as state:
            remaining = [d for d in state.departments if d != name]
            if len(remaining) == len(state.departments):
                return False
            state.departments = remaining
            return True
