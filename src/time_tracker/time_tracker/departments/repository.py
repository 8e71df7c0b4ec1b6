from __future__ import annotations

from typing import Protocol, Sequence


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[str]:
        raise NotImplementedError

    def add(self, name: str) -> bool:
        """Returns False when the name is already present."""

        raise NotImplementedError

    def remove(self, name: str) -> bool:
        raise NotImplementedError
