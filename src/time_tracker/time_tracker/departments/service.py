from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from .repository import DepartmentRepository


class DepartmentService:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self) -> Sequence[str]:
        return self._departments.list_all()

    def add_department(self, name: str) -> str:
        """Idempotent: adding an existing name is a no-op returning the name."""
        name = require_non_empty(name, "Department name")
        self._departments.add(name)
        return name

    def delete_department(self, name: str) -> bool:
        """Removes the name only; users and tasks keep referring to it."""
        return self._departments.remove(name)
