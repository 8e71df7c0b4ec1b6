from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.constants import PROJECT_ID_PREFIX
from ..store.store import DataStore
from .model import Project
from .repository import ProjectRepository


class StoreProjectRepository(ProjectRepository):
    def __init__(self, store: DataStore):
        self._store = store

    def list_all(self) -> Sequence[Project]:
        with self._store.reading() as state:
            return list(state.projects)

    def get_by_id(self, project_id: str) -> Optional[Project]:
        with self._store.reading() as state:
            return next((p for p in state.projects if p.project_id == project_id), None)

    def create(self, project: Project) -> Project:
        with self._store.transaction() as state:
            stored = replace(project, project_id=self._store.new_id(PROJECT_ID_PREFIX))
            state.projects.append(stored)
            return stored

    def update(self, project: Project) -> bool:
        with self._store.transaction() as state:
            for i, existing in enumerate(state.projects):
                if existing.project_id == project.project_id:
                    state.projects[i] = project
                    return True
            return False

    def delete_by_id(self, project_id: str) -> bool:
        with self._store.transaction() as state:
            remaining = [p for p in state.projects if p.project_id != project_id]
            if len(remaining) == len(state.projects):
                return False
            state.projects = remaining
            return True
