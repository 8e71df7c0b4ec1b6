from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_non_empty
from .model import Project
from .repository import ProjectRepository


class ProjectService:
    """Project CRUD.

    Deleting a project leaves its tasks in place; their ``project_id`` simply
    stops resolving, the same policy as for departments.
    """

    def __init__(self, projects: ProjectRepository):
        self._projects = projects

    def list_projects(self) -> Sequence[Project]:
        return self._projects.list_all()

    def get_project(self, project_id: str) -> Optional[Project]:
        return self._projects.get_by_id(project_id)

    def add_project(self, project: Project) -> Project:
        require_non_empty(project.name, "Project name")
        return self._projects.create(project)

    def update_project(self, project: Project) -> Optional[Project]:
        if not self._projects.update(project):
            return None
        return project

    def delete_project(self, project_id: str) -> bool:
        return self._projects.delete_by_id(project_id)
