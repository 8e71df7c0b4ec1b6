from dataclasses import replace

from src.time_tracker.time_tracker.container import build_container
from src.time_tracker.time_tracker.projects.model import Project
from src.time_tracker.time_tracker.storage.memory_storage import MemoryStorage


def test_project_crud_keeps_tasks_on_delete():
    c = build_container(storage=MemoryStorage())

    project = c.project_service.add_project(
        Project(
            project_id="",
            name="Intranet",
            description="Internal portal",
            start_date="2024-10-01",
            end_date="2025-03-31",
            member_ids=("user-2",),
        )
    )
    assert c.project_service.get_project(project.project_id) == project

    renamed = c.project_service.update_project(replace(project, name="Intranet v2"))
    assert renamed.name == "Intranet v2"
    assert c.project_service.update_project(replace(project, project_id="proj-missing")) is None

    assert c.project_service.delete_project("proj-1") is True
    assert c.project_service.get_project("proj-1") is None
    assert c.task_service.get_task("task-1").project_id == "proj-1"
    assert c.project_service.delete_project("proj-1") is False
