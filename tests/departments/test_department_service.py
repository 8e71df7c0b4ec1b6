import pytest

from src.time_tracker.time_tracker.container import build_container
from src.time_tracker.time_tracker.core.exceptions import ValidationError
from src.time_tracker.time_tracker.storage.memory_storage import MemoryStorage


def test_add_department_is_idempotent():
    c = build_container(storage=MemoryStorage())

    assert c.department_service.add_department("HR") == "HR"
    assert c.department_service.add_department("HR") == "HR"

    assert c.department_service.list_departments().count("HR") == 1


def test_add_department_rejects_blank_name():
    c = build_container(storage=MemoryStorage())

    with pytest.raises(ValidationError):
        c.department_service.add_department("   ")


def test_delete_department_leaves_references_alone():
    c = build_container(storage=MemoryStorage())

    assert c.department_service.delete_department("Creative") is True
    assert "Creative" not in c.department_service.list_departments()
    assert c.task_service.get_task("task-1").department == "Creative"

    assert c.department_service.delete_department("Creative") is False
