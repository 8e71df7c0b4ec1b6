"""Snapshot (camelCase JSON) <-> domain objects."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..core.enums import Role, TaskStatus
from ..projects.model import Project
from ..tasks.model import Task
from ..timelogs.model import TimeLog
from ..users.model import User
from .state import StoreState

_OPTIONAL_USER_FIELDS = (
    ("password", "password"),
    ("designation", "designation"),
    ("work_phone", "workPhone"),
    ("personal_mobile", "personalMobile"),
    ("department", "department"),
)


class SnapshotFormatError(ValueError):
    """The stored snapshot cannot be turned back into entities."""


def user_to_dict(user: User, *, include_password: bool = True) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": user.user_id,
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
        "avatarUrl": user.avatar_url,
    }
    for attr, key in _OPTIONAL_USER_FIELDS:
        if key == "password" and not include_password:
            continue
        value = getattr(user, attr)
        if value is not None:
            out[key] = value
    return out


def user_from_dict(d: dict[str, Any]) -> User:
    return User(
        user_id=str(d["id"]),
        name=str(d["name"]),
        email=str(d["email"]),
        role=Role(d["role"]),
        avatar_url=str(d.get("avatarUrl") or ""),
        password=d.get("password"),
        designation=d.get("designation"),
        work_phone=d.get("workPhone"),
        personal_mobile=d.get("personalMobile"),
        department=d.get("department"),
    )


def project_to_dict(project: Project) -> dict[str, Any]:
    return {
        "id": project.project_id,
        "name": project.name,
        "description": project.description,
        "startDate": project.start_date,
        "endDate": project.end_date,
        "memberIds": list(project.member_ids),
    }


def project_from_dict(d: dict[str, Any]) -> Project:
    return Project(
        project_id=str(d["id"]),
        name=str(d["name"]),
        description=str(d.get("description") or ""),
        start_date=str(d.get("startDate") or ""),
        end_date=str(d.get("endDate") or ""),
        member_ids=tuple(str(m) for m in d.get("memberIds") or ()),
    )


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.task_id,
        "title": task.title,
        "description": task.description,
        "projectId": task.project_id,
        "assigneeId": task.assignee_id,
        "dueDate": task.due_date,
        "status": task.status.value,
        "department": task.department,
    }


def task_from_dict(d: dict[str, Any]) -> Task:
    return Task(
        task_id=str(d["id"]),
        title=str(d["title"]),
        description=str(d.get("description") or ""),
        project_id=str(d.get("projectId") or ""),
        assignee_id=str(d.get("assigneeId") or ""),
        due_date=str(d.get("dueDate") or ""),
        status=TaskStatus(d["status"]),
        department=str(d.get("department") or ""),
    )


def time_log_to_dict(log: TimeLog) -> dict[str, Any]:
    return {
        "id": log.log_id,
        "taskId": log.task_id,
        "userId": log.user_id,
        "startTime": log.start_time,
        "endTime": log.end_time,
        "duration": log.duration,
        "isPaused": log.is_paused,
    }


def time_log_from_dict(d: dict[str, Any]) -> TimeLog:
    end_time: Optional[int] = d.get("endTime")
    return TimeLog(
        log_id=str(d["id"]),
        task_id=str(d["taskId"]),
        user_id=str(d["userId"]),
        start_time=int(d["startTime"]),
        end_time=int(end_time) if end_time is not None else None,
        duration=int(d.get("duration") or 0),
        is_paused=bool(d.get("isPaused", False)),
    )


def state_to_snapshot(state: StoreState) -> dict[str, Any]:
    return {
        "users": [user_to_dict(u) for u in state.users],
        "projects": [project_to_dict(p) for p in state.projects],
        "tasks": [task_to_dict(t) for t in state.tasks],
        "timeLogs": [time_log_to_dict(log) for log in state.time_logs],
        "departments": list(state.departments),
    }


def _items(snapshot: dict[str, Any], key: str) -> list:
    value = snapshot.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SnapshotFormatError(f"{key!r} must be a list")
    return value


def state_from_snapshot(snapshot: dict[str, Any], *, default_departments: Iterable[str]) -> StoreState:
    """Rebuild the store state.

    Older snapshots may lack ``departments``; those get ``default_departments``.
    """
    try:
        if snapshot.get("departments") is None:
            departments = list(default_departments)
        else:
            departments = [str(d) for d in _items(snapshot, "departments")]
        return StoreState(
            users=[user_from_dict(d) for d in _items(snapshot, "users")],
            projects=[project_from_dict(d) for d in _items(snapshot, "projects")],
            tasks=[task_from_dict(d) for d in _items(snapshot, "tasks")],
            time_logs=[time_log_from_dict(d) for d in _items(snapshot, "timeLogs")],
            departments=departments,
        )
    except SnapshotFormatError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SnapshotFormatError(str(e)) from e
