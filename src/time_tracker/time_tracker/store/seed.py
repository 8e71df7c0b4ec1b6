"""Fixture data written on first run (or when the stored snapshot is unusable)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from ..common.datetime_utils import to_epoch_ms
from ..core.enums import Role, TaskStatus
from ..projects.model import Project
from ..tasks.model import Task
from ..timelogs.model import TimeLog
from ..users.model import User
from .state import StoreState

SEED_DEPARTMENTS: tuple[str, ...] = (
    "Web Development",
    "SEO",
    "Sales",
    "Digital Marketing",
    "Creative",
)

SEED_PASSWORD = "password"


def _seed_users(hash_password: Callable[[str], str]) -> list[User]:
    return [
        User(
            user_id="user-1",
            name="Admin User",
            email="admin@example.com",
            password=hash_password(SEED_PASSWORD),
            role=Role.ADMIN,
            avatar_url="https://i.pravatar.cc/150?u=admin@example.com",
            designation="Project Manager",
            work_phone="123-456-7890",
            personal_mobile="098-765-4321",
            department="Web Development",
        ),
        User(
            user_id="user-2",
            name="Team Member",
            email="member@example.com",
            password=hash_password(SEED_PASSWORD),
            role=Role.MEMBER,
            avatar_url="https://i.pravatar.cc/150?u=member@example.com",
            designation="Frontend Developer",
            work_phone="123-456-7891",
            personal_mobile="098-765-4322",
            department="Web Development",
        ),
    ]


def _seed_projects() -> list[Project]:
    return [
        Project(
            project_id="proj-1",
            name="Website Redesign",
            description="Complete overhaul of the corporate website.",
            start_date="2024-08-01",
            end_date="2024-12-31",
            member_ids=("user-1", "user-2"),
        ),
        Project(
            project_id="proj-2",
            name="Marketing Campaign Q3",
            description="Digital marketing campaign for the new product launch.",
            start_date="2024-07-01",
            end_date="2024-09-30",
            member_ids=("user-1", "user-2"),
        ),
    ]


def _seed_tasks() -> list[Task]:
    return [
        Task(
            task_id="task-1",
            title="Design Homepage Mockup",
            description="Create a high-fidelity mockup in Figma for the new homepage.",
            project_id="proj-1",
            assignee_id="user-2",
            due_date="2024-09-15",
            status=TaskStatus.TODO,
            department="Creative",
        ),
        Task(
            task_id="task-2",
            title="Develop User Authentication",
            description="Implement login and registration functionality.",
            project_id="proj-1",
            assignee_id="user-2",
            due_date="2024-09-30",
            status=TaskStatus.IN_PROGRESS,
            department="Web Development",
        ),
        Task(
            task_id="task-3",
            title="Create Social Media Ads",
            description="Design and write copy for Facebook and Instagram ads.",
            project_id="proj-2",
            assignee_id="user-2",
            due_date="2024-08-20",
            status=TaskStatus.DONE,
            department="Digital Marketing",
        ),
    ]


def _seed_time_logs() -> list[TimeLog]:
    return [
        TimeLog(
            log_id="log-1",
            task_id="task-3",
            user_id="user-2",
            start_time=to_epoch_ms(datetime(2024, 8, 10, 9, 0, tzinfo=timezone.utc)),
            end_time=to_epoch_ms(datetime(2024, 8, 10, 11, 30, tzinfo=timezone.utc)),
            duration=9000,  # 2.5h
            is_paused=False,
        )
    ]


def build_seed_state(hash_password: Optional[Callable[[str], str]] = None) -> StoreState:
    hash_password = hash_password or (lambda p: p)
    return StoreState(
        users=_seed_users(hash_password),
        projects=_seed_projects(),
        tasks=_seed_tasks(),
        time_logs=_seed_time_logs(),
        departments=list(SEED_DEPARTMENTS),
    )
