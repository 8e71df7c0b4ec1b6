from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.passwords import get_password_scheme
from .core.constants import DEFAULT_STORAGE_PATH
from .core.exceptions import ValidationError
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .departments.service import DepartmentService
from .departments.store_department_repository import StoreDepartmentRepository
from .projects.service import ProjectService
from .projects.store_project_repository import StoreProjectRepository
from .reports.service import ReportService
from .storage.file_storage import JsonFileStorage
from .storage.memory_storage import MemoryStorage
from .storage.mysql_storage import MySQLStorage
from .storage.repository import Storage
from .storage.snapshot import SessionPointer, SnapshotPersistence
from .store.seed import build_seed_state
from .store.store import DataStore
from .tasks.service import TaskService
from .tasks.store_task_repository import StoreTaskRepository
from .timelogs.service import TimerService
from .timelogs.store_time_log_repository import StoreTimeLogRepository
from .users.service import AuthService, UserService
from .users.store_user_repository import StoreUserRepository


@dataclass(frozen=True)
class Container:
    storage: Storage
    store: DataStore

    users_repo: StoreUserRepository
    projects_repo: StoreProjectRepository
    tasks_repo: StoreTaskRepository
    time_logs_repo: StoreTimeLogRepository
    departments_repo: StoreDepartmentRepository

    auth_service: AuthService
    user_service: UserService
    project_service: ProjectService
    task_service: TaskService
    timer_service: TimerService
    department_service: DepartmentService
    report_service: ReportService


def build_storage(
    backend: str,
    *,
    storage_path: Optional[str] = None,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
) -> Storage:
    key = (backend or "file").strip().lower()
    if key == "memory":
        return MemoryStorage()
    if key == "file":
        return JsonFileStorage(storage_path or DEFAULT_STORAGE_PATH)
    if key == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        if auto_init_db:
            apply_schema(conn)
        return MySQLStorage(conn)
    raise ValidationError(f"Unknown storage backend: {backend!r}")


def build_container(*, storage: Storage, password_scheme: str = "plain") -> Container:
    passwords = get_password_scheme(password_scheme)

    store = DataStore(
        SnapshotPersistence(storage),
        seed_factory=lambda: build_seed_state(passwords.hash),
    )

    users_repo = StoreUserRepository(store)
    projects_repo = StoreProjectRepository(store)
    tasks_repo = StoreTaskRepository(store)
    time_logs_repo = StoreTimeLogRepository(store)
    departments_repo = StoreDepartmentRepository(store)

    auth_service = AuthService(users_repo, SessionPointer(storage), passwords=passwords)
    user_service = UserService(
        users_repo,
        tasks_repo,
        time_logs_repo,
        transaction=store.transaction,
        passwords=passwords,
    )
    project_service = ProjectService(projects_repo)
    task_service = TaskService(tasks_repo, time_logs_repo, transaction=store.transaction)
    timer_service = TimerService(time_logs_repo, transaction=store.transaction)
    department_service = DepartmentService(departments_repo)
    report_service = ReportService(time_logs_repo, tasks_repo, projects_repo, users_repo)

    return Container(
        storage=storage,
        store=store,
        users_repo=users_repo,
        projects_repo=projects_repo,
        tasks_repo=tasks_repo,
        time_logs_repo=time_logs_repo,
        departments_repo=departments_repo,
        auth_service=auth_service,
        user_service=user_service,
        project_service=project_service,
        task_service=task_service,
        timer_service=timer_service,
        department_service=department_service,
        report_service=report_service,
    )
