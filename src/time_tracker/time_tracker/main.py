from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container, build_storage
from .common.web import register_error_handlers
from .departments.controller import register as register_departments
from .projects.controller import register as register_projects
from .reports.controller import register as register_reports
from .tasks.controller import register as register_tasks
from .timelogs.controller import register as register_timelogs
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        backend = getattr(settings, "STORAGE_BACKEND", "file")
        storage = build_storage(
            backend,
            storage_path=getattr(settings, "STORAGE_PATH", None),
            db_config=getattr(settings, "DB_CONFIG", None),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
        )
        container = build_container(
            storage=storage,
            password_scheme=getattr(settings, "PASSWORD_SCHEME", "plain"),
        )
        logger.info("settings=%s storage=%s", settings_module, backend)

    app.extensions["time_tracker"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_projects(app, container)
    register_tasks(app, container)
    register_departments(app, container)
    register_timelogs(app, container)
    register_reports(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
