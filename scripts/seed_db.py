"""Reset the configured storage to the seed snapshot and log everyone out."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.time_tracker.time_tracker.container import build_container, build_storage


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(
        settings.STORAGE_BACKEND,
        storage_path=getattr(settings, "STORAGE_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
    container = build_container(storage=storage, password_scheme=getattr(settings, "PASSWORD_SCHEME", "plain"))

    container.store.reset_to_seed()
    container.auth_service.logout()

    if not container.store.last_save_ok:
        raise SystemExit("Seed data could not be written, see the log above.")
    print(f"OK: Seeded storage ({settings.STORAGE_BACKEND})")


if __name__ == "__main__":
    main()
