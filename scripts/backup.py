"""Write the current snapshot to backups/ as pretty-printed JSON."""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
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
    )
    container = build_container(storage=storage, password_scheme=getattr(settings, "PASSWORD_SCHEME", "plain"))

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"time_tracker_{ts}.json"
    out_file.write_text(json.dumps(container.store.snapshot(), indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
