from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container, build_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = settings.STORAGE_BACKEND

    store = build_store(
        backend,
        storage_path=getattr(settings, "STORAGE_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    container = build_container(store=store)
    container.initialize_storage()

    print(
        f"OK: Seeded {backend} storage -> "
        f"users={len(container.users_repo.list_all())} "
        f"teachers={len(container.teachers_repo.list_all())} "
        f"classes={len(container.classes_repo.list_all())}"
    )


if __name__ == "__main__":
    main()
