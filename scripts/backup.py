"""Backup storage.

Note: Dumps every storage key (collections and session user) into one JSON
file under ``backups/``, whatever the configured backend is.
"""

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

from src.school_attendance.school_attendance.container import build_store
from src.school_attendance.school_attendance.core.constants import STORAGE_KEYS


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        settings.STORAGE_BACKEND,
        storage_path=getattr(settings, "STORAGE_PATH", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"storage_{ts}.json"

    snapshot = {key: store.get(key) for key in STORAGE_KEYS}
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
