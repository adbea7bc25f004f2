from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.staff_portal.staff_portal.database.bootstrap import ensure_demo_staff
from src.staff_portal.staff_portal.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_staff(db_config)
    print(f"OK: Seeded demo staff -> {DBConfig.from_mapping(db_config).describe()}")


if __name__ == "__main__":
    main()
