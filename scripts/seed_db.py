from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_attendance.hr_attendance.database.bootstrap import apply_seed_sql
from src.hr_attendance.hr_attendance.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_mapping(dict(settings.DB_CONFIG))

    apply_seed_sql(DatabaseConnection(config), seed_path=REPO_ROOT / "database" / "seed.sql")
    print(f"OK: Seeded demo employees -> {config.user}@{config.host}:{config.port}/{config.database}")


if __name__ == "__main__":
    main()
