from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_ledger.attendance_ledger.database.connection import DBConfig, DatabaseConnection
from src.attendance_ledger.attendance_ledger.database.schema import SCHEMA_STATEMENTS, ensure_schema


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_schema(DatabaseConnection(DBConfig.from_dict(db_config)))
    print(
        "OK: Applied schema -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(SCHEMA_STATEMENTS)})"
    )


if __name__ == "__main__":
    main()
