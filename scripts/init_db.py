from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.staff_attendance.staff_attendance.database.bootstrap import apply_schema, list_tables
from src.staff_attendance.staff_attendance.database.connection import DBConfig
from src.staff_attendance.staff_attendance.main import configure_logging


def main() -> None:
    load_dotenv(override=False)
    configure_logging()
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(db_config, schema_path=schema_path)
    tables = list_tables(db_config)
    logging.getLogger(__name__).info(
        "Applied schema.sql -> %s (tables=%s)", DBConfig.from_mapping(db_config).describe(), len(tables)
    )


if __name__ == "__main__":
    main()
