"""Block until MySQL accepts connections (used before starting the API in containers)."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.staff_attendance.staff_attendance.database.bootstrap import wait_for_database
from src.staff_attendance.staff_attendance.main import configure_logging


def main() -> int:
    load_dotenv(override=False)
    configure_logging()
    settings = importlib.import_module(get_settings_module())
    return 0 if wait_for_database(dict(settings.DB_CONFIG)) else 1


if __name__ == "__main__":
    sys.exit(main())
