"""Load the demo employees and snap settings, then list who is active."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timecard_system.timecard_system.database.bootstrap import apply_seed_sql
from src.timecard_system.timecard_system.database.connection import DBConfig, DatabaseConnection
from src.timecard_system.timecard_system.employees.mysql_employee_repository import MySQLEmployeeRepository
from src.timecard_system.timecard_system.logging_utils import setup_logging


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    employees = MySQLEmployeeRepository(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    for employee in employees.list_active():
        print(f"{employee.employee_id:<10} {employee.full_name:<24} {employee.department or '-'}")


if __name__ == "__main__":
    main()
