from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DEFAULT_WORK_DAYS
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, split_work_days
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, full_name, department, tolerance_minutes,
    schedule_start_morning, schedule_end_morning,
    schedule_start_afternoon, schedule_end_afternoon,
    work_days, is_active
"""


def _to_employee(r: dict) -> Employee:
    work_days = split_work_days(r.get("work_days"))
    return Employee(
        employee_id=str(r["employee_id"]),
        full_name=r["full_name"],
        department=r.get("department"),
        tolerance_minutes=r.get("tolerance_minutes"),
        schedule_start_morning=r.get("schedule_start_morning"),
        schedule_end_morning=r.get("schedule_end_morning"),
        schedule_start_afternoon=r.get("schedule_start_afternoon"),
        schedule_end_afternoon=r.get("schedule_end_afternoon"),
        work_days=DEFAULT_WORK_DAYS if work_days is None else work_days,
        is_active=bool(r.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE is_active=1 ORDER BY full_name ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY full_name ASC")
            return [_to_employee(r) for r in fetchall(cur)]
