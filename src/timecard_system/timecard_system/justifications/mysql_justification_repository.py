from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import JustificationType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Justification
from .repository import JustificationRepository

_COLUMNS = "employee_id, work_date, type, hours_offset, notes"


def _to_justification(r: dict) -> Justification:
    return Justification(
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        type=JustificationType(r["type"]),
        hours_offset=float(r.get("hours_offset") or 0),
        notes=r.get("notes"),
    )


class MySQLJustificationRepository(JustificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, *, employee_id: str, work_date: date) -> Optional[Justification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM justifications WHERE employee_id=%s AND work_date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_justification(r) if r else None

    def list_range(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[Justification]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM justifications WHERE {where} ORDER BY work_date ASC",
                tuple(params),
            )
            return [_to_justification(r) for r in fetchall(cur)]

    def upsert(self, justification: Justification) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO justifications(employee_id, work_date, type, hours_offset, notes)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE type=VALUES(type), hours_offset=VALUES(hours_offset), notes=VALUES(notes)
                """,
                (
                    justification.employee_id,
                    justification.work_date,
                    justification.type.value,
                    justification.hours_offset,
                    justification.notes,
                ),
            )

    def delete(self, *, employee_id: str, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM justifications WHERE employee_id=%s AND work_date=%s", (employee_id, work_date))
            return cur.rowcount > 0
