from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from ..core.enums import PunchKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_mysql_datetime
from .model import Punch
from .repository import PunchRepository

_COLUMNS = "punch_id, employee_id, punched_at, kind, is_offline_sync"


def _to_punch(r: dict) -> Punch:
    return Punch(
        punch_id=str(r["punch_id"]),
        employee_id=str(r["employee_id"]),
        timestamp=r["punched_at"],
        kind=PunchKind(r["kind"]),
        is_offline_sync=bool(r.get("is_offline_sync", False)),
    )


def _bounds(start: date, end: date) -> tuple[datetime, datetime]:
    return datetime.combine(start, time.min), datetime.combine(end + timedelta(days=1), time.min)


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, *, employee_id: str, start: date, end: date) -> Sequence[Punch]:
        lo, hi = _bounds(start, end)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punches
                WHERE employee_id=%s AND punched_at >= %s AND punched_at < %s
                ORDER BY seq ASC
                """,
                (employee_id, lo, hi),
            )
            return [_to_punch(r) for r in fetchall(cur)]

    def list_range(self, *, start: date, end: date) -> Sequence[Punch]:
        lo, hi = _bounds(start, end)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punches
                WHERE punched_at >= %s AND punched_at < %s
                ORDER BY seq ASC
                """,
                (lo, hi),
            )
            return [_to_punch(r) for r in fetchall(cur)]

    def get_by_id(self, punch_id: str) -> Optional[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM punches WHERE punch_id=%s", (punch_id,))
            r = fetchone(cur)
            return _to_punch(r) if r else None

    def upsert(self, punch: Punch) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punches(punch_id, employee_id, punched_at, kind, is_offline_sync)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    employee_id=VALUES(employee_id),
                    punched_at=VALUES(punched_at),
                    kind=VALUES(kind),
                    is_offline_sync=VALUES(is_offline_sync)
                """,
                (
                    punch.punch_id,
                    punch.employee_id,
                    to_mysql_datetime(punch.timestamp),
                    punch.kind.value,
                    1 if punch.is_offline_sync else 0,
                ),
            )

    def delete(self, punch_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM punches WHERE punch_id=%s", (punch_id,))
            return cur.rowcount > 0
