from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import coerce_datetime
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_mysql_datetime(value: Any) -> Optional[datetime]:
    """Punch timestamps may be stored by producers as ISO strings."""

    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    parsed = coerce_datetime(str(value))
    if parsed is None:
        raise ValueError(f"Invalid timestamp: {value!r}")
    return parsed


def split_work_days(value: Any) -> Optional[tuple[int, ...]]:
    """``"1,2,3,4,5"`` -> (1, 2, 3, 4, 5); NULL stays None (use defaults)."""

    if value is None:
        return None
    parts = [p.strip() for p in str(value).split(",") if p.strip()]
    return tuple(int(p) for p in parts if p.isdigit())

