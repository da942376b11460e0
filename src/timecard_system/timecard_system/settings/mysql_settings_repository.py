from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SnapSettings
from .repository import SettingsRepository

_SNAP_KEYS = ("overtime_snap_minutes", "permesso_snap_minutes")


class MySQLSettingsRepository(SettingsRepository):
    """Key/value rows in ``app_settings``."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_snap_settings(self) -> Optional[SnapSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT setting_key, setting_value FROM app_settings WHERE setting_key IN (%s, %s)",
                _SNAP_KEYS,
            )
            values = {r["setting_key"]: r["setting_value"] for r in fetchall(cur)}
        if not values:
            return None
        return SnapSettings.from_raw(**{key: values.get(key) for key in _SNAP_KEYS})

    def save_snap_settings(self, settings: SnapSettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            for key, value in settings.to_dict().items():
                cur.execute(
                    """
                    INSERT INTO app_settings(setting_key, setting_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE setting_value=VALUES(setting_value)
                    """,
                    (key, str(value)),
                )
