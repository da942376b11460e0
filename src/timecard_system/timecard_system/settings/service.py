from __future__ import annotations

from ..common.validators import require_positive_int
from .model import SnapSettings
from .repository import SettingsRepository


class SettingsService:
    """Snap settings: operator-saved values win over the configured defaults."""

    def __init__(self, settings: SettingsRepository, *, defaults: SnapSettings | None = None):
        self._settings = settings
        self._defaults = (defaults or SnapSettings()).normalized()

    def current(self) -> SnapSettings:
        stored = self._settings.get_snap_settings()
        return stored.normalized() if stored else self._defaults

    def update(self, *, overtime_snap_minutes=None, permesso_snap_minutes=None) -> SnapSettings:
        current = self.current()
        updated = SnapSettings(
            overtime_snap_minutes=(
                require_positive_int(overtime_snap_minutes, "overtime_snap_minutes")
                if overtime_snap_minutes is not None
                else current.overtime_snap_minutes
            ),
            permesso_snap_minutes=(
                require_positive_int(permesso_snap_minutes, "permesso_snap_minutes")
                if permesso_snap_minutes is not None
                else current.permesso_snap_minutes
            ),
        )
        self._settings.save_snap_settings(updated)
        return updated
