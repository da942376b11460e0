from __future__ import annotations

from typing import Optional, Protocol

from .model import SnapSettings


class SettingsRepository(Protocol):
    def get_snap_settings(self) -> Optional[SnapSettings]:
        """Stored operator settings, or None when never saved."""

        raise NotImplementedError

    def save_snap_settings(self, settings: SnapSettings) -> None:
        raise NotImplementedError
