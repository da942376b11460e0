from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_OVERTIME_SNAP_MINUTES, DEFAULT_PERMESSO_SNAP_MINUTES


def _positive_or_default(value, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


@dataclass(frozen=True)
class SnapSettings:
    """Global rounding units in minutes (operator-configurable, never per employee)."""

    overtime_snap_minutes: int = DEFAULT_OVERTIME_SNAP_MINUTES
    permesso_snap_minutes: int = DEFAULT_PERMESSO_SNAP_MINUTES

    @classmethod
    def from_raw(cls, *, overtime_snap_minutes=None, permesso_snap_minutes=None) -> "SnapSettings":
        return cls(
            overtime_snap_minutes=_positive_or_default(overtime_snap_minutes, DEFAULT_OVERTIME_SNAP_MINUTES),
            permesso_snap_minutes=_positive_or_default(permesso_snap_minutes, DEFAULT_PERMESSO_SNAP_MINUTES),
        )

    def to_dict(self) -> dict:
        return {
            "overtime_snap_minutes": self.overtime_snap_minutes,
            "permesso_snap_minutes": self.permesso_snap_minutes,
        }

    def normalized(self) -> "SnapSettings":
        """Same settings with non-positive units replaced by the defaults."""
        return SnapSettings.from_raw(
            overtime_snap_minutes=self.overtime_snap_minutes,
            permesso_snap_minutes=self.permesso_snap_minutes,
        )
