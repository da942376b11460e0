from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.datetime_utils import parse_hhmm
from ..core.constants import (
    DEFAULT_AFTERNOON_END,
    DEFAULT_AFTERNOON_START,
    DEFAULT_MORNING_END,
    DEFAULT_MORNING_START,
    DEFAULT_TOLERANCE_MINUTES,
    DEFAULT_WORK_DAYS,
)


def _minutes_or_default(value, default: str) -> int:
    minutes = parse_hhmm(value)
    if minutes is None:
        return parse_hhmm(default)
    return minutes


def _tolerance_or_default(value) -> int:
    if value is None or isinstance(value, bool):
        return DEFAULT_TOLERANCE_MINUTES
    try:
        tolerance = int(value)
    except (TypeError, ValueError):
        return DEFAULT_TOLERANCE_MINUTES
    return tolerance if tolerance >= 0 else DEFAULT_TOLERANCE_MINUTES


def _work_days_or_default(value) -> frozenset[int]:
    if value is None:
        return frozenset(DEFAULT_WORK_DAYS)
    if isinstance(value, str):
        value = [p for p in value.split(",") if p.strip()]
    days: set[int] = set()
    try:
        for item in value:
            day = int(item)
            if 0 <= day <= 6:
                days.add(day)
    except (TypeError, ValueError):
        return frozenset(DEFAULT_WORK_DAYS)
    return frozenset(days)


@dataclass(frozen=True)
class ScheduleConfig:
    """Lịch làm việc chuẩn của một nhân viên, tính bằng phút trong ngày.

    Boundaries are minutes of day; ``work_days`` uses 0=Sunday ... 6=Saturday.
    """

    morning_start: int
    morning_end: int
    afternoon_start: int
    afternoon_end: int
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES
    work_days: frozenset[int] = frozenset(DEFAULT_WORK_DAYS)

    @classmethod
    def default(cls) -> "ScheduleConfig":
        return cls.from_raw()

    @classmethod
    def from_raw(
        cls,
        *,
        morning_start: Optional[str] = None,
        morning_end: Optional[str] = None,
        afternoon_start: Optional[str] = None,
        afternoon_end: Optional[str] = None,
        tolerance_minutes=None,
        work_days: Optional[Iterable[int]] = None,
    ) -> "ScheduleConfig":
        """Build a config from stored fields, falling back to defaults field by field."""

        return cls(
            morning_start=_minutes_or_default(morning_start, DEFAULT_MORNING_START),
            morning_end=_minutes_or_default(morning_end, DEFAULT_MORNING_END),
            afternoon_start=_minutes_or_default(afternoon_start, DEFAULT_AFTERNOON_START),
            afternoon_end=_minutes_or_default(afternoon_end, DEFAULT_AFTERNOON_END),
            tolerance_minutes=_tolerance_or_default(tolerance_minutes),
            work_days=_work_days_or_default(work_days),
        )

    def is_work_day(self, weekday: int) -> bool:
        return weekday in self.work_days

    @property
    def contractual_minutes(self) -> int:
        morning = self.morning_end - self.morning_start
        afternoon = self.afternoon_end - self.afternoon_start
        return max(0, morning + afternoon)

    @property
    def contractual_hours(self) -> float:
        return self.contractual_minutes / 60
