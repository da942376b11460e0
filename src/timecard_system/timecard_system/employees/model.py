from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import DEFAULT_WORK_DAYS
from ..schedules.model import ScheduleConfig


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên và lịch làm việc đã khai báo.

    Schedule fields are kept as stored (``HH:MM`` strings, possibly blank);
    ``schedule`` resolves them with defaults.
    """

    employee_id: str
    full_name: str
    department: Optional[str] = None
    tolerance_minutes: Optional[int] = None
    schedule_start_morning: Optional[str] = None
    schedule_end_morning: Optional[str] = None
    schedule_start_afternoon: Optional[str] = None
    schedule_end_afternoon: Optional[str] = None
    work_days: tuple[int, ...] = field(default=DEFAULT_WORK_DAYS)
    is_active: bool = True

    @property
    def schedule(self) -> ScheduleConfig:
        return ScheduleConfig.from_raw(
            morning_start=self.schedule_start_morning,
            morning_end=self.schedule_end_morning,
            afternoon_start=self.schedule_start_afternoon,
            afternoon_end=self.schedule_end_afternoon,
            tolerance_minutes=self.tolerance_minutes,
            work_days=self.work_days,
        )
