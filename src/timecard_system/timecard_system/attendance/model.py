from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_hhmm, minutes_of_day
from ..justifications.model import Justification
from ..punches.model import Punch


@dataclass(frozen=True)
class ResolvedSlots:
    """Punches assigned to the four timecard positions of a day."""

    first_in: Optional[Punch] = None
    lunch_out: Optional[Punch] = None
    lunch_in: Optional[Punch] = None
    last_out: Optional[Punch] = None
    is_inconsistent: bool = False


def _slot_minutes(punch: Optional[Punch]) -> Optional[int]:
    if punch is None:
        return None
    at = punch.at
    return minutes_of_day(at) if at else None


@dataclass(frozen=True)
class DailyOutcome:
    """Read-model: kết quả đối soát chấm công của một nhân viên trong một ngày.

    Derived on demand from punches, schedule and justification; never stored.
    Clock times are minutes of day; the ``*_id`` fields point back to the
    punches so a correction can update them in place.
    """

    employee_id: str
    work_date: date
    standard_hours: float = 0.0
    overtime_hours: float = 0.0
    is_late: bool = False
    is_anomaly: bool = False
    is_absent: bool = False
    is_inconsistent: bool = False
    first_in: Optional[int] = None
    lunch_out: Optional[int] = None
    lunch_in: Optional[int] = None
    last_out: Optional[int] = None
    first_in_id: Optional[str] = None
    lunch_out_id: Optional[str] = None
    lunch_in_id: Optional[str] = None
    last_out_id: Optional[str] = None
    punches: tuple[Punch, ...] = ()
    justification: Optional[Justification] = None

    @classmethod
    def with_slots(cls, *, employee_id: str, work_date: date, slots: ResolvedSlots, **fields) -> "DailyOutcome":
        return cls(
            employee_id=employee_id,
            work_date=work_date,
            is_inconsistent=slots.is_inconsistent,
            first_in=_slot_minutes(slots.first_in),
            lunch_out=_slot_minutes(slots.lunch_out),
            lunch_in=_slot_minutes(slots.lunch_in),
            last_out=_slot_minutes(slots.last_out),
            first_in_id=slots.first_in.punch_id if slots.first_in else None,
            lunch_out_id=slots.lunch_out.punch_id if slots.lunch_out else None,
            lunch_in_id=slots.lunch_in.punch_id if slots.lunch_in else None,
            last_out_id=slots.last_out.punch_id if slots.last_out else None,
            **fields,
        )

    @property
    def notes(self) -> list[str]:
        out = []
        if self.is_late:
            out.append("LATE")
        if self.is_absent:
            out.append("ABSENT")
        if self.is_anomaly:
            out.append("ANOMALY")
        return out

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "standard_hours": self.standard_hours,
            "overtime_hours": self.overtime_hours,
            "is_late": self.is_late,
            "is_anomaly": self.is_anomaly,
            "is_absent": self.is_absent,
            "is_inconsistent": self.is_inconsistent,
            "first_in": format_hhmm(self.first_in),
            "lunch_out": format_hhmm(self.lunch_out),
            "lunch_in": format_hhmm(self.lunch_in),
            "last_out": format_hhmm(self.last_out),
            "first_in_id": self.first_in_id,
            "lunch_out_id": self.lunch_out_id,
            "lunch_in_id": self.lunch_in_id,
            "last_out_id": self.last_out_id,
            "punch_count": len(self.punches),
            "justification": self.justification.type.value if self.justification else None,
        }
