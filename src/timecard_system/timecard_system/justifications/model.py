from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import JustificationType, WHOLE_DAY_TYPES


def justification_id(employee_id: str, work_date: date) -> str:
    """Composite key: one justification per employee and day."""
    return f"{employee_id}-{work_date.isoformat()}"


@dataclass(frozen=True)
class Justification:
    """Giải trình theo ngày (nghỉ phép, ốm, ...) do phòng nhân sự nhập."""

    employee_id: str
    work_date: date
    type: JustificationType
    hours_offset: float = 0.0
    notes: Optional[str] = None

    @property
    def justification_id(self) -> str:
        return justification_id(self.employee_id, self.work_date)

    @property
    def is_whole_day(self) -> bool:
        return self.type in WHOLE_DAY_TYPES
