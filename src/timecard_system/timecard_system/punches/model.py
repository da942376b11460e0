from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import coerce_datetime
from ..core.enums import PunchKind


@dataclass(frozen=True)
class Punch:
    """Thực thể miền (domain): một lần chấm công vào/ra.

    ``timestamp`` is whatever the producer stored: a datetime or an ISO string.
    """

    punch_id: str
    employee_id: str
    timestamp: Union[datetime, str]
    kind: PunchKind
    is_offline_sync: bool = False

    @property
    def at(self) -> Optional[datetime]:
        return coerce_datetime(self.timestamp)

    @property
    def work_date(self) -> Optional[date]:
        at = self.at
        return at.date() if at else None
