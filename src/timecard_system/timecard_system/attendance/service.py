from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timedelta
from typing import Callable

from ..common.datetime_utils import days_of_month, now_local, parse_year_month
from ..common.validators import optional_hhmm, require_year_month
from ..core.enums import PunchKind, TimecardSlot
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..justifications.repository import JustificationRepository
from ..punches.model import Punch
from ..punches.repository import PunchRepository
from ..settings.service import SettingsService
from .model import DailyOutcome
from .reconciler import reconcile

logger = logging.getLogger(__name__)


def new_punch_id() -> str:
    return uuid.uuid4().hex


class AttendanceService:
    def __init__(
        self,
        punches: PunchRepository,
        justifications: JustificationRepository,
        employees: EmployeeRepository,
        settings: SettingsService,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._punches = punches
        self._justifications = justifications
        self._employees = employees
        self._settings = settings
        self._clock = clock

    def _require_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def daily_outcome(self, employee_id: str, work_date: date) -> DailyOutcome:
        employee = self._require_employee(employee_id)
        punches = self._punches.list_for_employee(employee_id=employee_id, start=work_date, end=work_date)
        justification = self._justifications.get_for_employee_and_date(employee_id=employee_id, work_date=work_date)
        return reconcile(
            employee_id=employee_id,
            work_date=work_date,
            punches=punches,
            schedule=employee.schedule,
            justification=justification,
            snaps=self._settings.current(),
            today=self._clock().date(),
        )

    def timecard(self, employee_id: str, year_month: str) -> list[DailyOutcome]:
        """One outcome per calendar day of the month (timecard view)."""

        employee = self._require_employee(employee_id)
        year, month = parse_year_month(require_year_month(year_month))
        days = list(days_of_month(year, month))
        start, end = days[0], days[-1]

        punches = self._punches.list_for_employee(employee_id=employee_id, start=start, end=end)
        justifications = {
            j.work_date: j
            for j in self._justifications.list_range(start=start, end=end, employee_id=employee_id)
        }
        snaps = self._settings.current()
        today = self._clock().date()
        schedule = employee.schedule

        return [
            reconcile(
                employee_id=employee_id,
                work_date=day,
                punches=punches,
                schedule=schedule,
                justification=justifications.get(day),
                snaps=snaps,
                today=today,
            )
            for day in days
        ]

    def record_punch(
        self,
        employee_id: str,
        kind: PunchKind | str,
        *,
        at: datetime | None = None,
        is_offline_sync: bool = False,
    ) -> Punch:
        """Store a new punch coming from a kiosk (or any other producer)."""

        self._require_employee(employee_id)
        try:
            kind = PunchKind(str(getattr(kind, "value", kind)).upper())
        except ValueError:
            raise ValidationError("kind must be IN or OUT")

        at = (at or self._clock()).replace(second=0, microsecond=0)
        punch = Punch(
            punch_id=new_punch_id(),
            employee_id=employee_id,
            timestamp=at,
            kind=kind,
            is_offline_sync=is_offline_sync,
        )
        self._punches.upsert(punch)
        return punch

    def correct_slot(
        self,
        *,
        employee_id: str,
        work_date: date,
        slot: TimecardSlot | str,
        new_time: str | None,
        punch_id: str | None = None,
    ) -> DailyOutcome:
        """Edit one timecard position and return the recomputed day.

        An empty time deletes the punch behind the slot. Otherwise the punch
        identified by ``punch_id`` is rewritten (or a new one is created) at
        ``{work_date} {new_time}`` with the kind the slot implies.
        """

        self._require_employee(employee_id)
        try:
            slot = TimecardSlot(getattr(slot, "value", slot))
        except ValueError:
            raise ValidationError("Unknown timecard slot")
        hhmm = optional_hhmm(new_time, "time")

        existing: Punch | None = None
        if punch_id:
            existing = self._punches.get_by_id(punch_id)
            if not existing or existing.employee_id != employee_id:
                raise NotFoundError("Punch not found")

        if hhmm is None:
            if existing:
                self._punches.delete(existing.punch_id)
                logger.info("punch deleted", extra={"punch_id": existing.punch_id, "employee_id": employee_id})
        else:
            hours, minutes = (int(p) for p in hhmm.split(":"))
            at = datetime.combine(work_date, datetime.min.time()) + timedelta(hours=hours, minutes=minutes)
            punch = Punch(
                punch_id=existing.punch_id if existing else new_punch_id(),
                employee_id=employee_id,
                timestamp=at,
                kind=slot.kind,
            )
            self._punches.upsert(punch)
            logger.info(
                "punch corrected",
                extra={"punch_id": punch.punch_id, "employee_id": employee_id, "slot": slot.value},
            )

        return self.daily_outcome(employee_id, work_date)

    def delete_punch(self, punch_id: str) -> None:
        if not self._punches.delete(punch_id):
            raise NotFoundError("Punch not found")
