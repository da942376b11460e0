from __future__ import annotations

from datetime import date

from ..core.enums import JustificationType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Justification
from .repository import JustificationRepository


class JustificationService:
    def __init__(self, justifications: JustificationRepository, employees: EmployeeRepository):
        self._justifications = justifications
        self._employees = employees

    @staticmethod
    def _parse_type(value) -> JustificationType:
        if isinstance(value, JustificationType):
            return value
        try:
            return JustificationType(str(value or "").strip().upper())
        except ValueError:
            allowed = ", ".join(t.value for t in JustificationType)
            raise ValidationError(f"Unknown justification type (allowed: {allowed})")

    def _require_employee(self, employee_id: str) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

    def set_for_day(
        self,
        *,
        employee_id: str,
        work_date: date,
        type,
        hours_offset=0,
        notes: str | None = None,
    ) -> Justification:
        """Create or replace the justification of (employee, day)."""

        self._require_employee(employee_id)
        try:
            hours = float(hours_offset or 0)
        except (TypeError, ValueError):
            raise ValidationError("hours_offset must be a number")
        if hours < 0:
            raise ValidationError("hours_offset must not be negative")

        justification = Justification(
            employee_id=employee_id,
            work_date=work_date,
            type=self._parse_type(type),
            hours_offset=hours,
            notes=(notes or "").strip() or None,
        )
        self._justifications.upsert(justification)
        return justification

    def clear_for_day(self, *, employee_id: str, work_date: date) -> Justification:
        """Reset the day to STANDARD.

        The record is kept as a manual override marker, so the day is no longer
        reported as an absence.
        """

        return self.set_for_day(employee_id=employee_id, work_date=work_date, type=JustificationType.STANDARD)

    def get_for_day(self, *, employee_id: str, work_date: date) -> Justification | None:
        return self._justifications.get_for_employee_and_date(employee_id=employee_id, work_date=work_date)
