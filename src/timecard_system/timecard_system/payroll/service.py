from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable

from ..attendance.model import DailyOutcome
from ..common.datetime_utils import days_of_month, format_hhmm, now_local, parse_year_month
from ..common.validators import require_year_month
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..justifications.repository import JustificationRepository
from ..punches.repository import PunchRepository
from ..settings.service import SettingsService
from .aggregator import aggregate
from .calculator.base import PermissionHoursCalculator
from .calculator.standard_calculator import StandardPermissionCalculator
from .model import MonthlySummary


@dataclass(frozen=True)
class ReportData:
    summaries: list[MonthlySummary]
    rows: list[dict]


def _hours(value: float) -> str:
    return f"{value:.2f}"


class PayrollReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        punches: PunchRepository,
        justifications: JustificationRepository,
        settings: SettingsService,
        *,
        calculator: PermissionHoursCalculator | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._employees = employees
        self._punches = punches
        self._justifications = justifications
        self._settings = settings
        self._calculator = calculator or StandardPermissionCalculator()
        self._clock = clock

    def _month_bounds(self, year_month: str):
        year, month = parse_year_month(require_year_month(year_month))
        days = list(days_of_month(year, month))
        return f"{year:04d}-{month:02d}", days[0], days[-1]

    def _summarize(self, employee: Employee, year_month: str, punches, justifications) -> MonthlySummary:
        return aggregate(
            employee_id=employee.employee_id,
            year_month=year_month,
            punches=punches,
            justifications=justifications,
            schedule=employee.schedule,
            snaps=self._settings.current(),
            today=self._clock().date(),
            calculator=self._calculator,
        )

    def monthly_summary(self, employee_id: str, year_month: str) -> MonthlySummary:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        year_month, start, end = self._month_bounds(year_month)
        punches = self._punches.list_for_employee(employee_id=employee_id, start=start, end=end)
        justifications = self._justifications.list_range(start=start, end=end, employee_id=employee_id)
        return self._summarize(employee, year_month, punches, justifications)

    def monthly_summaries(self, year_month: str) -> list[MonthlySummary]:
        """Summaries for every employee on record, recomputed from the stored history.

        Deactivated employees are included.
        """

        year_month, start, end = self._month_bounds(year_month)
        # one snapshot of the month for all employees
        punches = list(self._punches.list_range(start=start, end=end))
        justifications = list(self._justifications.list_range(start=start, end=end))
        return [
            self._summarize(employee, year_month, punches, justifications)
            for employee in self._employees.list_all()
        ]

    def build_payroll_report(self, year_month: str) -> ReportData:
        summaries = self.monthly_summaries(year_month)
        employees = {e.employee_id: e for e in self._employees.list_all()}
        rows = [self.summary_row(s, employees.get(s.employee_id)) for s in summaries]
        return ReportData(summaries=summaries, rows=rows)

    @staticmethod
    def summary_row(summary: MonthlySummary, employee: Employee | None = None) -> dict:
        """Payroll export row."""

        return {
            "employee_id": summary.employee_id,
            "full_name": employee.full_name if employee else "-",
            "department": (employee.department if employee else None) or "-",
            "days_worked": summary.days_worked,
            "ordinary_hours": _hours(summary.total_worked),
            "overtime_hours": _hours(summary.total_overtime),
            "ferie_days": summary.ferie_count,
            "malattia_days": summary.malattia_count,
            "festivo_days": summary.festivo_count,
            "congedo_days": summary.congedo_count,
            "permesso_hours": summary.permesso_hours,
            "unexcused_absences": summary.absence_count,
            "late_count": summary.late_count,
        }

    @staticmethod
    def timecard_row(outcome: DailyOutcome) -> dict:
        """Per-day timecard row; blank cells instead of zeros."""

        return {
            "date": outcome.work_date.strftime("%Y-%m-%d"),
            "first_in": format_hhmm(outcome.first_in) or "",
            "lunch_out": format_hhmm(outcome.lunch_out) or "",
            "lunch_in": format_hhmm(outcome.lunch_in) or "",
            "last_out": format_hhmm(outcome.last_out) or "",
            "ordinary_hours": _hours(outcome.standard_hours) if outcome.standard_hours > 0 else "",
            "overtime_hours": _hours(outcome.overtime_hours) if outcome.overtime_hours > 0 else "",
            "justification": outcome.justification.type.value if outcome.justification else "",
            "notes": ", ".join(outcome.notes),
        }

    @classmethod
    def timecard_rows(cls, outcomes: Iterable[DailyOutcome]) -> list[dict]:
        return [cls.timecard_row(day) for day in outcomes]
