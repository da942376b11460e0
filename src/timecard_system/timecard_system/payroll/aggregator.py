"""Monthly aggregation: fold the daily reconciler over a calendar month."""
from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from ..attendance.reconciler import reconcile
from ..common.datetime_utils import days_of_month, now_local, parse_year_month, round2, weekday_number
from ..core.enums import JustificationType
from ..justifications.model import Justification
from ..punches.model import Punch
from ..schedules.model import ScheduleConfig
from ..settings.model import SnapSettings
from .calculator.base import PermissionHoursCalculator
from .calculator.standard_calculator import StandardPermissionCalculator
from .model import MonthlySummary

logger = logging.getLogger(__name__)

_DAY_COUNTERS = {
    JustificationType.FERIE: "ferie_count",
    JustificationType.MALATTIA: "malattia_count",
    JustificationType.FESTIVO: "festivo_count",
    JustificationType.CONGEDO: "congedo_count",
}


def _punches_by_day(punches: Iterable[Punch], employee_id: str) -> dict[date, list[Punch]]:
    by_day: dict[date, list[Punch]] = defaultdict(list)
    for p in punches:
        if p.employee_id != employee_id:
            continue
        day = p.work_date
        if day is None:
            logger.warning(
                "ignoring punch with unreadable timestamp",
                extra={"punch_id": p.punch_id, "employee_id": employee_id},
            )
            continue
        by_day[day].append(p)
    return by_day


def _justifications_by_day(justifications: Iterable[Justification], employee_id: str) -> dict[date, Justification]:
    return {j.work_date: j for j in justifications if j.employee_id == employee_id}


def aggregate(
    *,
    employee_id: str,
    year_month: str,
    punches: Iterable[Punch],
    justifications: Iterable[Justification],
    schedule: Optional[ScheduleConfig],
    snaps: Optional[SnapSettings] = None,
    today: Optional[date] = None,
    calculator: Optional[PermissionHoursCalculator] = None,
) -> MonthlySummary:
    """Build the payroll summary of one employee for ``year_month`` (YYYY-MM).

    Totals are rounded to 2 decimals once, after the whole month is summed.
    """
    try:
        year, month = parse_year_month(year_month)
    except (TypeError, ValueError):
        logger.warning("unreadable month, returning empty summary", extra={"month": year_month})
        return MonthlySummary(employee_id=employee_id, year_month=str(year_month))
    today = today or now_local().date()
    calculator = calculator or StandardPermissionCalculator()
    contractual_hours = schedule.contractual_hours if schedule else 0.0

    punches_by_day = _punches_by_day(punches, employee_id)
    justification_by_day = _justifications_by_day(justifications, employee_id)

    counters = {name: 0 for name in _DAY_COUNTERS.values()}
    total_worked = 0.0
    total_overtime = 0.0
    permesso_hours = 0.0
    days_worked = 0
    late_count = 0
    absence_count = 0
    days = []

    for day in days_of_month(year, month):
        outcome = reconcile(
            employee_id=employee_id,
            work_date=day,
            punches=punches_by_day.get(day, ()),
            schedule=schedule,
            justification=justification_by_day.get(day),
            snaps=snaps,
            today=today,
        )
        days.append(outcome)
        kind = outcome.justification.type if outcome.justification else None

        total_worked += outcome.standard_hours
        total_overtime += outcome.overtime_hours
        if outcome.standard_hours > 0:
            days_worked += 1
        if outcome.is_late:
            late_count += 1
        if outcome.is_absent or kind == JustificationType.INGIUSTIFICATO:
            absence_count += 1
        if kind in _DAY_COUNTERS:
            counters[_DAY_COUNTERS[kind]] += 1

        is_work_day = schedule.is_work_day(weekday_number(day)) if schedule else False
        permesso_hours += calculator.day_hours(outcome, contractual_hours=contractual_hours, is_work_day=is_work_day)

    summary = MonthlySummary(
        employee_id=employee_id,
        year_month=f"{year:04d}-{month:02d}",
        total_worked=round2(total_worked),
        total_overtime=round2(total_overtime),
        days_worked=days_worked,
        late_count=late_count,
        absence_count=absence_count,
        permesso_hours=round2(permesso_hours),
        days=tuple(days),
        **counters,
    )
    logger.debug("monthly summary computed", extra={"employee_id": employee_id, "month": summary.year_month})
    return summary
