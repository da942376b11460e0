"""Daily reconciliation: raw punches of one employee-day -> payroll figures.

Everything here is a pure function of its arguments. ``today`` is passed in by
the caller so "past day" checks do not read the clock.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import minutes_of_day, now_local, round2, snap_down, snap_up, weekday_number
from ..core.constants import LATENESS_SNAP_MINUTES, WEEKEND_DAYS
from ..justifications.model import Justification
from ..punches.model import Punch
from ..schedules.model import ScheduleConfig
from ..settings.model import SnapSettings
from .factory import PunchLayoutFactory
from .model import DailyOutcome

logger = logging.getLogger(__name__)

_factory = PunchLayoutFactory()


def punches_for_day(punches: Iterable[Punch], *, employee_id: str, work_date: date) -> list[Punch]:
    """Punches of the employee on ``work_date`` sorted by time.

    The sort is stable, so equal timestamps keep their input order. Punches
    whose timestamp cannot be parsed are skipped.
    """
    day: list[Punch] = []
    for p in punches:
        if p.employee_id != employee_id:
            continue
        at = p.at
        if at is None:
            logger.warning(
                "ignoring punch with unreadable timestamp",
                extra={"punch_id": p.punch_id, "employee_id": p.employee_id},
            )
            continue
        if at.date() == work_date:
            day.append(p)
    return sorted(day, key=lambda p: p.at)


def effective_start(actual: int, scheduled: int, tolerance: int) -> int:
    """Arrival within tolerance counts from the schedule; later arrivals snap up to the next quarter hour."""
    if actual <= scheduled + tolerance:
        return scheduled
    return scheduled + snap_up(actual - scheduled, LATENESS_SNAP_MINUTES)


def effective_end(actual: int, scheduled: int, snap: int) -> int:
    """Early departures are charged in whole ``snap`` units."""
    if actual >= scheduled:
        return scheduled
    return scheduled - snap_up(scheduled - actual, snap)


def overtime_minutes(last_out: Optional[int], scheduled_end: int, snap: int) -> int:
    """Excess after the scheduled end, floored to whole ``snap`` units."""
    if last_out is None or last_out <= scheduled_end:
        return 0
    return snap_down(last_out - scheduled_end, snap)


def _mins(punch: Optional[Punch]) -> Optional[int]:
    return minutes_of_day(punch.at) if punch is not None else None


def reconcile(
    *,
    employee_id: str,
    work_date: date,
    punches: Iterable[Punch],
    schedule: Optional[ScheduleConfig],
    justification: Optional[Justification] = None,
    snaps: Optional[SnapSettings] = None,
    today: Optional[date] = None,
) -> DailyOutcome:
    if schedule is None:
        return DailyOutcome(employee_id=employee_id, work_date=work_date, justification=justification)

    snaps = (snaps or SnapSettings()).normalized()
    today = today or now_local().date()
    if justification is not None and (
        justification.employee_id != employee_id or justification.work_date != work_date
    ):
        justification = None

    day = punches_for_day(punches, employee_id=employee_id, work_date=work_date)
    slots = _factory.for_punches(day).resolve(day)

    first_in = _mins(slots.first_in)
    lunch_out = _mins(slots.lunch_out)
    lunch_in = _mins(slots.lunch_in)
    last_out = _mins(slots.last_out)

    worked = 0

    if first_in is not None:
        start = effective_start(first_in, schedule.morning_start, schedule.tolerance_minutes)
        if lunch_out is not None:
            morning_exit = lunch_out
        elif lunch_in is None:
            morning_exit = last_out
        else:
            morning_exit = None
        if morning_exit is not None:
            end = effective_end(morning_exit, schedule.morning_end, snaps.permesso_snap_minutes)
            if end > start:
                worked += end - start

    afternoon_start: Optional[int] = None
    if lunch_in is not None:
        afternoon_start = effective_start(lunch_in, schedule.afternoon_start, schedule.tolerance_minutes)
    elif (
        first_in is not None
        and last_out is not None
        and last_out > schedule.afternoon_start
        and lunch_out is None
    ):
        # no lunch break recorded: the afternoon runs from the later of arrival and afternoon start
        afternoon_start = effective_start(
            max(first_in, schedule.afternoon_start), schedule.afternoon_start, schedule.tolerance_minutes
        )

    if afternoon_start is not None and last_out is not None:
        end = effective_end(last_out, schedule.afternoon_end, snaps.permesso_snap_minutes)
        if end > afternoon_start:
            worked += end - afternoon_start

    overtime = overtime_minutes(last_out, schedule.afternoon_end, snaps.overtime_snap_minutes)

    is_past = work_date < today
    weekday = weekday_number(work_date)
    count = len(day)

    return DailyOutcome.with_slots(
        employee_id=employee_id,
        work_date=work_date,
        slots=slots,
        standard_hours=round2(worked / 60),
        overtime_hours=overtime / 60,
        is_late=first_in is not None and first_in > schedule.morning_start + schedule.tolerance_minutes,
        is_anomaly=is_past and count > 0 and count % 2 != 0 and weekday not in WEEKEND_DAYS,
        is_absent=is_past and schedule.is_work_day(weekday) and count == 0 and justification is None,
        punches=tuple(day),
        justification=justification,
    )
