from __future__ import annotations

from datetime import date, datetime

import pytest

from src.timecard_system.timecard_system.core.enums import JustificationType, PunchKind
from src.timecard_system.timecard_system.justifications.model import Justification
from src.timecard_system.timecard_system.payroll.aggregator import aggregate
from src.timecard_system.timecard_system.payroll.calculator.explicit_calculator import ExplicitPermissionCalculator
from src.timecard_system.timecard_system.punches.model import Punch
from src.timecard_system.timecard_system.schedules.model import ScheduleConfig

TODAY = date(2026, 4, 1)
# March 2026 has 22 weekdays (Mon-Fri).
WORKDAYS_IN_MARCH = 22


def day_punches(day: int, *times: str, employee_id: str = "e1"):
    out = []
    for i, hhmm in enumerate(times):
        h, m = (int(p) for p in hhmm.split(":"))
        kind = PunchKind.IN if i % 2 == 0 else PunchKind.OUT
        out.append(Punch(f"{employee_id}-{day}-{i}", employee_id, datetime(2026, 3, day, h, m), kind))
    return out


def summarize(punches=(), justifications=(), **kwargs):
    kwargs.setdefault("today", TODAY)
    kwargs.setdefault("schedule", ScheduleConfig.default())
    return aggregate(
        employee_id="e1",
        year_month="2026-03",
        punches=punches,
        justifications=justifications,
        **kwargs,
    )


def test_empty_month_counts_every_past_workday_absent():
    summary = summarize()

    assert summary.absence_count == WORKDAYS_IN_MARCH
    assert summary.total_worked == 0
    assert summary.days_worked == 0
    assert summary.permesso_hours == 0
    assert len(summary.days) == 31


def test_absence_stops_at_today():
    summary = summarize(today=date(2026, 3, 10))

    # Mar 2-6 and Mar 9
    assert summary.absence_count == 6


def test_malattia_replaces_absence():
    summary = summarize(justifications=[Justification("e1", date(2026, 3, 4), JustificationType.MALATTIA)])

    assert summary.absence_count == WORKDAYS_IN_MARCH - 1
    assert summary.malattia_count == 1


def test_malattia_without_punches_accrues_no_permission_hours():
    summary = summarize(justifications=[Justification("e1", date(2026, 3, 2), JustificationType.MALATTIA)])

    assert summary.days[1].is_absent is False
    assert summary.permesso_hours == 0


def test_ingiustificato_counts_once():
    summary = summarize(justifications=[Justification("e1", date(2026, 3, 4), JustificationType.INGIUSTIFICATO)])

    assert summary.absence_count == WORKDAYS_IN_MARCH


def test_day_counters_per_category():
    justifications = [
        Justification("e1", date(2026, 3, 2), JustificationType.FERIE),
        Justification("e1", date(2026, 3, 3), JustificationType.FERIE),
        Justification("e1", date(2026, 3, 4), JustificationType.FESTIVO),
        Justification("e1", date(2026, 3, 5), JustificationType.CONGEDO),
        Justification("e2", date(2026, 3, 6), JustificationType.MALATTIA),
    ]

    summary = summarize(justifications=justifications)

    assert (summary.ferie_count, summary.festivo_count, summary.congedo_count) == (2, 1, 1)
    assert summary.malattia_count == 0
    assert summary.absence_count == WORKDAYS_IN_MARCH - 4


def test_totals_and_days_worked():
    punches = day_punches(2, "08:30", "18:45") + day_punches(3, "08:30", "18:00") + day_punches(4, "09:10", "17:30")

    summary = summarize(punches=punches)

    assert summary.total_overtime == 1.5
    assert summary.days_worked == 3
    assert summary.late_count == 1
    # 8 + 8 + (09:15-12:30 and 13:30-17:30)
    assert summary.total_worked == 23.25
    assert summary.absence_count == WORKDAYS_IN_MARCH - 3


def test_short_days_accumulate_permission_hours():
    punches = []
    for day in (2, 3, 4):
        punches += day_punches(day, "08:30", "12:30", "13:30", "17:20")

    summary = summarize(punches=punches)

    assert summary.total_worked == 23.25
    assert summary.permesso_hours == 0.75


def test_permesso_day_with_partial_work():
    summary = summarize(
        punches=day_punches(2, "08:30", "12:30"),
        justifications=[Justification("e1", date(2026, 3, 2), JustificationType.PERMESSO, hours_offset=4)],
    )

    assert summary.permesso_hours == 4.0
    assert summary.total_worked == 4.0


def test_permesso_day_without_punches_counts_full_day():
    summary = summarize(justifications=[Justification("e1", date(2026, 3, 3), JustificationType.PERMESSO)])

    assert summary.permesso_hours == 8.0
    assert summary.absence_count == WORKDAYS_IN_MARCH - 1


def test_implicit_shortfall_depends_on_calculator():
    punches = day_punches(2, "08:30", "12:30")

    assert summarize(punches=punches).permesso_hours == 4.0
    assert summarize(punches=punches, calculator=ExplicitPermissionCalculator()).permesso_hours == 0


def test_no_permission_hours_on_weekend_or_whole_day_justification():
    saturday = summarize(punches=day_punches(7, "08:30", "12:30"))
    ferie = summarize(
        punches=day_punches(2, "08:30", "12:30"),
        justifications=[Justification("e1", date(2026, 3, 2), JustificationType.FERIE)],
    )

    assert saturday.permesso_hours == 0
    assert saturday.total_worked == 4.0
    assert ferie.permesso_hours == 0
    assert ferie.ferie_count == 1


def test_ignores_other_months_and_employees():
    punches = [
        Punch("feb", "e1", datetime(2026, 2, 27, 8, 30), PunchKind.IN),
        Punch("feb2", "e1", datetime(2026, 2, 27, 17, 30), PunchKind.OUT),
    ] + day_punches(2, "08:30", "17:30", employee_id="e2")

    summary = summarize(punches=punches)

    assert summary.total_worked == 0
    assert summary.absence_count == WORKDAYS_IN_MARCH


def test_unreadable_punches_are_skipped():
    punches = [Punch("bad", "e1", "yesterday", PunchKind.IN)] + day_punches(2, "08:30", "17:30")

    summary = summarize(punches=punches)

    assert summary.total_worked == 8.0


def test_missing_schedule_gives_zero_totals():
    summary = summarize(punches=day_punches(2, "08:30", "17:30"), schedule=None)

    assert summary.total_worked == 0
    assert summary.absence_count == 0


@pytest.mark.parametrize("bad", ["2026-13", "march", ""])
def test_invalid_month_gives_empty_summary(bad):
    summary = aggregate(employee_id="e1", year_month=bad, punches=[], justifications=[], schedule=ScheduleConfig.default())

    assert summary.days == ()
    assert summary.absence_count == 0
    assert summary.total_worked == 0
