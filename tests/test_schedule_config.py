from __future__ import annotations

from datetime import time

from src.timecard_system.timecard_system.employees.model import Employee
from src.timecard_system.timecard_system.schedules.model import ScheduleConfig


def test_default_schedule():
    schedule = ScheduleConfig.default()

    assert (schedule.morning_start, schedule.morning_end) == (510, 750)
    assert (schedule.afternoon_start, schedule.afternoon_end) == (810, 1050)
    assert schedule.tolerance_minutes == 10
    assert schedule.work_days == frozenset({1, 2, 3, 4, 5})
    assert schedule.contractual_hours == 8.0


def test_from_raw_falls_back_field_by_field():
    schedule = ScheduleConfig.from_raw(
        morning_start="09:00",
        morning_end="",
        afternoon_start=time(14, 0),
        afternoon_end="bad",
        tolerance_minutes="5",
        work_days="1,2,3,4,5,6",
    )

    assert schedule.morning_start == 540
    assert schedule.morning_end == 750
    assert schedule.afternoon_start == 840
    assert schedule.afternoon_end == 1050
    assert schedule.tolerance_minutes == 5
    assert schedule.is_work_day(6)
    assert not schedule.is_work_day(0)


def test_zero_tolerance_is_kept_negative_is_not():
    assert ScheduleConfig.from_raw(tolerance_minutes=0).tolerance_minutes == 0
    assert ScheduleConfig.from_raw(tolerance_minutes=-3).tolerance_minutes == 10


def test_inverted_schedule_has_no_negative_contract():
    schedule = ScheduleConfig(morning_start=750, morning_end=510, afternoon_start=1050, afternoon_end=810)

    assert schedule.contractual_minutes == 0


def test_employee_schedule_uses_stored_fields():
    employee = Employee(
        employee_id="e1",
        full_name="Part Timer",
        schedule_start_morning="08:00",
        schedule_end_morning="12:00",
        schedule_start_afternoon="12:00",
        schedule_end_afternoon="12:00",
        work_days=(1, 3, 5),
    )

    schedule = employee.schedule

    assert schedule.contractual_hours == 4.0
    assert schedule.is_work_day(3) and not schedule.is_work_day(2)
