from __future__ import annotations

from datetime import date, datetime

import pytest

from src.timecard_system.timecard_system.core.enums import PunchKind, TimecardSlot
from src.timecard_system.timecard_system.core.exceptions import NotFoundError, ValidationError
from src.timecard_system.timecard_system.punches.model import Punch

MONDAY = date(2026, 3, 2)


def _record_day(service, employee_id="wk-1"):
    first = service.record_punch(employee_id, PunchKind.IN, at=datetime(2026, 3, 2, 8, 35, 42))
    last = service.record_punch(employee_id, "out", at=datetime(2026, 3, 2, 17, 32))
    return first, last


def test_record_punch_truncates_seconds_and_stores(container):
    service = container.attendance_service

    first, _ = _record_day(service)

    assert first.timestamp == datetime(2026, 3, 2, 8, 35)
    assert container.punches_repo.get_by_id(first.punch_id) == first


def test_record_punch_defaults_to_clock(container):
    punch = container.attendance_service.record_punch("wk-1", "IN", is_offline_sync=True)

    assert punch.timestamp == datetime(2026, 4, 1, 9, 0)
    assert punch.is_offline_sync is True


def test_record_punch_rejects_unknown_kind_and_employee(container):
    service = container.attendance_service

    with pytest.raises(ValidationError):
        service.record_punch("wk-1", "BREAK")
    with pytest.raises(NotFoundError):
        service.record_punch("nobody", "IN")


def test_daily_outcome_from_stored_punches(container):
    first, last = _record_day(container.attendance_service)

    outcome = container.attendance_service.daily_outcome("wk-1", MONDAY)

    assert outcome.standard_hours == 8.0
    assert outcome.overtime_hours == 0
    assert (outcome.first_in_id, outcome.last_out_id) == (first.punch_id, last.punch_id)


def test_correct_slot_moves_existing_punch(container):
    service = container.attendance_service
    _, last = _record_day(service)

    outcome = service.correct_slot(
        employee_id="wk-1",
        work_date=MONDAY,
        slot=TimecardSlot.LAST_OUT,
        new_time="18:45",
        punch_id=last.punch_id,
    )

    assert outcome.last_out_id == last.punch_id
    assert outcome.last_out == 18 * 60 + 45
    assert outcome.overtime_hours == 1.0
    assert outcome.standard_hours == 8.0


def test_correct_slot_with_empty_time_deletes_punch(container):
    service = container.attendance_service
    first, last = _record_day(service)

    outcome = service.correct_slot(
        employee_id="wk-1", work_date=MONDAY, slot="first_in", new_time="", punch_id=first.punch_id
    )

    assert container.punches_repo.get_by_id(first.punch_id) is None
    assert outcome.first_in is None
    assert outcome.standard_hours == 0
    assert outcome.is_anomaly is True
    assert [p.punch_id for p in outcome.punches] == [last.punch_id]


def test_correct_slot_creates_missing_punch_with_slot_kind(container):
    service = container.attendance_service
    service.record_punch("wk-1", "IN", at=datetime(2026, 3, 2, 8, 30))

    outcome = service.correct_slot(employee_id="wk-1", work_date=MONDAY, slot="last_out", new_time="17:30")

    created = container.punches_repo.get_by_id(outcome.last_out_id)
    assert created.kind == PunchKind.OUT
    assert created.timestamp == datetime(2026, 3, 2, 17, 30)
    assert outcome.standard_hours == 8.0
    assert outcome.is_anomaly is False


def test_correct_slot_validation(container):
    service = container.attendance_service
    container.punches_repo.upsert(Punch("foreign", "other", datetime(2026, 3, 2, 8, 30), PunchKind.IN))

    with pytest.raises(ValidationError):
        service.correct_slot(employee_id="wk-1", work_date=MONDAY, slot="coffee", new_time="10:00")
    with pytest.raises(ValidationError):
        service.correct_slot(employee_id="wk-1", work_date=MONDAY, slot="first_in", new_time="25:00")
    with pytest.raises(NotFoundError):
        service.correct_slot(employee_id="wk-1", work_date=MONDAY, slot="first_in", new_time="08:30", punch_id="missing")
    with pytest.raises(NotFoundError):
        service.correct_slot(employee_id="wk-1", work_date=MONDAY, slot="first_in", new_time="08:30", punch_id="foreign")


def test_delete_punch(container):
    first, _ = _record_day(container.attendance_service)

    container.attendance_service.delete_punch(first.punch_id)

    assert container.punches_repo.get_by_id(first.punch_id) is None
    with pytest.raises(NotFoundError):
        container.attendance_service.delete_punch(first.punch_id)


def test_timecard_covers_every_day_of_month(container):
    _record_day(container.attendance_service)

    days = container.attendance_service.timecard("wk-1", "2026-03")

    assert len(days) == 31
    assert days[0].work_date == date(2026, 3, 1)
    assert days[1].standard_hours == 8.0
    # Sunday is not a work day
    assert days[0].is_absent is False
    assert days[2].is_absent is True


def test_timecard_rejects_bad_month(container):
    with pytest.raises(ValidationError):
        container.attendance_service.timecard("wk-1", "March")


def test_delete_then_reinsert_forgets_the_old_value(container):
    service = container.attendance_service
    _, last = _record_day(service)

    service.correct_slot(employee_id="wk-1", work_date=MONDAY, slot="last_out", new_time="", punch_id=last.punch_id)
    outcome = service.correct_slot(employee_id="wk-1", work_date=MONDAY, slot="last_out", new_time="18:00")

    assert outcome.last_out_id != last.punch_id
    assert outcome.last_out == 18 * 60
    assert outcome.overtime_hours == 0.5
    assert len(outcome.punches) == 2
