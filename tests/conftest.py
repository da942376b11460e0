from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.timecard_system.timecard_system.container import build_services
from src.timecard_system.timecard_system.employees.model import Employee
from src.timecard_system.timecard_system.justifications.model import Justification
from src.timecard_system.timecard_system.punches.model import Punch
from src.timecard_system.timecard_system.settings.model import SnapSettings

# 2026-03-01 is a Sunday; the whole month is in the past for this clock.
FIXED_NOW = datetime(2026, 4, 1, 9, 0)


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_active(self):
        return [e for e in self._by_id.values() if e.is_active]

    def list_all(self):
        return list(self._by_id.values())

    def add(self, employee: Employee) -> None:
        self._by_id[employee.employee_id] = employee


class InMemoryPunches:
    def __init__(self, punches=()):
        self._by_id: dict[str, Punch] = {p.punch_id: p for p in punches}

    def list_for_employee(self, *, employee_id: str, start: date, end: date):
        return [p for p in self.list_range(start=start, end=end) if p.employee_id == employee_id]

    def list_range(self, *, start: date, end: date):
        return [p for p in self._by_id.values() if p.work_date and start <= p.work_date <= end]

    def get_by_id(self, punch_id: str) -> Optional[Punch]:
        return self._by_id.get(punch_id)

    def upsert(self, punch: Punch) -> None:
        self._by_id[punch.punch_id] = punch

    def delete(self, punch_id: str) -> bool:
        return self._by_id.pop(punch_id, None) is not None


class InMemoryJustifications:
    def __init__(self, justifications=()):
        self._by_key: dict[tuple[str, date], Justification] = {}
        for j in justifications:
            self.upsert(j)

    def get_for_employee_and_date(self, *, employee_id: str, work_date: date) -> Optional[Justification]:
        return self._by_key.get((employee_id, work_date))

    def list_range(self, *, start: date, end: date, employee_id: Optional[str] = None):
        return [
            j
            for (emp, day), j in self._by_key.items()
            if start <= day <= end and (employee_id is None or emp == employee_id)
        ]

    def upsert(self, justification: Justification) -> None:
        self._by_key[(justification.employee_id, justification.work_date)] = justification

    def delete(self, *, employee_id: str, work_date: date) -> bool:
        return self._by_key.pop((employee_id, work_date), None) is not None


class InMemorySettings:
    def __init__(self, stored: Optional[SnapSettings] = None):
        self.stored = stored

    def get_snap_settings(self) -> Optional[SnapSettings]:
        return self.stored

    def save_snap_settings(self, settings: SnapSettings) -> None:
        self.stored = settings


@pytest.fixture
def employee() -> Employee:
    return Employee(employee_id="wk-1", full_name="Demo Workshop", department="Workshop")


@pytest.fixture
def repos(employee):
    return {
        "employees_repo": InMemoryEmployees([employee]),
        "punches_repo": InMemoryPunches(),
        "justifications_repo": InMemoryJustifications(),
        "settings_repo": InMemorySettings(),
    }


@pytest.fixture
def container(repos):
    return build_services(**repos, clock=lambda: FIXED_NOW)
