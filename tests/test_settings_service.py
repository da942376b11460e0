from __future__ import annotations

from datetime import date, datetime

import pytest

from src.timecard_system.timecard_system.core.exceptions import ValidationError
from src.timecard_system.timecard_system.settings.model import SnapSettings
from src.timecard_system.timecard_system.settings.service import SettingsService


@pytest.fixture
def settings_repo(repos):
    return repos["settings_repo"]


def test_defaults_until_something_is_stored(settings_repo):
    service = SettingsService(settings_repo, defaults=SnapSettings(overtime_snap_minutes=60))

    assert service.current() == SnapSettings(overtime_snap_minutes=60, permesso_snap_minutes=15)


def test_stored_values_win_over_defaults(settings_repo):
    settings_repo.stored = SnapSettings(overtime_snap_minutes=15, permesso_snap_minutes=30)
    service = SettingsService(settings_repo, defaults=SnapSettings(overtime_snap_minutes=60))

    assert service.current().overtime_snap_minutes == 15


def test_stored_zero_falls_back_to_default_unit(settings_repo):
    settings_repo.stored = SnapSettings(overtime_snap_minutes=0)

    assert SettingsService(settings_repo).current().overtime_snap_minutes == 30


def test_update_is_partial_and_persisted(settings_repo):
    service = SettingsService(settings_repo)

    updated = service.update(permesso_snap_minutes="30")

    assert updated == SnapSettings(overtime_snap_minutes=30, permesso_snap_minutes=30)
    assert settings_repo.stored == updated


@pytest.mark.parametrize("value", [0, -15, "abc"])
def test_update_rejects_non_positive_units(settings_repo, value):
    with pytest.raises(ValidationError):
        SettingsService(settings_repo).update(overtime_snap_minutes=value)
    assert settings_repo.stored is None


def test_from_raw_ignores_junk():
    assert SnapSettings.from_raw(overtime_snap_minutes="x", permesso_snap_minutes=True) == SnapSettings()


def test_settings_change_recomputes_overtime(container):
    service = container.attendance_service
    service.record_punch("wk-1", "IN", at=datetime(2026, 3, 2, 8, 30))
    service.record_punch("wk-1", "OUT", at=datetime(2026, 3, 2, 18, 45))

    assert service.daily_outcome("wk-1", date(2026, 3, 2)).overtime_hours == 1.0
    container.settings_service.update(overtime_snap_minutes=15)
    assert service.daily_outcome("wk-1", date(2026, 3, 2)).overtime_hours == 1.25
