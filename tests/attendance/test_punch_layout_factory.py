from __future__ import annotations

from datetime import datetime

from src.timecard_system.timecard_system.attendance.factory import PunchLayoutFactory
from src.timecard_system.timecard_system.attendance.strategies.empty_strategy import EmptyDayStrategy
from src.timecard_system.timecard_system.attendance.strategies.pair_strategy import PairStrategy
from src.timecard_system.timecard_system.attendance.strategies.single_strategy import SinglePunchStrategy
from src.timecard_system.timecard_system.attendance.strategies.split_shift_strategy import SplitShiftStrategy
from src.timecard_system.timecard_system.core.enums import PunchKind
from src.timecard_system.timecard_system.punches.model import Punch


def _punches(*kinds):
    return [
        Punch(f"p{i}", "e1", datetime(2026, 3, 2, 8 + i, 0), PunchKind(kind))
        for i, kind in enumerate(kinds)
    ]


def test_factory_picks_strategy_by_count():
    factory = PunchLayoutFactory()

    assert isinstance(factory.for_punches([]), EmptyDayStrategy)
    assert isinstance(factory.for_punches(_punches("IN")), SinglePunchStrategy)
    assert isinstance(factory.for_punches(_punches("IN", "OUT")), PairStrategy)
    assert isinstance(factory.for_punches(_punches("IN", "OUT", "IN")), SplitShiftStrategy)
    assert isinstance(factory.for_punches(_punches("IN", "OUT", "IN", "OUT", "IN", "OUT")), SplitShiftStrategy)


def test_empty_day_has_no_slots():
    slots = EmptyDayStrategy().resolve([])

    assert slots.first_in is None and slots.last_out is None
    assert slots.is_inconsistent is False


def test_single_out_punch_is_not_a_first_in():
    slots = SinglePunchStrategy().resolve(_punches("OUT"))

    assert slots.first_in is None
    assert slots.is_inconsistent is True


def test_split_shift_maps_positions_in_order():
    punches = _punches("IN", "OUT", "IN", "OUT")

    slots = SplitShiftStrategy().resolve(punches)

    assert [slots.first_in, slots.lunch_out, slots.lunch_in, slots.last_out] == punches
    assert slots.is_inconsistent is False


def test_split_shift_flags_kind_mismatch_without_moving_slots():
    punches = _punches("IN", "IN", "OUT", "OUT")

    slots = SplitShiftStrategy().resolve(punches)

    assert slots.lunch_out is punches[1]
    assert slots.lunch_in is punches[2]
    assert slots.is_inconsistent is True
