from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..punches.model import Punch
from .strategies.base import PunchLayoutStrategy
from .strategies.empty_strategy import EmptyDayStrategy
from .strategies.pair_strategy import PairStrategy
from .strategies.single_strategy import SinglePunchStrategy
from .strategies.split_shift_strategy import SplitShiftStrategy


@dataclass
class PunchLayoutFactory:
    """Factory Pattern: choose the layout strategy from the punch count."""

    def for_punches(self, punches: Sequence[Punch]) -> PunchLayoutStrategy:
        count = len(punches)
        if count == 0:
            return EmptyDayStrategy()
        if count == 1:
            return SinglePunchStrategy()
        if count == 2:
            return PairStrategy()
        return SplitShiftStrategy()
