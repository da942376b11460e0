from __future__ import annotations

from typing import Sequence

from ...punches.model import Punch
from ..model import ResolvedSlots
from .base import PunchLayoutStrategy


class SplitShiftStrategy(PunchLayoutStrategy):
    """Three or more punches: first-in, lunch-out, lunch-in, last-out.

    Punches after the fourth are ignored.
    """

    def resolve(self, punches: Sequence[Punch]) -> ResolvedSlots:
        return ResolvedSlots(
            first_in=self.first_in(punches),
            lunch_out=punches[1],
            lunch_in=punches[2],
            last_out=punches[3] if len(punches) > 3 else None,
            is_inconsistent=self.is_inconsistent(punches),
        )
