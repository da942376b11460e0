from __future__ import annotations

from typing import Sequence

from ...punches.model import Punch
from ..model import ResolvedSlots
from .base import PunchLayoutStrategy


class PairStrategy(PunchLayoutStrategy):
    """Two punches: first-in / last-out, no lunch break recorded."""

    def resolve(self, punches: Sequence[Punch]) -> ResolvedSlots:
        return ResolvedSlots(
            first_in=self.first_in(punches),
            last_out=punches[1],
            is_inconsistent=self.is_inconsistent(punches),
        )
