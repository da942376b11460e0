from __future__ import annotations

from typing import Sequence

from ...punches.model import Punch
from ..model import ResolvedSlots
from .base import PunchLayoutStrategy


class SinglePunchStrategy(PunchLayoutStrategy):
    """One punch: an open first-in (only when it is an IN)."""

    def resolve(self, punches: Sequence[Punch]) -> ResolvedSlots:
        return ResolvedSlots(
            first_in=self.first_in(punches),
            is_inconsistent=self.is_inconsistent(punches),
        )
