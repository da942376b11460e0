from __future__ import annotations

from typing import Sequence

from ...punches.model import Punch
from ..model import ResolvedSlots
from .base import PunchLayoutStrategy


class EmptyDayStrategy(PunchLayoutStrategy):
    """No punches: nothing to resolve."""

    def resolve(self, punches: Sequence[Punch]) -> ResolvedSlots:
        return ResolvedSlots()
