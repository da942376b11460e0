from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...core.enums import PunchKind
from ...punches.model import Punch
from ..model import ResolvedSlots

EXPECTED_KINDS = (PunchKind.IN, PunchKind.OUT, PunchKind.IN, PunchKind.OUT)


class PunchLayoutStrategy(ABC):
    """Strategy Pattern: map a day's sorted punches onto timecard positions.

    Positions are assigned by count and order. Only the first punch is checked
    for its kind; mismatches elsewhere are reported via ``is_inconsistent``.
    """

    @abstractmethod
    def resolve(self, punches: Sequence[Punch]) -> ResolvedSlots:
        raise NotImplementedError

    @staticmethod
    def first_in(punches: Sequence[Punch]) -> Optional[Punch]:
        if punches and punches[0].kind == PunchKind.IN:
            return punches[0]
        return None

    @staticmethod
    def is_inconsistent(punches: Sequence[Punch]) -> bool:
        return any(p.kind != expected for p, expected in zip(punches, EXPECTED_KINDS))
