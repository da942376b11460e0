from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import DailyOutcome


class PermissionHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for permission-hours).

    Returns the hours one day adds to the month's permission-hours.
    """

    @abstractmethod
    def day_hours(self, outcome: DailyOutcome, *, contractual_hours: float, is_work_day: bool) -> float:
        raise NotImplementedError

    @staticmethod
    def is_eligible(outcome: DailyOutcome, *, is_work_day: bool) -> bool:
        """Work day not covered by a whole-day justification."""
        if not is_work_day:
            return False
        return outcome.justification is None or not outcome.justification.is_whole_day
