from __future__ import annotations

from ...attendance.model import DailyOutcome
from ...core.enums import JustificationType
from .base import PermissionHoursCalculator


class StandardPermissionCalculator(PermissionHoursCalculator):
    """Standard rule.

    - PERMESSO day: contractual hours minus worked hours, not below 0.
    - Any other eligible day worked for less than the contractual hours: the
      shortfall counts as permission even without a justification.
    """

    def day_hours(self, outcome: DailyOutcome, *, contractual_hours: float, is_work_day: bool) -> float:
        if not self.is_eligible(outcome, is_work_day=is_work_day):
            return 0.0

        worked = outcome.standard_hours
        if outcome.justification is not None and outcome.justification.type == JustificationType.PERMESSO:
            return max(0.0, contractual_hours - worked)
        if 0 < worked < contractual_hours:
            return contractual_hours - worked
        return 0.0
