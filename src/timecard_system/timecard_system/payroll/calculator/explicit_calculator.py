from __future__ import annotations

from ...attendance.model import DailyOutcome
from ...core.enums import JustificationType
from .base import PermissionHoursCalculator


class ExplicitPermissionCalculator(PermissionHoursCalculator):
    """Only days justified as PERMESSO accrue permission-hours.

    Unexplained short days are left to the anomaly/late reports instead.
    """

    def day_hours(self, outcome: DailyOutcome, *, contractual_hours: float, is_work_day: bool) -> float:
        if not self.is_eligible(outcome, is_work_day=is_work_day):
            return 0.0
        if outcome.justification is not None and outcome.justification.type == JustificationType.PERMESSO:
            return max(0.0, contractual_hours - outcome.standard_hours)
        return 0.0
