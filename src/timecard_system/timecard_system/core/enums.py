from __future__ import annotations

from enum import Enum


class PunchKind(str, Enum):
    """Loại chấm công: vào (IN) hoặc ra (OUT)."""

    IN = "IN"
    OUT = "OUT"


class JustificationType(str, Enum):
    """Day-level classification entered manually by the HR office."""

    STANDARD = "STANDARD"
    FERIE = "FERIE"
    MALATTIA = "MALATTIA"
    PERMESSO = "PERMESSO"
    FESTIVO = "FESTIVO"
    CONGEDO = "CONGEDO"
    INGIUSTIFICATO = "INGIUSTIFICATO"
    RITARDO_GIUSTIFICATO = "RITARDO_GIUSTIFICATO"


# Categories that cover the whole working day.
WHOLE_DAY_TYPES = frozenset(
    {
        JustificationType.FERIE,
        JustificationType.MALATTIA,
        JustificationType.FESTIVO,
        JustificationType.INGIUSTIFICATO,
        JustificationType.CONGEDO,
    }
)


class TimecardSlot(str, Enum):
    """Positions of a reconciled day shown on the timecard."""

    FIRST_IN = "first_in"
    LUNCH_OUT = "lunch_out"
    LUNCH_IN = "lunch_in"
    LAST_OUT = "last_out"

    @property
    def kind(self) -> PunchKind:
        if self in (TimecardSlot.FIRST_IN, TimecardSlot.LUNCH_IN):
            return PunchKind.IN
        return PunchKind.OUT
