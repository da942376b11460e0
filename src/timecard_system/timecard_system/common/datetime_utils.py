from __future__ import annotations

import calendar
import math
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, Optional, Union


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    parsed = datetime.strptime(value, "%Y-%m")
    return parsed.year, parsed.month


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def coerce_datetime(value: Union[datetime, str, None]) -> Optional[datetime]:
    """Accept a datetime or an ISO string (``YYYY-MM-DDTHH:MM[:SS]``).

    A trailing ``Z`` (UTC, as browsers write ``toISOString()``) is accepted.

    Returns None for anything that cannot be read as a local timestamp.
    Aware values are converted to naive local time so they sort together.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_hhmm(value: Union[str, time, None]) -> Optional[int]:
    """``"08:30"`` -> 510 minutes of day. None when malformed."""
    if value is None:
        return None
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    parts = str(value).strip().split(":")
    if len(parts) < 2:
        return None
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        return None
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return None
    return hours * 60 + minutes


def minutes_of_day(value: datetime) -> int:
    return value.hour * 60 + value.minute


def format_hhmm(minutes: Optional[int]) -> Optional[str]:
    if minutes is None:
        return None
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def snap_up(minutes: int, unit: int) -> int:
    """Round a positive duration up to the next multiple of ``unit``."""
    return int(math.ceil(minutes / unit) * unit)


def snap_down(minutes: int, unit: int) -> int:
    """Round a positive duration down to a whole multiple of ``unit``."""
    return int(math.floor(minutes / unit) * unit)


def round2(value: float) -> float:
    """Half-up rounding to 2 decimals (payroll figures)."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def weekday_number(day: date) -> int:
    """0=Sunday ... 6=Saturday."""
    return day.isoweekday() % 7


def days_of_month(year: int, month: int) -> Iterator[date]:
    _, last_day = calendar.monthrange(year, month)
    for d in range(1, last_day + 1):
        yield date(year, month, d)
