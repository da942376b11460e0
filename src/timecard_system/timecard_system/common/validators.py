from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_hhmm, parse_iso_date, parse_year_month


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_iso_date(value: str, field_name: str = "date") -> date:
    try:
        return parse_iso_date(require_non_empty(value, field_name))
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def require_year_month(value: str, field_name: str = "month") -> str:
    try:
        year, month = parse_year_month(require_non_empty(value, field_name))
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM")
    return f"{year:04d}-{month:02d}"


def optional_hhmm(value: Optional[str], field_name: str = "time") -> Optional[str]:
    """Blank means "no time"; anything else must be HH:MM."""
    v = (value or "").strip()
    if not v:
        return None
    minutes = parse_hhmm(v)
    if minutes is None:
        raise ValidationError(f"{field_name} must be HH:MM")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number
