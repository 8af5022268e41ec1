from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"날짜 형식이 올바르지 않습니다: {value!r} (YYYY-MM-DD)") from None


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except (TypeError, ValueError):
        raise ValidationError(f"월 형식이 올바르지 않습니다: {value!r} (YYYY-MM)") from None
    return parsed.year, parsed.month


def month_key(day: date) -> str:
    return day.strftime("%Y-%m")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def is_weekend(day: date) -> bool:
    # Saturday=5, Sunday=6
    return day.weekday() >= 5
