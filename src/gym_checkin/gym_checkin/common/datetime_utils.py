from __future__ import annotations

import calendar
from datetime import date, datetime, time


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_window(day: date) -> tuple[datetime, datetime]:
    """Inclusive local-day window used for the same-day check.

    The upper bound is 23:59:59 with no fractional part, so a timestamp
    inside the final second (e.g. 23:59:59.5) falls outside the window.
    """
    return datetime.combine(day, time(0, 0, 0)), datetime.combine(day, time(23, 59, 59))


def add_months(day: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month's end."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def days_until(target: date, today: date) -> int:
    return (target - today).days
