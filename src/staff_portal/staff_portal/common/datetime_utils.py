from __future__ import annotations

import calendar
from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month (both inclusive)."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def first_weekday_offset(year: int, month: int) -> int:
    """Blank cells before the 1st in a Sunday-first week."""
    return (date(year, month, 1).weekday() + 1) % 7
