from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import days_in_month, first_weekday_offset
from ..common.validators import require_month
from ..core.constants import WEEKDAY_HEADERS
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord

_MARKERS = {
    AttendanceStatus.PRESENT: "✓",
    AttendanceStatus.HALF_DAY: "H",
    AttendanceStatus.ABSENT: "X",
}


@dataclass(frozen=True)
class DayCell:
    day: int
    work_date: date
    status: Optional[AttendanceStatus]
    is_today: bool

    @property
    def marker(self) -> str:
        if self.status is None:
            return ""
        return _MARKERS.get(self.status, "X")

    @property
    def tone(self) -> str:
        if self.status in _MARKERS:
            return self.status.value
        return "empty"

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "date": self.work_date.isoformat(),
            "status": self.status.value if self.status else None,
            "is_today": self.is_today,
            "marker": self.marker,
            "tone": self.tone,
        }


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    headers: tuple[str, ...]
    cells: Sequence[Optional[DayCell]]

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "headers": list(self.headers),
            "cells": [c.to_dict() if c else None for c in self.cells],
        }


def index_by_date(records: Iterable[AttendanceRecord]) -> dict[date, AttendanceRecord]:
    return {r.work_date: r for r in records}


def build_month_grid(
    year: int,
    month: int,
    attendance_by_date: Mapping[date, AttendanceRecord],
    *,
    today: date,
) -> MonthGrid:
    """Sunday-first calendar: blank placeholders, then one cell per day."""
    year, month = require_month(year, month)

    cells: list[Optional[DayCell]] = [None] * first_weekday_offset(year, month)
    for day in range(1, days_in_month(year, month) + 1):
        d = date(year, month, day)
        record = attendance_by_date.get(d)
        cells.append(
            DayCell(
                day=day,
                work_date=d,
                status=record.status if record else None,
                is_today=d == today,
            )
        )

    return MonthGrid(year=year, month=month, headers=WEEKDAY_HEADERS, cells=cells)
