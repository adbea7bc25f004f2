from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import month_bounds, now_local, today_local
from ..common.validators import require_month
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..users.service import PortalSession
from .gate import ensure_marking_allowed
from .model import AttendanceRecord
from .month_grid import MonthGrid, build_month_grid, index_by_date
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, *, history_limit: int = DEFAULT_HISTORY_LIMIT):
        self._attendance = attendance
        self._history_limit = int(history_limit)

    def mark_attendance(
        self,
        session: PortalSession,
        *,
        selected_date: date,
        status: AttendanceStatus | str,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = now or now_local()

        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid attendance status: {status}")
        if status not in AttendanceStatus.markable():
            raise ValidationError(f"Invalid attendance status: {status.value}")

        ensure_marking_allowed(selected_date, now.date())

        self._attendance.upsert(
            staff_id=session.staff_id,
            work_date=selected_date,
            status=status,
            updated_at=now,
        )
        logger.info("Staff %s marked %s for %s", session.staff_id, status.value, selected_date)
        return AttendanceRecord(staff_id=session.staff_id, work_date=selected_date, status=status, updated_at=now)

    def get_today_record(self, session: PortalSession, today: date | None = None) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_staff_and_date(session.staff_id, today or today_local())

    def get_history(self, session: PortalSession, *, limit: int | None = None) -> Sequence[AttendanceRecord]:
        limit = self._history_limit if limit is None else int(limit)
        if limit <= 0:
            raise ValidationError("limit must be positive")
        return self._attendance.get_recent_for_staff(session.staff_id, limit)

    def list_month_records(self, session: PortalSession, *, year: int, month: int) -> Sequence[AttendanceRecord]:
        year, month = require_month(year, month)
        start, end = month_bounds(year, month)
        return self._attendance.list_for_range(session.staff_id, start_date=start, end_date=end)

    def get_month_calendar(
        self,
        session: PortalSession,
        *,
        year: int | None = None,
        month: int | None = None,
        today: date | None = None,
    ) -> MonthGrid:
        today = today or today_local()
        year = today.year if year is None else year
        month = today.month if month is None else month

        records = self.list_month_records(session, year=year, month=month)
        return build_month_grid(year, month, index_by_date(records), today=today)
