from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_recent_for_staff(self, staff_id: int, limit: int) -> Sequence[AttendanceRecord]:
        """Newest first."""

        raise NotImplementedError

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_range(self, staff_id: int, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Both bounds inclusive."""

        raise NotImplementedError

    def upsert(
        self,
        *,
        staff_id: int,
        work_date: date,
        status: AttendanceStatus,
        updated_at: datetime,
    ) -> None:
        """Insert or overwrite the record keyed by (staff_id, work_date)."""

        raise NotImplementedError
