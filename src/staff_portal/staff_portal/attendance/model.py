from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one staff member's attendance for one calendar day."""

    staff_id: int
    work_date: date
    status: AttendanceStatus
    updated_at: Optional[datetime] = None
    attendance_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "updated_at": self.updated_at.isoformat(timespec="seconds") if self.updated_at else None,
        }
