from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the attendance table."""

    PRESENT = "present"
    HALF_DAY = "half_day"
    ABSENT = "absent"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> "AttendanceStatus":
        """Map a raw stored value to a member; unrecognised values become UNKNOWN."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def markable(cls) -> tuple["AttendanceStatus", ...]:
        return (cls.PRESENT, cls.HALF_DAY, cls.ABSENT)
