from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, staff_id, date, status, updated_at"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        staff_id=int(r["staff_id"]),
        work_date=r["date"],
        status=AttendanceStatus.parse(r["status"]),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_recent_for_staff(self, staff_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE staff_id=%s
                ORDER BY date DESC
                LIMIT %s
                """,
                (int(staff_id), int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE staff_id=%s AND date=%s
                """,
                (int(staff_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_range(self, staff_id: int, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE staff_id=%s AND date BETWEEN %s AND %s
                ORDER BY date ASC
                """,
                (int(staff_id), start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def upsert(
        self,
        *,
        staff_id: int,
        work_date: date,
        status: AttendanceStatus,
        updated_at: datetime,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(staff_id, date, status, updated_at)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), updated_at=VALUES(updated_at)
                """,
                (int(staff_id), work_date, status.value, updated_at),
            )
