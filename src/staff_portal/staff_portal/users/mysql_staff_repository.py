from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..core.exceptions import DataAccessError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import StaffProfile
from .repository import StaffRepository


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_user_id(self, user_id: int) -> Optional[StaffProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, user_id, full_name, designation, monthly_salary
                FROM staff
                WHERE user_id=%s
                LIMIT 2
                """,
                (int(user_id),),
            )
            rows = fetchall(cur)

        if not rows:
            return None
        if len(rows) > 1:
            raise DataAccessError(f"Multiple staff profiles found for user {user_id}")

        r = rows[0]
        return StaffProfile(
            staff_id=int(r["staff_id"]),
            user_id=int(r["user_id"]),
            full_name=r["full_name"],
            designation=r.get("designation"),
            monthly_salary=Decimal(str(r.get("monthly_salary") or 0)),
        )
