from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AdvanceRecord
from .repository import AdvanceRepository


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_range(self, staff_id: int, *, start_date: date, end_date: date) -> Sequence[AdvanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT advance_id, staff_id, advance_date, amount, reason
                FROM salary_advances
                WHERE staff_id=%s AND advance_date BETWEEN %s AND %s
                ORDER BY advance_date ASC, advance_id ASC
                """,
                (int(staff_id), start_date, end_date),
            )
            rows = fetchall(cur)

        return [
            AdvanceRecord(
                advance_id=int(r["advance_id"]),
                staff_id=int(r["staff_id"]),
                advance_date=r["advance_date"],
                amount=Decimal(str(r["amount"])),
                reason=r.get("reason"),
            )
            for r in rows
        ]
