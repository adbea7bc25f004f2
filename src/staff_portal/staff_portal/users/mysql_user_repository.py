from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get_one("user_id=%s", (int(user_id),))

    def get_by_email(self, email: str) -> Optional[User]:
        return self._get_one("email=%s", (email,))

    def _get_one(self, where: str, params: tuple) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT user_id, email, password_hash, is_active
                FROM users
                WHERE {where}
                """,
                params,
            )
            row = fetchone(cur)
            if not row:
                return None
            return User(
                user_id=int(row["user_id"]),
                email=row["email"],
                password_hash=row["password_hash"],
                is_active=bool(row.get("is_active", True)),
            )
