from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, NotFoundError
from .model import StaffProfile, User
from .repository import StaffRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortalSession:
    """Explicit per-request identity handed to the attendance/salary use cases."""

    user_id: int
    email: str
    staff: StaffProfile

    @property
    def staff_id(self) -> int:
        return self.staff.staff_id

    def to_dict(self) -> dict:
        return {"user_id": self.user_id, "email": self.email, "staff": self.staff.to_dict()}


class AuthService:
    """Use case: sign in and resolve the signed-in staff member."""

    def __init__(self, users: UserRepository, staff: StaffRepository):
        self._users = users
        self._staff = staff

    def authenticate(self, email: str, password: str) -> User:
        email = require_non_empty(email, "Email").lower()

        user = self._users.get_by_email(email)
        if not user or not user.is_active:
            logger.info("Sign-in rejected for %s: unknown or inactive account", email)
            raise AuthenticationError("Invalid login credentials")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except (TypeError, ValueError):
            # placeholder or corrupted hashes
            ok = False

        if not ok:
            logger.info("Sign-in rejected for %s: wrong password", email)
            raise AuthenticationError("Invalid login credentials")

        logger.info("User %s signed in", user.user_id)
        return user

    def resolve_session(self, user_id: int) -> PortalSession:
        user = self._users.get_by_id(int(user_id))
        if not user or not user.is_active:
            raise AuthenticationError("Session is no longer valid")

        staff = self._staff.get_by_user_id(user.user_id)
        if not staff:
            raise NotFoundError("No staff profile is linked to this account")

        return PortalSession(user_id=user.user_id, email=user.email, staff=staff)
