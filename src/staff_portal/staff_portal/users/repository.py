from __future__ import annotations

from typing import Optional, Protocol

from .model import StaffProfile, User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, never on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError


class StaffRepository(Protocol):
    def get_by_user_id(self, user_id: int) -> Optional[StaffProfile]:
        """Exactly one profile is expected per user."""

        raise NotImplementedError
