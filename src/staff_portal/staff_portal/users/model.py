from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: a login identity.

    Plain data object, no DB access code here.
    """

    user_id: int
    email: str
    password_hash: str
    is_active: bool = True


@dataclass(frozen=True)
class StaffProfile:
    """Domain entity: the employee behind a login."""

    staff_id: int
    user_id: int
    full_name: str
    designation: Optional[str]
    monthly_salary: Decimal

    def to_dict(self) -> dict:
        return {
            "staff_id": self.staff_id,
            "full_name": self.full_name,
            "designation": self.designation or "",
            "monthly_salary": str(self.monthly_salary),
        }
