from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.staff_portal.staff_portal.advances.model import AdvanceRecord
from src.staff_portal.staff_portal.attendance.model import AttendanceRecord
from src.staff_portal.staff_portal.container import wire_services
from src.staff_portal.staff_portal.core.enums import AttendanceStatus
from src.staff_portal.staff_portal.users.model import StaffProfile, User
from src.staff_portal.staff_portal.users.service import AuthService, PortalSession


@dataclass
class InMemoryUsers:
    users_by_id: dict[int, User] = field(default_factory=dict)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users_by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        for u in self.users_by_id.values():
            if u.email == email:
                return u
        return None


@dataclass
class InMemoryStaff:
    staff_by_user: dict[int, StaffProfile] = field(default_factory=dict)

    def get_by_user_id(self, user_id: int) -> Optional[StaffProfile]:
        return self.staff_by_user.get(user_id)


class InMemoryAttendance:
    def __init__(self, records=()):
        self._by_staff_date: dict[tuple[int, date], AttendanceRecord] = {}
        self.writes = 0
        for r in records:
            self._by_staff_date[(r.staff_id, r.work_date)] = r

    def add(self, record: AttendanceRecord) -> None:
        self._by_staff_date[(record.staff_id, record.work_date)] = record

    def all(self) -> list[AttendanceRecord]:
        return list(self._by_staff_date.values())

    def get_recent_for_staff(self, staff_id: int, limit: int):
        items = [r for r in self._by_staff_date.values() if r.staff_id == staff_id]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items[:limit]

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_staff_date.get((staff_id, work_date))

    def list_for_range(self, staff_id: int, *, start_date: date, end_date: date):
        items = [
            r for r in self._by_staff_date.values()
            if r.staff_id == staff_id and start_date <= r.work_date <= end_date
        ]
        return sorted(items, key=lambda r: r.work_date)

    def upsert(self, *, staff_id: int, work_date: date, status: AttendanceStatus, updated_at: datetime) -> None:
        self.writes += 1
        self._by_staff_date[(staff_id, work_date)] = AttendanceRecord(
            staff_id=staff_id,
            work_date=work_date,
            status=status,
            updated_at=updated_at,
            attendance_id=self.writes,
        )


class InMemoryAdvances:
    def __init__(self, records=()):
        self._records: list[AdvanceRecord] = list(records)

    def add(self, record: AdvanceRecord) -> None:
        self._records.append(record)

    def list_for_range(self, staff_id: int, *, start_date: date, end_date: date):
        return [
            a for a in self._records
            if a.staff_id == staff_id and start_date <= a.advance_date <= end_date
        ]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 6, 18, 9, 15, 0)


@pytest.fixture
def staff() -> StaffProfile:
    return StaffProfile(
        staff_id=7,
        user_id=1,
        full_name="Asha Rao",
        designation="Cashier",
        monthly_salary=Decimal("30000"),
    )


@pytest.fixture
def user() -> User:
    return User(user_id=1, email="asha@example.com", password_hash=generate_password_hash("secret1"))


@pytest.fixture
def portal(user, staff) -> PortalSession:
    return PortalSession(user_id=user.user_id, email=user.email, staff=staff)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def advances_repo() -> InMemoryAdvances:
    return InMemoryAdvances()


@pytest.fixture
def container(user, staff, attendance_repo, advances_repo):
    return wire_services(
        users_repo=InMemoryUsers({user.user_id: user}),
        staff_repo=InMemoryStaff({user.user_id: staff}),
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
    )


@pytest.fixture
def make_auth():
    """AuthService over one user and an optional staff profile."""

    def build(user: User, staff: Optional[StaffProfile] = None) -> AuthService:
        profiles = {staff.user_id: staff} if staff else {}
        return AuthService(InMemoryUsers({user.user_id: user}), InMemoryStaff(profiles))

    return build
