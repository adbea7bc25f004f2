from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.repository import AdvanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_HISTORY_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .payroll.service import SalaryService
from .users.mysql_staff_repository import MySQLStaffRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import StaffRepository, UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    staff_repo: StaffRepository
    attendance_repo: AttendanceRepository
    advances_repo: AdvanceRepository

    auth_service: AuthService
    attendance_service: AttendanceService
    salary_service: SalaryService

    conn: Optional[DatabaseConnection] = None


def wire_services(
    *,
    users_repo: UserRepository,
    staff_repo: StaffRepository,
    attendance_repo: AttendanceRepository,
    advances_repo: AdvanceRepository,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build the use-case layer on top of any repository implementations."""
    return Container(
        users_repo=users_repo,
        staff_repo=staff_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        auth_service=AuthService(users_repo, staff_repo),
        attendance_service=AttendanceService(attendance_repo, history_limit=history_limit),
        salary_service=SalaryService(attendance_repo, advances_repo),
        conn=conn,
    )


def build_container(*, db_config: dict, history_limit: int = DEFAULT_HISTORY_LIMIT) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return wire_services(
        users_repo=MySQLUserRepository(conn),
        staff_repo=MySQLStaffRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        advances_repo=MySQLAdvanceRepository(conn),
        history_limit=history_limit,
        conn=conn,
    )
