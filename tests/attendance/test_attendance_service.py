from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.staff_portal.staff_portal.attendance.model import AttendanceRecord
from src.staff_portal.staff_portal.attendance.service import AttendanceService
from src.staff_portal.staff_portal.core.enums import AttendanceStatus
from src.staff_portal.staff_portal.core.exceptions import ValidationError


def test_mark_today_writes_record(portal, attendance_repo, fixed_now):
    svc = AttendanceService(attendance_repo)
    svc.mark_attendance(portal, selected_date=fixed_now.date(), status="half_day", now=fixed_now)

    rec = attendance_repo.get_for_staff_and_date(7, fixed_now.date())
    assert rec is not None
    assert rec.status == AttendanceStatus.HALF_DAY
    assert rec.updated_at == fixed_now


def test_mark_other_day_is_rejected_without_write(portal, attendance_repo, fixed_now):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(ValidationError, match="today"):
        svc.mark_attendance(
            portal,
            selected_date=fixed_now.date() - timedelta(days=1),
            status=AttendanceStatus.PRESENT,
            now=fixed_now,
        )

    assert attendance_repo.writes == 0


def test_marking_twice_overwrites(portal, attendance_repo, fixed_now):
    svc = AttendanceService(attendance_repo)
    svc.mark_attendance(portal, selected_date=fixed_now.date(), status="present", now=fixed_now)
    svc.mark_attendance(
        portal, selected_date=fixed_now.date(), status="absent", now=fixed_now + timedelta(hours=2)
    )

    records = attendance_repo.all()
    assert len(records) == 1
    assert records[0].status == AttendanceStatus.ABSENT
    assert records[0].updated_at == fixed_now + timedelta(hours=2)


@pytest.mark.parametrize("status", ["late", "unknown", ""])
def test_unmarkable_status_is_rejected(portal, attendance_repo, fixed_now, status):
    svc = AttendanceService(attendance_repo)
    with pytest.raises(ValidationError):
        svc.mark_attendance(portal, selected_date=fixed_now.date(), status=status, now=fixed_now)
    assert attendance_repo.writes == 0


def test_history_is_newest_first_and_limited(portal, attendance_repo):
    for day in range(1, 16):
        attendance_repo.add(
            AttendanceRecord(staff_id=7, work_date=date(2025, 6, day), status=AttendanceStatus.PRESENT)
        )

    svc = AttendanceService(attendance_repo)
    rows = svc.get_history(portal)

    assert len(rows) == 10
    assert rows[0].work_date == date(2025, 6, 15)
    assert len(svc.get_history(portal, limit=3)) == 3


def test_today_record(portal, attendance_repo, fixed_now):
    svc = AttendanceService(attendance_repo)
    assert svc.get_today_record(portal, fixed_now.date()) is None

    svc.mark_attendance(portal, selected_date=fixed_now.date(), status="present", now=fixed_now)
    assert svc.get_today_record(portal, fixed_now.date()).status == AttendanceStatus.PRESENT


def test_month_calendar_uses_month_records(portal, attendance_repo):
    attendance_repo.add(AttendanceRecord(staff_id=7, work_date=date(2025, 5, 31), status=AttendanceStatus.ABSENT))
    attendance_repo.add(AttendanceRecord(staff_id=7, work_date=date(2025, 6, 2), status=AttendanceStatus.PRESENT))

    grid = AttendanceService(attendance_repo).get_month_calendar(portal, today=date(2025, 6, 18))
    marked = [c for c in grid.cells if c and c.status]

    assert (grid.year, grid.month) == (2025, 6)
    assert [c.day for c in marked] == [2]


@pytest.mark.parametrize("limit", [0, -5])
def test_history_rejects_non_positive_limit(portal, attendance_repo, limit):
    with pytest.raises(ValidationError, match="limit"):
        AttendanceService(attendance_repo).get_history(portal, limit=limit)
