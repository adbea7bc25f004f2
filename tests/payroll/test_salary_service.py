from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.staff_portal.staff_portal.advances.model import AdvanceRecord
from src.staff_portal.staff_portal.attendance.model import AttendanceRecord
from src.staff_portal.staff_portal.core.enums import AttendanceStatus
from src.staff_portal.staff_portal.payroll.calculator.standard_calculator import ProRataSalaryCalculator
from src.staff_portal.staff_portal.payroll.service import SalaryService


def test_report_only_counts_the_requested_month(portal, attendance_repo, advances_repo):
    attendance_repo.add(AttendanceRecord(staff_id=7, work_date=date(2025, 5, 31), status=AttendanceStatus.ABSENT))
    attendance_repo.add(AttendanceRecord(staff_id=7, work_date=date(2025, 6, 1), status=AttendanceStatus.ABSENT))
    attendance_repo.add(AttendanceRecord(staff_id=7, work_date=date(2025, 6, 30), status=AttendanceStatus.HALF_DAY))
    attendance_repo.add(AttendanceRecord(staff_id=99, work_date=date(2025, 6, 2), status=AttendanceStatus.ABSENT))
    advances_repo.add(AdvanceRecord(staff_id=7, advance_date=date(2025, 6, 10), amount=Decimal("500"), reason="Rent"))
    advances_repo.add(AdvanceRecord(staff_id=7, advance_date=date(2025, 7, 1), amount=Decimal("900")))

    svc = SalaryService(attendance_repo, advances_repo)
    report = svc.build_monthly_report(portal, year=2025, month=6)

    b = report.breakdown
    assert b.total_days_in_month == 30
    assert (b.absent_days, b.half_days) == (1, 1)
    assert b.total_advances == Decimal("500")
    assert b.net_salary == Decimal("28000")
    assert [a.reason for a in report.advances] == ["Rent"]


def test_report_defaults_to_current_month(portal, attendance_repo, advances_repo):
    svc = SalaryService(attendance_repo, advances_repo)
    report = svc.build_monthly_report(portal, today=date(2024, 2, 10))

    assert (report.breakdown.year, report.breakdown.month) == (2024, 2)
    assert report.breakdown.total_days_in_month == 29
    assert report.advances == ()


def test_custom_calculator_is_used(portal, attendance_repo, advances_repo):
    class Recording(ProRataSalaryCalculator):
        def __init__(self):
            self.kwargs = None

        def calculate(self, **kwargs):
            self.kwargs = kwargs
            return super().calculate(**kwargs)

    calc = Recording()
    svc = SalaryService(attendance_repo, advances_repo, calculator=calc)
    report = svc.build_monthly_report(portal, year=2025, month=2)

    assert report.breakdown.per_day_salary == Decimal("30000") / 28
    assert calc.kwargs["total_days_in_month"] == 28
    assert calc.kwargs["base_salary"] == Decimal("30000")
