from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..advances.repository import AdvanceRepository
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import days_in_month, month_bounds, today_local
from ..common.validators import require_month
from ..users.service import PortalSession
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import ProRataSalaryCalculator
from .model import SalaryReport

logger = logging.getLogger(__name__)


class SalaryService:
    """Use case: a staff member's salary breakdown for one month."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._attendance = attendance
        self._advances = advances
        self._calculator = calculator or ProRataSalaryCalculator()

    def build_monthly_report(
        self,
        session: PortalSession,
        *,
        year: int | None = None,
        month: int | None = None,
        today: date | None = None,
    ) -> SalaryReport:
        today = today or today_local()
        year, month = require_month(
            today.year if year is None else year,
            today.month if month is None else month,
        )
        start, end = month_bounds(year, month)

        attendance = self._attendance.list_for_range(session.staff_id, start_date=start, end_date=end)
        advances = self._advances.list_for_range(session.staff_id, start_date=start, end_date=end)

        breakdown = self._calculator.calculate(
            year=year,
            month=month,
            base_salary=session.staff.monthly_salary,
            total_days_in_month=days_in_month(year, month),
            attendance=attendance,
            advances=advances,
        )
        logger.debug(
            "Salary for staff %s %04d-%02d: net=%s", session.staff_id, year, month, breakdown.net_salary
        )
        return SalaryReport(breakdown=breakdown, advances=tuple(advances))
