from __future__ import annotations

import logging
from collections import Counter
from decimal import Decimal
from typing import Sequence

from ...advances.model import AdvanceRecord
from ...attendance.model import AttendanceRecord
from ...common.validators import require_non_negative
from ...core.constants import HALF_DAY_FACTOR
from ...core.enums import AttendanceStatus
from ...core.exceptions import ValidationError
from ..model import SalaryBreakdown
from .base import SalaryCalculator

logger = logging.getLogger(__name__)


class ProRataSalaryCalculator(SalaryCalculator):
    """Standard rule: monthly salary pro-rated per calendar day.

    Half days cost half a day's pay, absent days a full day's pay, and the
    month's advances are subtracted. Net salary is not floored at zero.
    """

    def calculate(
        self,
        *,
        year: int,
        month: int,
        base_salary: Decimal,
        total_days_in_month: int,
        attendance: Sequence[AttendanceRecord],
        advances: Sequence[AdvanceRecord],
    ) -> SalaryBreakdown:
        if int(total_days_in_month) <= 0:
            raise ValidationError("total_days_in_month must be positive")
        base_salary = require_non_negative(base_salary, "Base salary")

        counts = Counter(AttendanceStatus.parse(r.status) for r in attendance)
        ignored = counts.pop(AttendanceStatus.UNKNOWN, 0)
        if ignored:
            logger.warning("Ignored %d attendance record(s) with unrecognised status", ignored)

        per_day_salary = base_salary / Decimal(int(total_days_in_month))
        half_days = counts[AttendanceStatus.HALF_DAY]
        absent_days = counts[AttendanceStatus.ABSENT]

        half_day_deduction = half_days * (per_day_salary * HALF_DAY_FACTOR)
        absent_deduction = absent_days * per_day_salary
        total_advances = sum(
            (require_non_negative(a.amount, "Advance amount") for a in advances),
            Decimal(0),
        )

        return SalaryBreakdown(
            month=int(month),
            year=int(year),
            base_salary=base_salary,
            total_days_in_month=int(total_days_in_month),
            present_days=counts[AttendanceStatus.PRESENT],
            half_days=half_days,
            absent_days=absent_days,
            per_day_salary=per_day_salary,
            half_day_deduction=half_day_deduction,
            absent_deduction=absent_deduction,
            total_advances=total_advances,
            net_salary=base_salary - half_day_deduction - absent_deduction - total_advances,
        )
