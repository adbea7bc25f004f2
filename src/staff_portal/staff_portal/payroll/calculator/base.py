from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence

from ...advances.model import AdvanceRecord
from ...attendance.model import AttendanceRecord
from ..model import SalaryBreakdown


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
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
        raise NotImplementedError
