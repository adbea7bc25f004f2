from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence

from ..advances.model import AdvanceRecord
from ..common.money import money


@dataclass(frozen=True)
class SalaryBreakdown:
    """Derived, never persisted. Every intermediate figure is kept for display."""

    month: int
    year: int
    base_salary: Decimal
    total_days_in_month: int
    present_days: int
    half_days: int
    absent_days: int
    per_day_salary: Decimal
    half_day_deduction: Decimal
    absent_deduction: Decimal
    total_advances: Decimal
    net_salary: Decimal

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "year": self.year,
            "base_salary": money(self.base_salary),
            "total_days_in_month": self.total_days_in_month,
            "present_days": self.present_days,
            "half_days": self.half_days,
            "absent_days": self.absent_days,
            "per_day_salary": money(self.per_day_salary),
            "half_day_deduction": money(self.half_day_deduction),
            "absent_deduction": money(self.absent_deduction),
            "total_advances": money(self.total_advances),
            "net_salary": money(self.net_salary),
        }


@dataclass(frozen=True)
class SalaryReport:
    breakdown: SalaryBreakdown
    advances: Sequence[AdvanceRecord] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "breakdown": self.breakdown.to_dict(),
            "advances": [a.to_dict() for a in self.advances],
        }
