from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import money


@dataclass(frozen=True)
class AdvanceRecord:
    """Domain entity: money pre-paid to a staff member, recovered from that month's salary."""

    staff_id: int
    advance_date: date
    amount: Decimal
    reason: Optional[str] = None
    advance_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "advance_id": self.advance_id,
            "date": self.advance_date.isoformat(),
            "amount": money(self.amount),
            "reason": self.reason or "",
        }
