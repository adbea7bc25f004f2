from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AdvanceRecord


class AdvanceRepository(Protocol):
    def list_for_range(self, staff_id: int, *, start_date: date, end_date: date) -> Sequence[AdvanceRecord]:
        """Advances whose advance_date falls in [start_date, end_date]."""

        raise NotImplementedError
