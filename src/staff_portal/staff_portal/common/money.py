from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def money(value: Decimal) -> str:
    """Two-decimal display string."""
    return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP))
