from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def to_decimal(value: object, field_name: str) -> Decimal:
    """Coerce a stored numeric (int, float, str, Decimal) to Decimal."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} is not a valid amount: {value!r}")


def require_non_negative(value: object, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return amount


def require_month(year: int, month: int) -> tuple[int, int]:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month: {month}")
    if not 1 <= int(year) <= 9999:
        raise ValidationError(f"Invalid year: {year}")
    return int(year), int(month)
