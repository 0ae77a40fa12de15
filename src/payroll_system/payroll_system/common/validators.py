from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string, got {value!r}")
    if not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_non_negative_int(value, field_name: str) -> int:
    """Money and count fields are whole, non-negative numbers."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative, got {value}")
    return value


def require_optional_datetime(value, field_name: str) -> Optional[datetime]:
    if value is not None and not isinstance(value, datetime):
        raise ValidationError(f"{field_name} must be a datetime, got {value!r}")
    return value
