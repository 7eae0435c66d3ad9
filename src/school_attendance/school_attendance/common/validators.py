from __future__ import annotations

import math
from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_all_non_empty(values: Iterable[str | None], field_name: str) -> list[str]:
    if not isinstance(values, (list, tuple)):
        raise ValidationError(f"Please fill in {field_name}")
    items = list(values)
    if not items or any(not v or not str(v).strip() for v in items):
        raise ValidationError(f"Please fill in {field_name}")
    return [str(v).strip() for v in items]


def require_number(value, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    return number
