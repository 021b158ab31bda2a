from __future__ import annotations

from typing import Any

from ..core.exceptions import InvalidFormatError


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise InvalidFormatError(f"{field_name} must be a positive integer")
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidFormatError(f"{field_name} must be a positive integer")
    if number <= 0:
        raise InvalidFormatError(f"{field_name} must be a positive integer")
    return number
