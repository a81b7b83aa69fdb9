from __future__ import annotations

from typing import Any, Optional

from ..core.constants import DEFAULT_SESSION_CAPACITY
from ..core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Any, field_name: str) -> Optional[str]:
    if is_blank(value):
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip()


def require_id(value: Any, field_name: str) -> int:
    """Coerce a positive integer identifier (int or digit string)."""

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer")
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            raise ValidationError(f"{field_name} must be a positive integer")
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return value


def parse_capacity(value: Any) -> int:
    if is_blank(value):
        return DEFAULT_SESSION_CAPACITY
    if isinstance(value, bool):
        raise ValidationError("Capacity must be an integer")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text.startswith("-") else text
        if not (digits.isascii() and digits.isdigit()):
            raise ValidationError("Capacity must be an integer")
        value = int(text)
    if not isinstance(value, int):
        raise ValidationError("Capacity must be an integer")
    if value < 0:
        raise ValidationError("Capacity must be zero or greater")
    return value
