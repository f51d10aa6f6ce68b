from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_PHONE_RE = re.compile(r"^[0-9\-+()]{10,}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_phone(value: str, field_name: str = "Phone") -> str:
    value = require_non_empty(value, field_name)
    if not _PHONE_RE.match(re.sub(r"\s", "", value)):
        raise ValidationError(f"{field_name} format is invalid")
    return value


def require_choice(value: int, choices: tuple[int, ...], field_name: str) -> int:
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if value not in choices:
        allowed = ", ".join(str(c) for c in choices)
        raise ValidationError(f"{field_name} must be one of {allowed}")
    return value
