from __future__ import annotations

import re
from typing import Any

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def require_non_empty(value: str, field_name: str, *, max_len: int | None = None) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    value = str(value).strip()
    if max_len is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: str) -> str:
    value = require_non_empty(value, "Email", max_len=255).lower()
    if not _EMAIL_RE.match(value):
        raise ValidationError("Email is not a valid address")
    return value


def require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field_name} must be an integer")
    if number < 1:
        raise ValidationError(f"{field_name} must be at least 1")
    return number


def optional_color(value: str | None) -> str | None:
    v = (value or "").strip()
    if not v:
        return None
    if not _COLOR_RE.match(v):
        raise ValidationError("Color must be a hex value like #3B82F6")
    return v.upper()


def optional_text(value: str | None) -> str | None:
    v = (value or "").strip() if isinstance(value, str) else value
    return v or None
