from __future__ import annotations

from datetime import datetime
from typing import Any

from ..core.exceptions import ValidationError


def parse_iso_datetime(value: Any, field_name: str) -> datetime:
    """Parse an ISO-8601 string (or pass through a datetime).

    Timezone-aware values are converted to naive local time, matching the
    DATETIME columns in the database.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        if not value or not isinstance(value, str):
            raise ValidationError(f"{field_name} is required")
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            raise ValidationError(f"{field_name} is not a valid date/time")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
