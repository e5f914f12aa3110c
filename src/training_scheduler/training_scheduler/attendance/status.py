from __future__ import annotations

from typing import Any

from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidStatusError

ALLOWED_STATUSES = tuple(s.value for s in AttendanceStatus)


def parse_status(value: Any) -> AttendanceStatus:
    """Return the AttendanceStatus for `value` or raise InvalidStatusError.

    There is no transition graph: any status may replace any other.
    """
    if isinstance(value, AttendanceStatus):
        return value
    if not isinstance(value, str):
        raise InvalidStatusError(f"Status must be one of: {', '.join(ALLOWED_STATUSES)}")
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise InvalidStatusError(f"Status must be one of: {', '.join(ALLOWED_STATUSES)}")
