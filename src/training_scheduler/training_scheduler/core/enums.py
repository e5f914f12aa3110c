from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization."""

    ADMIN = "admin"
    TRAINER = "trainer"
    ATHLETE = "athlete"


class AttendanceStatus(str, Enum):
    """Attendance value stored per (session, user) record.

    Any value may replace any other: trainers correct marks after the fact.
    """

    REGISTERED = "registered"
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
