from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from ..sessions.model import TrainingSession
from .model import AttendanceRecord, AttendanceWithUser


class RegistrationOutcome(str, Enum):
    REGISTERED = "registered"
    ALREADY_REGISTERED = "already_registered"
    SESSION_FULL = "session_full"
    SESSION_NOT_FOUND = "session_not_found"
    USER_NOT_FOUND = "user_not_found"


class AttendanceRepository(Protocol):
    def register(self, *, session_id: int, user_id: int) -> RegistrationOutcome:
        """Get-or-create the (session, user) record under the session's capacity.

        The existence check, roster count and insert must be atomic with respect
        to other registrations on the same session.
        """

        raise NotImplementedError

    def remove(self, *, session_id: int, user_id: int) -> bool:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_with_user(self, record_id: int) -> Optional[AttendanceWithUser]:
        raise NotImplementedError

    def update_status(self, *, record_id: int, status: AttendanceStatus) -> bool:
        raise NotImplementedError

    def present_session_starts(self, *, user_id: int, since: datetime) -> Sequence[datetime]:
        """Start times of sessions since `since` where the user was marked present."""

        raise NotImplementedError

    def sessions_for_user(self, user_id: int) -> Sequence[TrainingSession]:
        """Sessions the user holds an attendance record for, oldest first."""

        raise NotImplementedError
