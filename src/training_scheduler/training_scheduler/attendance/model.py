from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus
from ..users.model import User


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one user's place on one session's roster."""

    record_id: int
    training_session_id: int
    user_id: int
    status: AttendanceStatus
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "training_session_id": self.training_session_id,
            "user_id": self.user_id,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AttendanceWithUser:
    """Read-model: a record joined with its participant."""

    record: AttendanceRecord
    user: User

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["user"] = self.user.to_public_dict()
        return data
