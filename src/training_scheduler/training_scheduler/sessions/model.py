from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from ..attendance.model import AttendanceWithUser
from ..categories.model import TrainingCategory


def _iso(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


@dataclass(frozen=True)
class TrainingSession:
    """Domain entity: a scheduled training slot owned by one trainer."""

    session_id: int
    trainer_id: int
    start_time: datetime
    end_time: datetime
    max_participants: int
    notes: Optional[str] = None
    category_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.session_id,
            "trainer_id": self.trainer_id,
            "start_time": _iso(self.start_time),
            "end_time": _iso(self.end_time),
            "max_participants": self.max_participants,
            "notes": self.notes,
            "category_id": self.category_id,
        }


@dataclass(frozen=True)
class SessionView:
    """Read-model: a session with its roster and category."""

    session: TrainingSession
    roster: Tuple[AttendanceWithUser, ...] = field(default_factory=tuple)
    category: Optional[TrainingCategory] = None

    @property
    def participant_count(self) -> int:
        return len(self.roster)

    @property
    def is_full(self) -> bool:
        return self.participant_count >= self.session.max_participants

    def to_dict(self) -> dict:
        data = self.session.to_dict()
        data["attendance_records"] = [entry.to_dict() for entry in self.roster]
        data["category"] = self.category.to_dict() if self.category else None
        data["participant_count"] = self.participant_count
        return data
