from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import SessionView, TrainingSession


class TrainingSessionRepository(Protocol):
    """Soft-deleted sessions are invisible to every method."""

    def get_by_id(self, session_id: int) -> Optional[TrainingSession]:
        raise NotImplementedError

    def get_view(self, session_id: int) -> Optional[SessionView]:
        raise NotImplementedError

    def list_views(self) -> Sequence[SessionView]:
        """All sessions ordered by start_time, with roster and category."""

        raise NotImplementedError

    def create(
        self,
        *,
        trainer_id: int,
        start_time: datetime,
        end_time: datetime,
        max_participants: int,
        notes: Optional[str],
        category_id: Optional[int],
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        session_id: int,
        start_time: datetime,
        end_time: datetime,
        max_participants: int,
        notes: Optional[str],
        category_id: Optional[int],
    ) -> None:
        raise NotImplementedError

    def soft_delete(self, session_id: int) -> bool:
        raise NotImplementedError
