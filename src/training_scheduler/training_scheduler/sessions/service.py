from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from ..authorization.policy import authorize, can_delete_session, can_update_session
from ..categories.repository import CategoryRepository
from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import optional_text, require_positive_int
from ..core.exceptions import NotFoundError, ValidationError
from .model import SessionView, TrainingSession
from .repository import TrainingSessionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionFields:
    """Validated, writable fields of a training session."""

    start_time: datetime
    end_time: datetime
    max_participants: int
    notes: Optional[str]
    category_id: Optional[int]


class TrainingSessionService:
    def __init__(self, sessions: TrainingSessionRepository, categories: CategoryRepository):
        self._sessions = sessions
        self._categories = categories

    def validate_fields(
        self,
        *,
        start_time: Any,
        end_time: Any,
        max_participants: Any,
        notes: Any = None,
        category_id: Any = None,
    ) -> SessionFields:
        start = parse_iso_datetime(start_time, "Start time")
        end = parse_iso_datetime(end_time, "End time")
        if end <= start:
            raise ValidationError("End time must be after start time")

        capacity = require_positive_int(max_participants, "Max participants")

        category: Optional[int] = None
        if category_id not in (None, ""):
            if isinstance(category_id, bool):
                raise ValidationError("Category is not valid")
            try:
                category = int(category_id)
            except (TypeError, ValueError):
                raise ValidationError("Category is not valid")
            if not self._categories.get_by_id(category):
                raise ValidationError("Selected category does not exist")

        return SessionFields(
            start_time=start,
            end_time=end,
            max_participants=capacity,
            notes=optional_text(notes),
            category_id=category,
        )

    def list_sessions(self) -> Sequence[SessionView]:
        return self._sessions.list_views()

    def get_view(self, session_id: int) -> SessionView:
        view = self._sessions.get_view(int(session_id))
        if not view:
            raise NotFoundError("Training session not found")
        return view

    def _get(self, session_id: int) -> TrainingSession:
        session = self._sessions.get_by_id(int(session_id))
        if not session:
            raise NotFoundError("Training session not found")
        return session

    def create(self, *, trainer_id: int, **fields: Any) -> SessionView:
        data = self.validate_fields(**fields)
        session_id = self._sessions.create(
            trainer_id=int(trainer_id),
            start_time=data.start_time,
            end_time=data.end_time,
            max_participants=data.max_participants,
            notes=data.notes,
            category_id=data.category_id,
        )
        logger.info("Trainer user_id=%s created session_id=%s", trainer_id, session_id)
        return self.get_view(session_id)

    def update(self, *, session_id: int, acting_user_id: int, **fields: Any) -> SessionView:
        session = self._get(session_id)
        authorize(can_update_session(acting_user_id, session))

        data = self.validate_fields(**fields)
        self._sessions.update(
            session_id=session.session_id,
            start_time=data.start_time,
            end_time=data.end_time,
            max_participants=data.max_participants,
            notes=data.notes,
            category_id=data.category_id,
        )
        logger.info("Session session_id=%s updated by user_id=%s", session.session_id, acting_user_id)
        return self.get_view(session.session_id)

    def delete(self, *, session_id: int, acting_user_id: int) -> TrainingSession:
        session = self._get(session_id)
        authorize(can_delete_session(acting_user_id, session))

        if not self._sessions.soft_delete(session.session_id):
            raise NotFoundError("Training session not found")
        logger.info("Session session_id=%s deleted by user_id=%s", session.session_id, acting_user_id)
        return session
