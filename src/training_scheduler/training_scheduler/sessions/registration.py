from __future__ import annotations

import logging

from ..attendance.repository import AttendanceRepository, RegistrationOutcome
from ..core.exceptions import CapacityExceededError, NotFoundError
from .model import SessionView
from .repository import TrainingSessionRepository

logger = logging.getLogger(__name__)


class RegistrationService:
    """Joins and leaves a session's roster under its fixed capacity.

    Both operations are idempotent, so a client may safely retry them.
    """

    def __init__(self, sessions: TrainingSessionRepository, attendance: AttendanceRepository):
        self._sessions = sessions
        self._attendance = attendance

    def _view(self, session_id: int) -> SessionView:
        view = self._sessions.get_view(int(session_id))
        if not view:
            raise NotFoundError("Training session not found")
        return view

    def register(self, *, session_id: int, user_id: int) -> SessionView:
        outcome = self._attendance.register(session_id=int(session_id), user_id=int(user_id))

        if outcome == RegistrationOutcome.SESSION_NOT_FOUND:
            raise NotFoundError("Training session not found")
        if outcome == RegistrationOutcome.USER_NOT_FOUND:
            raise NotFoundError("User not found")
        if outcome == RegistrationOutcome.SESSION_FULL:
            logger.warning("Session session_id=%s is full; rejected user_id=%s", session_id, user_id)
            raise CapacityExceededError("Session is full")

        if outcome == RegistrationOutcome.REGISTERED:
            logger.info("Registered user_id=%s for session_id=%s", user_id, session_id)
        return self._view(session_id)

    def unregister(self, *, session_id: int, user_id: int) -> SessionView:
        if not self._sessions.get_by_id(int(session_id)):
            raise NotFoundError("Training session not found")

        if self._attendance.remove(session_id=int(session_id), user_id=int(user_id)):
            logger.info("Unregistered user_id=%s from session_id=%s", user_id, session_id)
        return self._view(session_id)
