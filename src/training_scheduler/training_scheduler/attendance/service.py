from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Sequence

from ..authorization.policy import authorize, can_update_record
from ..common.datetime_utils import now_local
from ..core.constants import HEATMAP_WEEKS
from ..core.exceptions import NotFoundError
from ..sessions.model import TrainingSession
from ..sessions.repository import TrainingSessionRepository
from .model import AttendanceWithUser
from .repository import AttendanceRepository
from .status import parse_status

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, sessions: TrainingSessionRepository):
        self._attendance = attendance
        self._sessions = sessions

    def set_status(self, *, record_id: int, new_status: Any, acting_user_id: int) -> AttendanceWithUser:
        """Change a record's status on behalf of the session's trainer.

        The ownership check runs before the status is validated, and both run
        before anything is written, so a rejected call leaves the stored status
        untouched.
        """
        record = self._attendance.get_by_id(int(record_id))
        if not record:
            raise NotFoundError("Attendance record not found")

        parent = self._sessions.get_by_id(record.training_session_id)
        if not parent:
            raise NotFoundError("Training session not found")

        authorize(can_update_record(acting_user_id, parent))
        status = parse_status(new_status)

        if not self._attendance.update_status(record_id=record.record_id, status=status):
            raise NotFoundError("Attendance record not found")

        logger.info(
            "Attendance record_id=%s set to %s by user_id=%s", record.record_id, status.value, acting_user_id
        )
        updated = self._attendance.get_with_user(record.record_id)
        if not updated:
            raise NotFoundError("Attendance record not found")
        return updated

    def heatmap(self, user_id: int, *, now: datetime | None = None) -> list[dict]:
        """Dates of sessions in the last weeks where the user was present."""
        now = now or now_local()
        since = (now - timedelta(weeks=HEATMAP_WEEKS)).replace(hour=0, minute=0, second=0, microsecond=0)
        starts = self._attendance.present_session_starts(user_id=int(user_id), since=since)
        return [{"date": s.strftime("%Y-%m-%d"), "attended": True} for s in starts]

    def attended_sessions(self, user_id: int) -> Sequence[TrainingSession]:
        return self._attendance.sessions_for_user(int(user_id))
