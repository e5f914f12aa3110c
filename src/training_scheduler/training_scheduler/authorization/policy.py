"""Ownership rules for mutating sessions and their attendance records.

Every check is a pure function of the acting user and the resolved owner.
An attendance record carries no owner of its own: it is owned through its
parent session, so callers resolve that session first and pass it in.
"""

from __future__ import annotations

from ..core.exceptions import AuthorizationError
from ..sessions.model import TrainingSession


def is_owner(actor_id: int, session: TrainingSession) -> bool:
    return int(actor_id) == int(session.trainer_id)


def can_update_session(actor_id: int, session: TrainingSession) -> bool:
    return is_owner(actor_id, session)


def can_delete_session(actor_id: int, session: TrainingSession) -> bool:
    return is_owner(actor_id, session)


def can_update_record(actor_id: int, parent_session: TrainingSession) -> bool:
    return is_owner(actor_id, parent_session)


def authorize(allowed: bool, message: str = "This action is unauthorized") -> None:
    if not allowed:
        raise AuthorizationError(message)
