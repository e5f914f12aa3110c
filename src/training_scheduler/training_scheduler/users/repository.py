from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class AdminGuardOutcome(str, Enum):
    """Result of a change that must keep at least one admin."""

    APPLIED = "applied"
    NOT_FOUND = "not_found"
    LAST_ADMIN = "last_admin"


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, name: str, email: str, password_hash: str, role: Role) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def delete_guarded(self, user_id: int) -> AdminGuardOutcome:
        """Delete a user unless it is the only admin.

        The admin count and the delete must run in one transaction.
        """

        raise NotImplementedError

    def change_role_guarded(self, user_id: int, role: Role) -> AdminGuardOutcome:
        """Change a user's role unless that demotes the only admin."""

        raise NotImplementedError
