from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH, SELF_REGISTERABLE_ROLES
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, LastAdminError, NotFoundError, ValidationError
from .model import User
from .repository import AdminGuardOutcome, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    name: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip().lower())
        if not user:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return SessionUser(user_id=user.user_id, name=user.name, role=user.role)


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User not found")
        return user

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def create_account(
        self,
        *,
        name: str,
        email: str,
        password: str,
        password_confirmation: str,
        role: str,
    ) -> User:
        name = require_non_empty(name, "Name", max_len=MAX_NAME_LENGTH)
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        if password != password_confirmation:
            raise ValidationError("Password confirmation does not match")

        if role not in SELF_REGISTERABLE_ROLES:
            raise ValidationError("Role must be athlete or trainer")

        if self._users.get_by_email(email):
            raise ValidationError("Email has already been taken")

        user_id = self._users.create_user(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=Role(role),
        )
        logger.info("Created %s account user_id=%s", role, user_id)
        return self.get(user_id)

    def change_role(self, *, user_id: int, role: str) -> User:
        try:
            new_role = Role(role)
        except ValueError:
            raise ValidationError("Unknown role")

        outcome = self._users.change_role_guarded(int(user_id), new_role)
        self._raise_for(outcome, user_id=user_id, action="demote")
        logger.info("Changed role of user_id=%s to %s", user_id, new_role.value)
        return self.get(user_id)

    def delete_user(self, *, user_id: int) -> None:
        outcome = self._users.delete_guarded(int(user_id))
        self._raise_for(outcome, user_id=user_id, action="delete")
        logger.info("Deleted user_id=%s", user_id)

    @staticmethod
    def _raise_for(outcome: AdminGuardOutcome, *, user_id: int, action: str) -> None:
        if outcome == AdminGuardOutcome.NOT_FOUND:
            raise NotFoundError("User not found")
        if outcome == AdminGuardOutcome.LAST_ADMIN:
            logger.warning("Refused to %s last admin user_id=%s", action, user_id)
            raise LastAdminError("Cannot remove the last administrator")
