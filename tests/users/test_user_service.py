from __future__ import annotations

import pytest

from training_scheduler.core.enums import Role
from training_scheduler.core.exceptions import (
    AuthenticationError,
    LastAdminError,
    NotFoundError,
    ValidationError,
)


def _account(**overrides):
    data = {
        "name": "Sophia Chen",
        "email": "Sophia.Chen@example.com",
        "password": "secret-pass",
        "password_confirmation": "secret-pass",
        "role": "athlete",
    }
    data.update(overrides)
    return data


def test_authenticate_returns_session_user(container, trainer):
    s_user = container.auth_service.authenticate(trainer.email, "password")

    assert s_user.user_id == trainer.user_id
    assert s_user.role == Role.TRAINER


def test_auth_wrong_password_raises(container, trainer):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate(trainer.email, "wrong")


def test_auth_unknown_email_raises(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("nobody@example.com", "password")


def test_create_account_normalizes_email(container):
    user = container.user_service.create_account(**_account())

    assert user.email == "sophia.chen@example.com"
    assert user.role == Role.ATHLETE
    assert container.auth_service.authenticate("sophia.chen@example.com", "secret-pass").user_id == user.user_id


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "   "},
        {"email": "not-an-email"},
        {"password": "short", "password_confirmation": "short"},
        {"password_confirmation": "different-pass"},
        {"role": "admin"},
        {"role": "coach"},
    ],
)
def test_create_account_rejects_invalid_input(container, overrides):
    with pytest.raises(ValidationError):
        container.user_service.create_account(**_account(**overrides))


def test_create_account_rejects_duplicate_email(container, athlete):
    with pytest.raises(ValidationError):
        container.user_service.create_account(**_account(email=athlete.email))


def test_deleting_only_admin_is_refused(container, store, admin):
    with pytest.raises(LastAdminError):
        container.user_service.delete_user(user_id=admin.user_id)
    assert admin.user_id in store.users


def test_deleting_one_of_two_admins_succeeds(container, store, admin):
    second = store.add_user("Second Admin", Role.ADMIN)

    container.user_service.delete_user(user_id=second.user_id)

    assert second.user_id not in store.users
    with pytest.raises(LastAdminError):
        container.user_service.delete_user(user_id=admin.user_id)


def test_deleting_non_admin_succeeds(container, store, admin, athlete):
    container.user_service.delete_user(user_id=athlete.user_id)

    assert athlete.user_id not in store.users


def test_delete_unknown_user_raises_not_found(container, admin):
    with pytest.raises(NotFoundError):
        container.user_service.delete_user(user_id=9999)


def test_demoting_only_admin_is_refused(container, store, admin):
    with pytest.raises(LastAdminError):
        container.user_service.change_role(user_id=admin.user_id, role="trainer")
    assert store.users[admin.user_id].role == Role.ADMIN


def test_promote_then_demote(container, admin, athlete):
    promoted = container.user_service.change_role(user_id=athlete.user_id, role="admin")
    assert promoted.role == Role.ADMIN

    demoted = container.user_service.change_role(user_id=admin.user_id, role="athlete")
    assert demoted.role == Role.ATHLETE


def test_change_role_rejects_unknown_role(container, athlete):
    with pytest.raises(ValidationError):
        container.user_service.change_role(user_id=athlete.user_id, role="superuser")
