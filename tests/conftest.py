from __future__ import annotations

from datetime import datetime

import pytest

from training_scheduler.core.enums import Role
from training_scheduler.main import create_app

from tests.fakes import Store, build_fake_container


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2030, 1, 1, 8, 0, 0)


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def admin(store):
    return store.add_user("Admin User", Role.ADMIN)


@pytest.fixture
def trainer(store):
    return store.add_user("Test Trainer", Role.TRAINER)


@pytest.fixture
def other_trainer(store):
    return store.add_user("Other Trainer", Role.TRAINER)


@pytest.fixture
def athlete(store):
    return store.add_user("Emma Wilson", Role.ATHLETE)


@pytest.fixture
def container(store):
    return build_fake_container(store)


@pytest.fixture
def app(container):
    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(user, password: str = "password"):
        resp = client.post("/api/login", json={"email": user.email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return resp

    return _login
