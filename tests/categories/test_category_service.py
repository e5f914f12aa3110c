from __future__ import annotations

import pytest

from training_scheduler.core.exceptions import NotFoundError, ValidationError


def test_create_and_list_categories(container):
    container.category_service.create(name="Precision Training", color="#3b82f6")
    container.category_service.create(name="Block & Defense Training", description="Digging and floor defense")

    names = [c.name for c in container.category_service.list_categories()]

    assert names == ["Block & Defense Training", "Precision Training"]
    assert container.category_service.list_categories()[1].color == "#3B82F6"


@pytest.mark.parametrize("overrides", [{"name": ""}, {"color": "red"}, {"color": "#12345"}])
def test_create_category_rejects_invalid_input(container, overrides):
    data = {"name": "Passing", "color": "#10B981"}
    data.update(overrides)
    with pytest.raises(ValidationError):
        container.category_service.create(**data)


def test_update_category(container, store):
    category = store.add_category("Serve")

    updated = container.category_service.update(
        category_id=category.category_id, name="Serve & Attack Training", color="#EF4444"
    )

    assert updated.name == "Serve & Attack Training"
    assert updated.color == "#EF4444"


def test_update_missing_category_raises_not_found(container):
    with pytest.raises(NotFoundError):
        container.category_service.update(category_id=31337, name="Nope")


def test_delete_category_detaches_sessions(container, store, trainer):
    category = store.add_category("Precision Training")
    session = store.add_session(trainer, category_id=category.category_id)

    container.category_service.delete(category.category_id)

    assert store.sessions[session.session_id].category_id is None
    assert container.session_service.get_view(session.session_id).category is None


def test_delete_missing_category_raises_not_found(container):
    with pytest.raises(NotFoundError):
        container.category_service.delete(5150)
