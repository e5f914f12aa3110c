from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from training_scheduler.core.enums import AttendanceStatus, Role
from training_scheduler.core.exceptions import CapacityExceededError, NotFoundError

from tests.fakes import build_fake_container


def _roster_user_ids(view):
    return [entry.user.user_id for entry in view.roster]


def test_register_creates_registered_record(container, store, trainer, athlete):
    session = store.add_session(trainer, max_participants=3)

    view = container.registration_service.register(session_id=session.session_id, user_id=athlete.user_id)

    assert _roster_user_ids(view) == [athlete.user_id]
    assert view.roster[0].record.status == AttendanceStatus.REGISTERED


def test_register_twice_keeps_single_record(container, store, trainer, athlete):
    session = store.add_session(trainer, max_participants=3)

    container.registration_service.register(session_id=session.session_id, user_id=athlete.user_id)
    view = container.registration_service.register(session_id=session.session_id, user_id=athlete.user_id)

    assert _roster_user_ids(view) == [athlete.user_id]
    assert len(store.roster(session.session_id)) == 1


def test_register_again_on_full_session_is_still_idempotent(container, store, trainer, athlete):
    session = store.add_session(trainer, max_participants=1)

    container.registration_service.register(session_id=session.session_id, user_id=athlete.user_id)
    view = container.registration_service.register(session_id=session.session_id, user_id=athlete.user_id)

    assert _roster_user_ids(view) == [athlete.user_id]


def test_register_keeps_existing_status(container, store, trainer, athlete):
    session = store.add_session(trainer, max_participants=3)
    record = store.add_record(session, athlete, AttendanceStatus.PRESENT)

    view = container.registration_service.register(session_id=session.session_id, user_id=athlete.user_id)

    assert view.roster[0].record == record


def test_register_unknown_session_raises_not_found(container, athlete):
    with pytest.raises(NotFoundError):
        container.registration_service.register(session_id=999, user_id=athlete.user_id)


def test_register_on_deleted_session_raises_not_found(container, store, trainer, athlete):
    session = store.add_session(trainer)
    store.deleted_sessions.add(session.session_id)

    with pytest.raises(NotFoundError):
        container.registration_service.register(session_id=session.session_id, user_id=athlete.user_id)


def test_register_unknown_user_raises_not_found(container, store, trainer):
    session = store.add_session(trainer)

    with pytest.raises(NotFoundError, match="User not found"):
        container.registration_service.register(session_id=session.session_id, user_id=4242)
    assert store.roster(session.session_id) == []


def test_register_does_not_touch_session_fields(container, store, trainer, athlete):
    session = store.add_session(trainer, max_participants=2)

    container.registration_service.register(session_id=session.session_id, user_id=athlete.user_id)

    assert store.sessions[session.session_id] == session


def test_unregister_removes_record(container, store, trainer, athlete):
    session = store.add_session(trainer)
    store.add_record(session, athlete, AttendanceStatus.REGISTERED)

    view = container.registration_service.unregister(session_id=session.session_id, user_id=athlete.user_id)

    assert view.roster == ()
    assert store.roster(session.session_id) == []


def test_unregister_without_record_is_noop(container, store, trainer, athlete):
    session = store.add_session(trainer)

    first = container.registration_service.unregister(session_id=session.session_id, user_id=athlete.user_id)
    second = container.registration_service.unregister(session_id=session.session_id, user_id=athlete.user_id)

    assert first.roster == () and second.roster == ()


def test_unregister_unknown_session_raises_not_found(container, athlete):
    with pytest.raises(NotFoundError):
        container.registration_service.unregister(session_id=12345, user_id=athlete.user_id)


def test_single_seat_scenario(container, store, trainer):
    a = store.add_user("Athlete A", Role.ATHLETE)
    b = store.add_user("Athlete B", Role.ATHLETE)
    session = store.add_session(trainer, max_participants=1)
    svc = container.registration_service

    assert _roster_user_ids(svc.register(session_id=session.session_id, user_id=a.user_id)) == [a.user_id]

    with pytest.raises(CapacityExceededError):
        svc.register(session_id=session.session_id, user_id=b.user_id)
    assert _roster_user_ids(container.session_service.get_view(session.session_id)) == [a.user_id]

    assert _roster_user_ids(svc.unregister(session_id=session.session_id, user_id=a.user_id)) == []
    assert _roster_user_ids(svc.register(session_id=session.session_id, user_id=b.user_id)) == [b.user_id]


def test_concurrent_registrations_never_exceed_capacity(store, trainer):
    capacity = 5
    athletes = [store.add_user(f"Athlete {i}", Role.ATHLETE) for i in range(20)]
    session = store.add_session(trainer, max_participants=capacity)
    container = build_fake_container(store, think_time=0.001)

    def attempt(user):
        try:
            container.registration_service.register(session_id=session.session_id, user_id=user.user_id)
            return True
        except CapacityExceededError:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, athletes))

    assert results.count(True) == capacity
    assert results.count(False) == len(athletes) - capacity
    assert len(store.roster(session.session_id)) == capacity
