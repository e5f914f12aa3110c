from __future__ import annotations

from datetime import datetime

import pytest

from training_scheduler.analytics.service import attendance_percentage
from training_scheduler.core.enums import AttendanceStatus, Role


@pytest.mark.parametrize(
    "present,total,expected",
    [(0, 0, 0), (0, 5, 0), (1, 3, 33), (2, 3, 67), (1, 2, 50), (1, 8, 13), (4, 4, 100)],
)
def test_attendance_percentage(present, total, expected):
    assert attendance_percentage(present, total) == expected


def test_summary_on_empty_store(container, fixed_now):
    summary = container.analytics_service.summary(now=fixed_now)

    assert summary.total_sessions == 0
    assert summary.total_participants == 0
    assert summary.average_attendance == 0
    assert summary.upcoming_sessions == 0


def test_summary_counts(container, store, trainer, fixed_now):
    a = store.add_user("Athlete A", Role.ATHLETE)
    b = store.add_user("Athlete B", Role.ATHLETE)
    past = store.add_session(trainer, start=datetime(2029, 12, 1, 10), end=datetime(2029, 12, 1, 12))
    future = store.add_session(trainer, start=datetime(2030, 2, 1, 10), end=datetime(2030, 2, 1, 12))
    deleted = store.add_session(trainer, start=datetime(2030, 3, 1, 10), end=datetime(2030, 3, 1, 12))
    store.deleted_sessions.add(deleted.session_id)

    store.add_record(past, a, AttendanceStatus.PRESENT)
    store.add_record(past, b, AttendanceStatus.ABSENT)
    store.add_record(future, a, AttendanceStatus.REGISTERED)
    store.add_record(deleted, b, AttendanceStatus.PRESENT)

    summary = container.analytics_service.summary(now=fixed_now)

    assert summary.total_sessions == 2
    assert summary.total_participants == 2
    assert summary.average_attendance == 33
    assert summary.upcoming_sessions == 1
