from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus
from .repository import AnalyticsRepository


@dataclass(frozen=True)
class TrainingSummary:
    total_sessions: int
    total_participants: int
    average_attendance: int
    upcoming_sessions: int


def attendance_percentage(present: int, total: int) -> int:
    """Share of present records as a whole percent, half rounded up; 0 for no records."""
    if total <= 0:
        return 0
    pct = Decimal(present) * 100 / Decimal(total)
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class AnalyticsService:
    """Read-only rollups; every value is recomputed from the store on each call."""

    def __init__(self, analytics: AnalyticsRepository):
        self._analytics = analytics

    def summary(self, *, now: datetime | None = None) -> TrainingSummary:
        now = now or now_local()
        return TrainingSummary(
            total_sessions=self._analytics.count_sessions(),
            total_participants=self._analytics.count_distinct_participants(),
            average_attendance=attendance_percentage(
                self._analytics.count_records(status=AttendanceStatus.PRESENT.value),
                self._analytics.count_records(),
            ),
            upcoming_sessions=self._analytics.count_sessions_starting_after(now),
        )
