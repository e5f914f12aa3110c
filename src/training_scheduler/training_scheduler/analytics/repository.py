from __future__ import annotations

from datetime import datetime
from typing import Protocol


class AnalyticsRepository(Protocol):
    """Raw counts over live (not soft-deleted) sessions and their records."""

    def count_sessions(self) -> int:
        raise NotImplementedError

    def count_distinct_participants(self) -> int:
        raise NotImplementedError

    def count_records(self, *, status: str | None = None) -> int:
        raise NotImplementedError

    def count_sessions_starting_after(self, moment: datetime) -> int:
        raise NotImplementedError
