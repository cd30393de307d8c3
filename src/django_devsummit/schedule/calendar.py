"""Day grouping for the schedule dataset.

Sessions carry ISO 8601 ``start``/``end`` timestamps in the venue's local
offset.  :func:`days` groups them by their local date so templates can render
one block per conference day.
"""

import itertools
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from django_devsummit.schedule.loader import Schedule


@dataclass(frozen=True, slots=True)
class DaySession:
    """A session placed on the calendar."""

    id: str
    start: datetime
    end: datetime | None
    record: Mapping[str, Any]

    @property
    def name(self) -> str:
        return self.record.get("name") or ""

    @property
    def time_label(self) -> str:
        return self.record.get("time_label") or f"{self.start:%H:%M}"


@dataclass(frozen=True, slots=True)
class Day:
    """One conference day and its sessions ordered by start time."""

    date: date
    sessions: tuple[DaySession, ...]

    @property
    def label(self) -> str:
        """Human-readable date, e.g. ``Monday 11 November``."""
        return f"{self.date:%A} {self.date.day} {self.date:%B}"

    @property
    def iso(self) -> str:
        return self.date.isoformat()


def parse_datetime(value: object) -> datetime | None:
    """Parse an ISO 8601 datetime string, returning ``None`` on failure."""
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def days(schedule: Schedule) -> tuple[Day, ...]:
    """Group the scheduled sessions by date.

    Sessions without a parseable ``start`` and sessions whose id starts with
    ``_`` are left off the calendar.

    Args:
        schedule: The loaded schedule dataset.

    Returns:
        Days in chronological order, each with its sessions ordered by start
        time and then id.
    """
    placed: list[DaySession] = []
    for session_id, record in schedule.sessions.items():
        if session_id.startswith("_"):
            continue
        start = parse_datetime(record.get("start"))
        if start is None:
            continue
        placed.append(DaySession(id=session_id, start=start, end=parse_datetime(record.get("end")), record=record))

    # Local wall-clock order; offsets may differ or be missing.
    placed.sort(key=lambda s: (s.start.replace(tzinfo=None), s.id))
    return tuple(
        Day(date=day, sessions=tuple(day_sessions))
        for day, day_sessions in itertools.groupby(placed, key=lambda s: s.start.date())
    )
