from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Optional

logger = logging.getLogger(__name__)


def _as_naive_utc(value: datetime) -> datetime:
    # Aware and naive datetimes cannot be compared; store everything naive.
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_clock(value: Any) -> Optional[time]:
    """Parse ``"HH:MM"`` (or ``"HH:MM:SS"``) wall-clock text, else None."""
    if isinstance(value, time):
        return value
    if not isinstance(value, str):
        return None
    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        return None
    try:
        numbers = [int(p) for p in parts]
        return time(*numbers)
    except ValueError:
        return None


def parse_event_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class TimeWindow:
    """Half-open ``[start, end)`` interval on the timeline."""

    start: datetime
    end: datetime

    def __post_init__(self):
        object.__setattr__(self, "start", _as_naive_utc(self.start))
        object.__setattr__(self, "end", _as_naive_utc(self.end))

    @property
    def is_valid(self) -> bool:
        return self.start < self.end

    def overlaps(self, other: "TimeWindow") -> bool:
        # Windows that only touch at an endpoint do not overlap.
        return self.start < other.end and other.start < self.end

    @classmethod
    def from_event_times(cls, event_date: Any, start_time: Any, end_time: Any) -> Optional["TimeWindow"]:
        """Build a window from a booking's date and ``"HH:MM"`` times.

        Returns None when any part cannot be parsed. Both times fall on the
        same calendar date; cross-midnight events are the caller's concern.
        """
        day = parse_event_date(event_date)
        start = parse_clock(start_time)
        end = parse_clock(end_time)
        if day is None or start is None or end is None:
            logger.debug("Unparseable event times: %r %r-%r", event_date, start_time, end_time)
            return None
        return cls(datetime.combine(day, start), datetime.combine(day, end))
