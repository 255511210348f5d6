from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .rule import read_field
from .time_window import TimeWindow, parse_timestamp


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class ExistingBooking:
    """A booking already held on one space, as supplied by the record store."""

    id: str
    space_id: str
    window: TimeWindow
    event_name: str = ""
    customer_name: Optional[str] = None
    space_name: Optional[str] = None
    venue_id: Optional[str] = None
    venue_name: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_record(cls, record: Any) -> Optional["ExistingBooking"]:
        """Normalize a stored booking record; None when it has no usable window.

        Accepts either explicit ``start``/``end`` timestamps or the
        ``eventDate`` + ``startTime``/``endTime`` shape the booking screens use.
        """
        booking_id = _text(read_field(record, "id"))
        space_id = _text(read_field(record, "space_id", "spaceId"))
        if booking_id is None or space_id is None:
            return None
        window = read_field(record, "window")
        if not isinstance(window, TimeWindow):
            start = parse_timestamp(read_field(record, "start"))
            end = parse_timestamp(read_field(record, "end"))
            if start is not None and end is not None:
                window = TimeWindow(start, end)
            else:
                window = TimeWindow.from_event_times(
                    read_field(record, "event_date", "eventDate"),
                    read_field(record, "start_time", "startTime"),
                    read_field(record, "end_time", "endTime"),
                )
        if window is None:
            return None
        status = read_field(record, "status")
        return cls(
            id=booking_id,
            space_id=space_id,
            window=window,
            event_name=_text(read_field(record, "event_name", "eventName")) or "",
            customer_name=_text(read_field(record, "customer_name", "customerName")),
            space_name=_text(read_field(record, "space_name", "spaceName")),
            venue_id=_text(read_field(record, "venue_id", "venueId")),
            venue_name=_text(read_field(record, "venue_name", "venueName")),
            status=status.value if hasattr(status, "value") else _text(status),
        )
