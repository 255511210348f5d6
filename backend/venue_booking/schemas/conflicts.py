from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from .base import CamelModel, IdList, IdText


class ExistingBookingIn(CamelModel):
    """An existing booking on one space.

    Either ``start``/``end`` or ``eventDate`` + ``startTime``/``endTime``
    ("HH:MM") must be present; bookings with neither are skipped.
    """

    id: IdText
    space_id: Optional[IdText] = None
    space_name: Optional[str] = None
    venue_id: Optional[IdText] = None
    venue_name: Optional[str] = None
    event_name: Optional[str] = None
    customer_name: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    event_date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    status: Optional[str] = None


class WindowIn(CamelModel):
    start: datetime
    end: datetime


class ConflictQuery(CamelModel):
    space_ids: IdList = Field(default_factory=list)
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    # Extra dates of a multi-date booking, checked against the same spaces.
    additional_windows: List[WindowIn] = Field(default_factory=list)
    exclude_booking_id: Optional[IdText] = None
    bookings: List[ExistingBookingIn] = Field(default_factory=list)


class BookingOverlapOut(CamelModel):
    booking_id: str
    event_name: str
    customer_name: str
    start: datetime
    end: datetime


class SpaceConflictOut(CamelModel):
    space_id: str
    space_name: Optional[str] = None
    venue_id: Optional[str] = None
    venue_name: Optional[str] = None
    conflicts: List[BookingOverlapOut]
    candidate_start: Optional[datetime] = None
    candidate_end: Optional[datetime] = None


class SpaceConflictCountOut(CamelModel):
    space_id: str
    space_name: Optional[str] = None
    conflict_count: int


class VenueConflictSummaryOut(CamelModel):
    venue_name: str
    spaces: List[SpaceConflictCountOut]
    total_conflicts: int


class ConflictResponse(CamelModel):
    has_conflicts: bool
    total_conflicts: int
    conflicts: List[SpaceConflictOut]
    report: Dict[str, VenueConflictSummaryOut]
