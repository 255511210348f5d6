"""Detect existing bookings that overlap a proposed booking.

The booking screens call this on every change to the selected spaces or the
proposed times and show the result as a warning. Nothing here blocks a
booking: malformed input simply yields no conflicts.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..models.booking import ExistingBooking
from ..models.booking_status import holds_space
from ..models.time_window import TimeWindow

logger = logging.getLogger(__name__)

UNKNOWN_VENUE_ID = "unknown"
UNKNOWN_VENUE_NAME = "Unknown venue"
UNKNOWN_CUSTOMER = "Unknown Customer"


@dataclass(frozen=True)
class BookingOverlap:
    booking_id: str
    event_name: str
    customer_name: str
    window: TimeWindow


@dataclass(frozen=True)
class SpaceBookingConflict:
    space_id: str
    space_name: Optional[str]
    venue_id: Optional[str]
    venue_name: Optional[str]
    conflicts: List[BookingOverlap]
    candidate_window: Optional[TimeWindow] = None


@dataclass(frozen=True)
class SpaceConflictCount:
    space_id: str
    space_name: Optional[str]
    conflict_count: int


@dataclass(frozen=True)
class VenueConflictSummary:
    venue_name: str
    spaces: List[SpaceConflictCount]
    total_conflicts: int


@dataclass(frozen=True)
class ConflictResult:
    conflicts: List[SpaceBookingConflict] = field(default_factory=list)
    report: Dict[str, VenueConflictSummary] = field(default_factory=dict)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    @property
    def total_conflicts(self) -> int:
        return sum(summary.total_conflicts for summary in self.report.values())


def _candidate_spaces(space_ids: Optional[Iterable[Any]]) -> List[str]:
    seen: "OrderedDict[str, None]" = OrderedDict()
    for space_id in space_ids or ():
        if space_id is None or str(space_id).strip() == "":
            continue
        seen.setdefault(str(space_id), None)
    return list(seen)


def _index_by_space(
    bookings: Optional[Iterable[Any]],
    exclude_booking_id: Optional[Any],
) -> Dict[str, List[ExistingBooking]]:
    excluded = str(exclude_booking_id) if exclude_booking_id is not None else None
    by_space: Dict[str, List[ExistingBooking]] = {}
    for record in bookings or ():
        booking = record if isinstance(record, ExistingBooking) else ExistingBooking.from_record(record)
        if booking is None:
            logger.debug("Skipping booking record without space or window: %r", record)
            continue
        if booking.id == excluded or not holds_space(booking.status):
            continue
        if not booking.window.is_valid:
            continue
        by_space.setdefault(booking.space_id, []).append(booking)
    return by_space


def _first(bookings: Sequence[ExistingBooking], attr: str) -> Optional[str]:
    for booking in bookings:
        value = getattr(booking, attr)
        if value:
            return value
    return None


def _space_conflicts(
    space_ids: List[str],
    window: TimeWindow,
    by_space: Dict[str, List[ExistingBooking]],
) -> List[SpaceBookingConflict]:
    results: List[SpaceBookingConflict] = []
    for space_id in space_ids:
        overlapping = [b for b in by_space.get(space_id, ()) if b.window.overlaps(window)]
        if not overlapping:
            continue
        results.append(
            SpaceBookingConflict(
                space_id=space_id,
                space_name=_first(overlapping, "space_name"),
                venue_id=_first(overlapping, "venue_id"),
                venue_name=_first(overlapping, "venue_name"),
                conflicts=[
                    BookingOverlap(
                        booking_id=b.id,
                        event_name=b.event_name,
                        customer_name=b.customer_name or UNKNOWN_CUSTOMER,
                        window=b.window,
                    )
                    for b in overlapping
                ],
                candidate_window=window,
            )
        )
    return results


def build_report(
    conflicts: Iterable[SpaceBookingConflict],
    unknown_venue_label: str = UNKNOWN_VENUE_NAME,
) -> Dict[str, VenueConflictSummary]:
    """Group per-space conflicts by venue.

    Conflicts without a venue id land in the ``"unknown"`` bucket. A space that
    appears more than once (multi-date checks) is listed once with its counts
    summed.
    """
    grouped: "OrderedDict[str, dict]" = OrderedDict()
    for conflict in conflicts:
        venue_id = conflict.venue_id or UNKNOWN_VENUE_ID
        bucket = grouped.setdefault(
            venue_id,
            {"venue_name": None, "spaces": OrderedDict(), "total": 0},
        )
        if bucket["venue_name"] is None and conflict.venue_id:
            bucket["venue_name"] = conflict.venue_name
        space = bucket["spaces"].setdefault(conflict.space_id, [conflict.space_name, 0])
        space[0] = space[0] or conflict.space_name
        space[1] += len(conflict.conflicts)
        bucket["total"] += len(conflict.conflicts)

    report: Dict[str, VenueConflictSummary] = {}
    for venue_id, bucket in grouped.items():
        if venue_id == UNKNOWN_VENUE_ID:
            venue_name = bucket["venue_name"] or unknown_venue_label
        else:
            venue_name = bucket["venue_name"] or venue_id
        report[venue_id] = VenueConflictSummary(
            venue_name=venue_name,
            spaces=[
                SpaceConflictCount(space_id=space_id, space_name=name, conflict_count=count)
                for space_id, (name, count) in bucket["spaces"].items()
            ],
            total_conflicts=bucket["total"],
        )
    return report


def detect(
    candidate_space_ids: Optional[Iterable[Any]],
    candidate_window: Optional[TimeWindow],
    existing_bookings: Optional[Iterable[Any]],
    exclude_booking_id: Optional[Any] = None,
    *,
    unknown_venue_label: str = UNKNOWN_VENUE_NAME,
) -> ConflictResult:
    """Return the existing bookings that overlap ``candidate_window``.

    Only spaces with at least one overlap appear in the result, in the order
    they were requested. Pass ``exclude_booking_id`` when re-checking a
    booking that is being edited so it does not conflict with itself.
    Cancelled bookings never conflict.
    """
    return detect_many(
        candidate_space_ids,
        [candidate_window],
        existing_bookings,
        exclude_booking_id,
        unknown_venue_label=unknown_venue_label,
    )


def detect_many(
    candidate_space_ids: Optional[Iterable[Any]],
    candidate_windows: Optional[Iterable[Optional[TimeWindow]]],
    existing_bookings: Optional[Iterable[Any]],
    exclude_booking_id: Optional[Any] = None,
    *,
    unknown_venue_label: str = UNKNOWN_VENUE_NAME,
) -> ConflictResult:
    """Check every window of a multi-date booking against the same spaces."""
    space_ids = _candidate_spaces(candidate_space_ids)
    windows = [w for w in (candidate_windows or ()) if w is not None and w.is_valid]
    if not space_ids or not windows:
        return ConflictResult()

    by_space = _index_by_space(existing_bookings, exclude_booking_id)
    conflicts: List[SpaceBookingConflict] = []
    for window in windows:
        conflicts.extend(_space_conflicts(space_ids, window, by_space))
    if conflicts:
        logger.debug(
            "Found %d conflicting space(s) for spaces=%s",
            len(conflicts),
            space_ids,
        )
    return ConflictResult(conflicts=conflicts, report=build_report(conflicts, unknown_venue_label))
