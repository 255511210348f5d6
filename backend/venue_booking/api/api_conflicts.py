from fastapi import APIRouter
import logging

from .. import schemas
from ..core.config import settings
from ..models.time_window import TimeWindow
from ..services.conflict_detector import ConflictResult, SpaceBookingConflict, detect_many
from ..utils.errors import error_response

router = APIRouter(tags=["conflicts"])
logger = logging.getLogger(__name__)


def _space_conflict_payload(conflict: SpaceBookingConflict) -> dict:
    window = conflict.candidate_window
    return {
        "space_id": conflict.space_id,
        "space_name": conflict.space_name,
        "venue_id": conflict.venue_id,
        "venue_name": conflict.venue_name,
        "conflicts": [
            {
                "booking_id": overlap.booking_id,
                "event_name": overlap.event_name,
                "customer_name": overlap.customer_name,
                "start": overlap.window.start,
                "end": overlap.window.end,
            }
            for overlap in conflict.conflicts
        ],
        "candidate_start": window.start if window else None,
        "candidate_end": window.end if window else None,
    }


def _conflict_payload(result: ConflictResult) -> dict:
    return {
        "has_conflicts": result.has_conflicts,
        "total_conflicts": result.total_conflicts,
        "conflicts": [_space_conflict_payload(c) for c in result.conflicts],
        "report": {
            venue_id: {
                "venue_name": summary.venue_name,
                "spaces": [vars(space) for space in summary.spaces],
                "total_conflicts": summary.total_conflicts,
            }
            for venue_id, summary in result.report.items()
        },
    }


@router.post(
    "/bookings/conflicts",
    response_model=schemas.ConflictResponse,
)
def check_conflicts(body: schemas.ConflictQuery):
    """Return existing bookings that overlap the proposed spaces and times.

    Used as a pre-confirmation warning; a conflict never blocks the caller.
    """
    if (body.start is None) != (body.end is None):
        missing = "end" if body.end is None else "start"
        raise error_response("Incomplete time window", {missing: "required"})

    windows = []
    if body.start is not None and body.end is not None:
        windows.append(TimeWindow(body.start, body.end))
    windows.extend(TimeWindow(w.start, w.end) for w in body.additional_windows)

    result = detect_many(
        body.space_ids,
        windows,
        body.bookings,
        body.exclude_booking_id,
        unknown_venue_label=settings.UNKNOWN_VENUE_LABEL,
    )
    if result.has_conflicts:
        logger.info(
            "Booking conflicts for spaces=%s: %d",
            body.space_ids,
            result.total_conflicts,
        )
    return _conflict_payload(result)
