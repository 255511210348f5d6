from .price_quote import LineItem, PriceBreakdown, compute
from .conflict_detector import (
    BookingOverlap,
    ConflictResult,
    SpaceBookingConflict,
    SpaceConflictCount,
    VenueConflictSummary,
    build_report,
    detect,
    detect_many,
)
from .proposal_pricing import PricingModel, DepositType, ProposalLine, ProposalQuote, price_proposal

__all__ = [
    "LineItem",
    "PriceBreakdown",
    "compute",
    "BookingOverlap",
    "ConflictResult",
    "SpaceBookingConflict",
    "SpaceConflictCount",
    "VenueConflictSummary",
    "build_report",
    "detect",
    "detect_many",
    "PricingModel",
    "DepositType",
    "ProposalLine",
    "ProposalQuote",
    "price_proposal",
]
