from .pricing import (
    RuleIn,
    PriceableItemIn,
    PriceBreakdownRequest,
    LineItemOut,
    PriceBreakdownOut,
    ProposalLineIn,
    DepositIn,
    ProposalQuoteRequest,
    ProposalLineOut,
    ProposalQuoteOut,
)
from .conflicts import (
    ExistingBookingIn,
    WindowIn,
    ConflictQuery,
    BookingOverlapOut,
    SpaceConflictOut,
    SpaceConflictCountOut,
    VenueConflictSummaryOut,
    ConflictResponse,
)
