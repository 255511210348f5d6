from .booking_status import BookingStatus, RELEASED_STATUSES, holds_space
from .rule import CalculationMethod, Rule, RuleCatalog, RuleKind
from .time_window import TimeWindow
from .booking import ExistingBooking

__all__ = [
    "BookingStatus",
    "RELEASED_STATUSES",
    "holds_space",
    "CalculationMethod",
    "Rule",
    "RuleCatalog",
    "RuleKind",
    "TimeWindow",
    "ExistingBooking",
]
