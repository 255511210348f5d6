import enum


class BookingStatus(str, enum.Enum):
    """Booking lifecycle states as stored by the venue record store."""
    INQUIRY = "inquiry"
    PENDING = "pending"
    TENTATIVE = "tentative"
    CONFIRMED_UNPAID = "confirmed_unpaid"
    CONFIRMED_DEPOSIT_PAID = "confirmed_deposit_paid"
    CONFIRMED_FULLY_PAID = "confirmed_fully_paid"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    CANCELLED_REFUNDED = "cancelled_refunded"


# Bookings in these states have released their space.
RELEASED_STATUSES = frozenset({BookingStatus.CANCELLED.value, BookingStatus.CANCELLED_REFUNDED.value})


def holds_space(status) -> bool:
    """Return True unless ``status`` is one of the cancelled states.

    Unknown or missing statuses hold the space so a conflict is never hidden.
    """
    if status is None:
        return True
    value = status.value if isinstance(status, BookingStatus) else str(status).strip().lower()
    return value not in RELEASED_STATUSES
