from boxoffice.domain.models import (
    BmsBooking,
    Booking,
    BookingDraft,
    BookingSource,
    BookingStats,
    ClassStats,
    PricingConfig,
    Seat,
    SeatConflict,
    SeatStatus,
    SeatStatusSnapshot,
    Show,
    ShowTime,
    TheaterSettings,
    TicketNumber,
)
from boxoffice.domain.value_objects import BookingId, Money, SeatId

__all__ = [
    "Booking",
    "BookingDraft",
    "BookingSource",
    "BookingStats",
    "BmsBooking",
    "ClassStats",
    "PricingConfig",
    "Seat",
    "SeatConflict",
    "SeatStatus",
    "SeatStatusSnapshot",
    "Show",
    "ShowTime",
    "TheaterSettings",
    "TicketNumber",
    "BookingId",
    "SeatId",
    "Money",
]
