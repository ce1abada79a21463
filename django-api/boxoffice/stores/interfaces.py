"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

import datetime
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

from boxoffice.domain import (
    BmsBooking,
    Booking,
    BookingDraft,
    BookingId,
    BookingSource,
    BookingStats,
    Seat,
    SeatId,
    Show,
    TicketNumber,
)


@dataclass(frozen=True)
class BookingFilter:
    date: datetime.date | None = None
    show: Show | None = None
    source: BookingSource | None = None
    synced: bool | None = None


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def create_booking(self, draft: BookingDraft) -> Booking:
        """Persist a booking.

        Raises:
            SeatConflictError: If a seat is already booked for the date and show.
        """
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_bookings(self, filters: BookingFilter) -> list[Booking]:
        """Return matching bookings ordered by booked_at descending."""
        ...

    @abstractmethod
    def booked_seats(self, on: date, show: Show) -> list[SeatId]:
        """Return every seat referenced by a booking for the date and show."""
        ...

    @abstractmethod
    def booking_stats(self, on: date | None, show: Show | None) -> BookingStats:
        ...

    @abstractmethod
    def update_booking(self, booking_id: BookingId, **changes) -> Booking | None:
        """Update ``synced`` and/or ``printed_at``. Returns None if not found."""
        ...

    @abstractmethod
    def delete_booking(self, booking_id: BookingId) -> bool:
        """Delete a booking. Returns False if it did not exist."""
        ...

    @abstractmethod
    def delete_bookings(self, filters: BookingFilter) -> int:
        """Delete every matching booking and return how many were removed."""
        ...


class BmsBookingStore(ABC):
    """Interface for BMS channel seat persistence."""

    @abstractmethod
    def bms_bookings(self, on: date, show: Show) -> list[BmsBooking]:
        ...

    @abstractmethod
    def mark_bms_booked(
        self, seats: dict[SeatId, str], on: date, show: Show
    ) -> list[BmsBooking]:
        """Upsert BMS rows for the seats (seat id -> class label)."""
        ...

    @abstractmethod
    def release_bms(self, seat_ids: list[SeatId], on: date, show: Show) -> int:
        """Remove BMS rows and return how many were removed."""
        ...


class SeatCatalogStore(ABC):
    """Interface for the static seat catalog."""

    @abstractmethod
    def list_seats(self) -> list[Seat]:
        ...


class SeatHoldStore(ABC):
    """Interface for short-lived seat selections made by terminals."""

    @abstractmethod
    def holds(self, on: date, show: Show) -> dict[SeatId, str]:
        """Return seat id -> terminal id for current holds."""
        ...

    @abstractmethod
    def hold(self, seat_ids: list[SeatId], on: date, show: Show, terminal_id: str) -> None:
        ...

    @abstractmethod
    def release(self, seat_ids: list[SeatId], on: date, show: Show) -> None:
        ...


class SettingsStore(ABC):
    """Interface for operator-edited settings documents."""

    @abstractmethod
    def load(self, key: str) -> dict | None:
        ...

    @abstractmethod
    def save(self, key: str, value: dict) -> None:
        ...


class TicketCounterStore(ABC):
    """Interface for the printed-ticket sequence."""

    @abstractmethod
    def current(self, name: str) -> TicketNumber:
        ...

    @abstractmethod
    def advance(self, name: str) -> TicketNumber:
        """Atomically increment and return the new number."""
        ...

    @abstractmethod
    def reset(self, name: str, value: int) -> TicketNumber:
        ...
