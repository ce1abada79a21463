"""Booking service - all booking business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal

from django.utils import timezone

from boxoffice.domain import (
    Booking,
    BookingDraft,
    BookingSource,
    BookingStats,
    Money,
    SeatConflict,
    SeatStatus,
    Show,
)
from boxoffice.domain.errors import (
    BookingNotFoundError,
    InvalidInputError,
    SeatConflictError,
    SeatUnavailableError,
)
from boxoffice.services.pricing import PricingResolver
from boxoffice.services.validation import (
    parse_booking_id,
    parse_date,
    parse_enum,
    parse_money,
    parse_seat_ids,
)
from boxoffice.stores.interfaces import (
    BmsBookingStore,
    BookingFilter,
    BookingStore,
    SeatCatalogStore,
    SeatHoldStore,
)

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# Column limits of Booking.price_per_seat and Booking.total_price.
MAX_PRICE_PER_SEAT = Decimal("99999999.99")
MAX_TOTAL_PRICE = Decimal("9999999999.99")


class BookingService:
    """Service for the booking ledger."""

    def __init__(
        self,
        bookings: BookingStore,
        bms: BmsBookingStore,
        pricing: PricingResolver,
        holds: SeatHoldStore | None = None,
        catalog: SeatCatalogStore | None = None,
        default_screen: str = "Screen 1",
    ) -> None:
        self._bookings = bookings
        self._bms = bms
        self._pricing = pricing
        self._holds = holds
        self._catalog = catalog
        self._default_screen = default_screen

    def create_booking(
        self,
        date,
        show,
        movie: str,
        seat_ids,
        class_label: str | None = None,
        price_per_seat=None,
        *,
        screen: str | None = None,
        movie_language: str = "HINDI",
        source=BookingSource.LOCAL,
        customer_name: str = "",
        customer_phone: str = "",
        notes: str = "",
    ) -> Booking:
        """Persist a booking for the given seats.

        When ``class_label`` is omitted it is derived from the seat rows.
        When ``price_per_seat`` is omitted each seat is priced from the
        pricing configuration and the total is their sum.

        Raises:
            InvalidInputError: On an empty or malformed seat list, a negative,
                non-numeric or out-of-range price, or a bad date, show or movie.
            SeatConflictError: If any seat is already booked or BMS-booked
                for the date and show.
            SeatUnavailableError: If any seat is blocked in the catalog.
        """
        seats = parse_seat_ids(seat_ids)
        on = parse_date(date)
        show = parse_enum(Show, show, "show")
        source = parse_enum(BookingSource, source, "source")
        if not movie or not str(movie).strip():
            raise InvalidInputError("movie is required")

        if price_per_seat is None:
            total = Money.zero()
            for seat in seats:
                total = total + self._pricing.price_for_seat(seat).price
            price = Money((total.amount / len(seats)).quantize(CENTS, rounding=ROUND_HALF_UP))
        else:
            price = parse_money(price_per_seat, "pricePerSeat")
            total = price.times(len(seats))
        if price.amount > MAX_PRICE_PER_SEAT:
            raise InvalidInputError(f"pricePerSeat must not exceed {MAX_PRICE_PER_SEAT}")
        if total.amount > MAX_TOTAL_PRICE:
            raise InvalidInputError(f"totalPrice must not exceed {MAX_TOTAL_PRICE}")

        if self._catalog is not None:
            blocked = {
                seat.seat_id
                for seat in self._catalog.list_seats()
                if seat.status == SeatStatus.BLOCKED
            }.intersection(seats)
            if blocked:
                raise SeatUnavailableError([str(s) for s in blocked])

        taken = set(self._bookings.booked_seats(on, show))
        taken |= {b.seat_id for b in self._bms.bms_bookings(on, show)}
        conflicts = taken.intersection(seats)
        if conflicts:
            logger.warning(
                "Rejected booking for %s %s: seats taken %s",
                on, show.value, sorted(str(s) for s in conflicts),
            )
            raise SeatConflictError([str(s) for s in conflicts])

        draft = BookingDraft(
            date=on,
            show=show,
            screen=screen or self._default_screen,
            movie=str(movie).strip(),
            movie_language=movie_language or "HINDI",
            seat_ids=tuple(seats),
            class_label=class_label or self._pricing.class_for_seats(seats),
            price_per_seat=price,
            total_price=total,
            source=source,
            customer_name=customer_name or "",
            customer_phone=customer_phone or "",
            notes=notes or "",
        )
        booking = self._bookings.create_booking(draft)
        if self._holds is not None:
            self._holds.release(list(seats), on, show)
        logger.info(
            "Booking %s created: %s %s, %d seat(s), total %s",
            booking.id, on, show.value, booking.seat_count, booking.total_price,
        )
        return booking

    def get_booking(self, booking_id: str) -> Booking:
        """Return a booking by ID.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
        """
        booking = self._bookings.get_booking(parse_booking_id(booking_id))
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def list_bookings(self, date=None, show=None, source=None, synced=None) -> list[Booking]:
        return self._bookings.list_bookings(self._filter(date, show, source, synced))

    def get_stats(self, date=None, show=None) -> BookingStats:
        filters = self._filter(date, show)
        return self._bookings.booking_stats(filters.date, filters.show)

    def mark_synced(self, booking_id: str, synced: bool = True) -> Booking:
        if not isinstance(synced, bool):
            raise InvalidInputError("synced must be a boolean")
        booking = self._bookings.update_booking(parse_booking_id(booking_id), synced=synced)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def mark_printed(self, booking_id: str) -> Booking:
        booking = self._bookings.update_booking(
            parse_booking_id(booking_id), printed_at=timezone.now()
        )
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def delete_booking(self, booking_id: str) -> None:
        if not self._bookings.delete_booking(parse_booking_id(booking_id)):
            raise BookingNotFoundError(booking_id)
        logger.info("Booking %s deleted", booking_id)

    def delete_bookings(self, date=None, show=None) -> int:
        """Delete all bookings, or those of one date (and optionally show)."""
        if show is not None and date is None:
            raise InvalidInputError("show filter requires a date")
        deleted = self._bookings.delete_bookings(self._filter(date, show))
        logger.info("Deleted %d booking(s)", deleted)
        return deleted

    def find_double_booked_seats(self, date=None, show=None) -> list[SeatConflict]:
        """Return every seat referenced by more than one booking of a show."""
        owners = defaultdict(list)
        for booking in self.list_bookings(date=date, show=show):
            for seat in booking.seat_ids:
                owners[(booking.date, booking.show, seat)].append(booking.id)
        return [
            SeatConflict(date=on, show=show, seat_id=seat, booking_ids=tuple(ids))
            for (on, show, seat), ids in sorted(
                owners.items(), key=lambda item: (item[0][0], item[0][1].value, item[0][2])
            )
            if len(ids) > 1
        ]

    @staticmethod
    def _filter(date=None, show=None, source=None, synced=None) -> BookingFilter:
        return BookingFilter(
            date=parse_date(date) if date not in (None, "") else None,
            show=parse_enum(Show, show, "show") if show not in (None, "") else None,
            source=parse_enum(BookingSource, source, "source") if source not in (None, "") else None,
            synced=synced,
        )
