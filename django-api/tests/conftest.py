"""Pytest configuration and shared fixtures."""

import uuid
from dataclasses import replace
from decimal import Decimal

import pytest
from django.core.cache import cache as django_cache
from django.utils import timezone
from rest_framework.test import APIClient

from boxoffice.domain import (
    BmsBooking,
    Booking,
    BookingDraft,
    BookingId,
    BookingStats,
    ClassStats,
    Money,
    PricingConfig,
    Seat,
    SeatId,
    SeatStatus,
    TicketNumber,
)
from boxoffice.domain.errors import SeatConflictError
from boxoffice.services.booking_service import BookingService
from boxoffice.services.pricing import PricingResolver
from boxoffice.services.seat_service import SeatService
from boxoffice.services.settings_service import SettingsService
from boxoffice.services.ticket_service import TheaterProfile, TicketService
from boxoffice.stores.cache_store import CacheSeatHoldStore
from boxoffice.stores.interfaces import (
    BmsBookingStore,
    BookingFilter,
    BookingStore,
    SeatCatalogStore,
    SettingsStore,
    TicketCounterStore,
)


class InMemoryBookingStore(BookingStore):
    def __init__(self):
        self.rows: dict[BookingId, Booking] = {}

    def create_booking(self, draft: BookingDraft) -> Booking:
        taken = set(self.booked_seats(draft.date, draft.show)) & set(draft.seat_ids)
        if taken:
            raise SeatConflictError([str(s) for s in taken])
        booking = Booking(
            id=BookingId(uuid.uuid4()),
            date=draft.date,
            show=draft.show,
            screen=draft.screen,
            movie=draft.movie,
            movie_language=draft.movie_language,
            seat_ids=draft.seat_ids,
            class_label=draft.class_label,
            price_per_seat=draft.price_per_seat,
            total_price=draft.total_price,
            source=draft.source,
            synced=False,
            booked_at=timezone.now(),
            customer_name=draft.customer_name,
            customer_phone=draft.customer_phone,
            notes=draft.notes,
            **draft.income_split(),
        )
        self.rows[booking.id] = booking
        return booking

    def add(self, booking: Booking) -> None:
        """Insert without conflict checks, as legacy data might contain."""
        self.rows[booking.id] = booking

    def _matching(self, filters: BookingFilter) -> list[Booking]:
        return [
            b
            for b in self.rows.values()
            if (filters.date is None or b.date == filters.date)
            and (filters.show is None or b.show == filters.show)
            and (filters.source is None or b.source == filters.source)
            and (filters.synced is None or b.synced == filters.synced)
        ]

    def get_booking(self, booking_id):
        return self.rows.get(booking_id)

    def list_bookings(self, filters):
        return sorted(self._matching(filters), key=lambda b: b.booked_at, reverse=True)

    def booked_seats(self, on, show):
        return [s for b in self._matching(BookingFilter(date=on, show=show)) for s in b.seat_ids]

    def booking_stats(self, on, show):
        matching = self._matching(BookingFilter(date=on, show=show))
        by_class: dict[str, list[Booking]] = {}
        for b in matching:
            by_class.setdefault(b.class_label, []).append(b)
        total = Money.zero()
        for b in matching:
            total = total + b.total_price
        return BookingStats(
            total_bookings=len(matching),
            total_revenue=total,
            by_class=tuple(
                ClassStats(label, len(items), sum((b.total_price for b in items), Money.zero()))
                for label, items in sorted(by_class.items())
            ),
        )

    def update_booking(self, booking_id, **changes):
        booking = self.rows.get(booking_id)
        if booking is None:
            return None
        self.rows[booking_id] = replace(booking, **changes)
        return self.rows[booking_id]

    def delete_booking(self, booking_id):
        return self.rows.pop(booking_id, None) is not None

    def delete_bookings(self, filters):
        matching = self._matching(filters)
        for b in matching:
            del self.rows[b.id]
        return len(matching)


class InMemoryBmsStore(BmsBookingStore):
    def __init__(self):
        self.rows: dict[tuple, BmsBooking] = {}

    def bms_bookings(self, on, show):
        return sorted(
            (b for (s, d, sh), b in self.rows.items() if d == on and sh == show),
            key=lambda b: b.seat_id,
        )

    def mark_bms_booked(self, seats, on, show):
        saved = []
        for seat, label in seats.items():
            row = BmsBooking(seat_id=seat, date=on, show=show, class_label=label, created_at=timezone.now())
            self.rows[(seat, on, show)] = row
            saved.append(row)
        return saved

    def release_bms(self, seat_ids, on, show):
        released = 0
        for seat in seat_ids:
            if self.rows.pop((seat, on, show), None) is not None:
                released += 1
        return released


class InMemoryCatalog(SeatCatalogStore):
    def __init__(self, seats):
        self.seats = list(seats)

    def list_seats(self):
        return list(self.seats)


class InMemorySettingsStore(SettingsStore):
    def __init__(self):
        self.documents = {}

    def load(self, key):
        return self.documents.get(key)

    def save(self, key, value):
        self.documents[key] = value


class InMemoryTicketCounter(TicketCounterStore):
    def __init__(self):
        self.values = {}

    def current(self, name):
        return TicketNumber(self.values.get(name, 0), "TKT", 6)

    def advance(self, name):
        self.values[name] = self.values.get(name, 0) + 1
        return self.current(name)

    def reset(self, name, value):
        self.values[name] = value
        return self.current(name)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    django_cache.clear()
    yield
    django_cache.clear()


@pytest.fixture
def pricing() -> PricingResolver:
    return PricingResolver(
        PricingConfig(
            prices={
                "BOX": Money.of(150),
                "STAR CLASS": Money.of(150),
                "CLASSIC": Money.of(120),
                "FIRST CLASS": Money.of(70),
                "SECOND CLASS": Money.of(50),
            }
        )
    )


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def bms_store() -> InMemoryBmsStore:
    return InMemoryBmsStore()


@pytest.fixture
def hold_store() -> CacheSeatHoldStore:
    return CacheSeatHoldStore(django_cache, ttl_seconds=60)


@pytest.fixture
def catalog() -> InMemoryCatalog:
    seats = [
        Seat(SeatId("CB-A", n), "CLASSIC") for n in range(1, 6)
    ]
    seats.append(Seat(SeatId("CB-B", 1), "CLASSIC", SeatStatus.BLOCKED))
    return InMemoryCatalog(seats)


@pytest.fixture
def booking_service(booking_store, bms_store, pricing, hold_store, catalog) -> BookingService:
    return BookingService(booking_store, bms_store, pricing, holds=hold_store, catalog=catalog)


@pytest.fixture
def seat_service(booking_store, bms_store, catalog, hold_store) -> SeatService:
    return SeatService(booking_store, bms_store, catalog, hold_store)


@pytest.fixture
def settings_store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def settings_service(settings_store) -> SettingsService:
    return SettingsService(settings_store, {"CLASSIC": 120, "BOX": "150.00"})


@pytest.fixture
def theater_profile() -> TheaterProfile:
    return TheaterProfile(
        name="Test Theater",
        location="Main Road",
        gstin="29ABCDE1234F1Z5",
        cgst_rate=Decimal("0.09"),
        sgst_rate=Decimal("0.09"),
        maintenance_charge=Money.of("2.00"),
    )


@pytest.fixture
def ticket_service(theater_profile) -> TicketService:
    return TicketService(InMemoryTicketCounter(), theater_profile)
