"""Service construction for the HTTP handlers and management commands.

Configuration is read from Django settings here and passed into the
services explicitly.
"""

from decimal import Decimal

from django.conf import settings
from django.core.cache import cache

from boxoffice.domain import Money
from boxoffice.services.booking_service import BookingService
from boxoffice.services.seat_service import SeatService
from boxoffice.services.settings_service import SettingsService
from boxoffice.services.ticket_service import TheaterProfile, TicketService
from boxoffice.stores.cache_store import CacheSeatHoldStore
from boxoffice.stores.django_store import (
    DjangoBmsBookingStore,
    DjangoBookingStore,
    DjangoSeatCatalogStore,
    DjangoSettingsStore,
    DjangoTicketCounterStore,
)


def _config() -> dict:
    return settings.BOXOFFICE


def seat_holds() -> CacheSeatHoldStore:
    return CacheSeatHoldStore(cache, _config()["SEAT_HOLD_TTL"])


def settings_service() -> SettingsService:
    return SettingsService(DjangoSettingsStore(), _config()["DEFAULT_PRICES"])


def booking_service() -> BookingService:
    return BookingService(
        bookings=DjangoBookingStore(),
        bms=DjangoBmsBookingStore(),
        pricing=settings_service().pricing_resolver(),
        holds=seat_holds(),
        catalog=DjangoSeatCatalogStore(),
        default_screen=_config()["SCREEN"],
    )


def seat_service() -> SeatService:
    return SeatService(
        bookings=DjangoBookingStore(),
        bms=DjangoBmsBookingStore(),
        catalog=DjangoSeatCatalogStore(),
        holds=seat_holds(),
    )


def ticket_service() -> TicketService:
    config = _config()
    profile = TheaterProfile(
        name=config["THEATER_NAME"],
        location=config["THEATER_LOCATION"],
        gstin=config["THEATER_GSTIN"],
        cgst_rate=Decimal(str(config["CGST_RATE"])),
        sgst_rate=Decimal(str(config["SGST_RATE"])),
        maintenance_charge=Money.of(config["MAINTENANCE_CHARGE"]),
    )
    counter = DjangoTicketCounterStore(
        prefix=config["TICKET_ID_PREFIX"], padding=config["TICKET_ID_PADDING"]
    )
    return TicketService(counter, profile)
