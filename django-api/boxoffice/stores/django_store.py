"""Django ORM implementations of the boxoffice stores.

Every method returns domain models. Storage failures are translated at this
boundary: integrity violations become ConflictError, anything else raised by
the database becomes StorageError.
"""

import functools
import logging
from datetime import date
from decimal import Decimal

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count, F, Sum

from boxoffice import models
from boxoffice.domain import (
    BmsBooking,
    Booking,
    BookingDraft,
    BookingId,
    BookingSource,
    BookingStats,
    ClassStats,
    Money,
    Seat,
    SeatId,
    SeatStatus,
    Show,
    TicketNumber,
)
from boxoffice.domain.errors import ConflictError, DomainError, SeatConflictError, StorageError
from boxoffice.stores.interfaces import (
    BmsBookingStore,
    BookingFilter,
    BookingStore,
    SeatCatalogStore,
    SettingsStore,
    TicketCounterStore,
)

logger = logging.getLogger(__name__)


def translate_storage_errors(operation: str):
    """Map database exceptions raised by the wrapped method to domain errors."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DomainError:
                raise
            except IntegrityError as exc:
                logger.warning("Integrity error during %s: %s", operation, exc)
                raise ConflictError() from exc
            except DatabaseError as exc:
                logger.error("Database error during %s", operation, exc_info=True)
                raise StorageError(operation) from exc

        return wrapper

    return decorator


def _to_booking(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        date=row.date,
        show=Show(row.show),
        screen=row.screen,
        movie=row.movie,
        movie_language=row.movie_language,
        seat_ids=tuple(SeatId.from_string(s) for s in row.booked_seats),
        class_label=row.class_label,
        price_per_seat=Money(row.price_per_seat),
        total_price=Money(row.total_price),
        source=BookingSource(row.source),
        synced=row.synced,
        booked_at=row.booked_at,
        printed_at=row.printed_at,
        customer_name=row.customer_name,
        customer_phone=row.customer_phone,
        notes=row.notes,
        total_income=Money(row.total_income),
        local_income=Money(row.local_income),
        bms_income=Money(row.bms_income),
        vip_income=Money(row.vip_income),
    )


def _filtered(filters: BookingFilter):
    queryset = models.Booking.objects.all()
    if filters.date is not None:
        queryset = queryset.filter(date=filters.date)
    if filters.show is not None:
        queryset = queryset.filter(show=filters.show.value)
    if filters.source is not None:
        queryset = queryset.filter(source=filters.source.value)
    if filters.synced is not None:
        queryset = queryset.filter(synced=filters.synced)
    return queryset


class DjangoBookingStore(BookingStore):
    """SQL-backed booking ledger using Django ORM."""

    @translate_storage_errors("create booking")
    def create_booking(self, draft: BookingDraft) -> Booking:
        seat_ids = [str(seat) for seat in draft.seat_ids]
        try:
            with transaction.atomic():
                row = models.Booking.objects.create(
                    date=draft.date,
                    show=draft.show.value,
                    screen=draft.screen,
                    movie=draft.movie,
                    movie_language=draft.movie_language,
                    booked_seats=seat_ids,
                    seat_count=len(seat_ids),
                    class_label=draft.class_label,
                    price_per_seat=draft.price_per_seat.amount,
                    total_price=draft.total_price.amount,
                    source=draft.source.value,
                    customer_name=draft.customer_name,
                    customer_phone=draft.customer_phone,
                    notes=draft.notes,
                    **{name: money.amount for name, money in draft.income_split().items()},
                )
                models.BookedSeat.objects.bulk_create(
                    [
                        models.BookedSeat(
                            booking=row,
                            seat_id=seat_id,
                            date=draft.date,
                            show=draft.show.value,
                        )
                        for seat_id in seat_ids
                    ]
                )
        except IntegrityError:
            taken = models.BookedSeat.objects.filter(
                date=draft.date, show=draft.show.value, seat_id__in=seat_ids
            ).values_list("seat_id", flat=True)
            raise SeatConflictError(list(taken)) from None
        return _to_booking(row)

    @translate_storage_errors("get booking")
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        row = models.Booking.objects.filter(id=booking_id.value).first()
        return _to_booking(row) if row else None

    @translate_storage_errors("list bookings")
    def list_bookings(self, filters: BookingFilter) -> list[Booking]:
        return [_to_booking(row) for row in _filtered(filters).order_by("-booked_at")]

    @translate_storage_errors("load booked seats")
    def booked_seats(self, on: date, show: Show) -> list[SeatId]:
        seat_ids = models.BookedSeat.objects.filter(date=on, show=show.value).values_list(
            "seat_id", flat=True
        )
        return [SeatId.from_string(s) for s in seat_ids]

    @translate_storage_errors("booking stats")
    def booking_stats(self, on: date | None, show: Show | None) -> BookingStats:
        queryset = _filtered(BookingFilter(date=on, show=show))
        totals = queryset.aggregate(count=Count("id"), revenue=Sum("total_price"))
        by_class = (
            queryset.values("class_label")
            .annotate(count=Count("id"), revenue=Sum("total_price"))
            .order_by("class_label")
        )
        return BookingStats(
            total_bookings=totals["count"],
            total_revenue=Money(totals["revenue"] or Decimal("0")),
            by_class=tuple(
                ClassStats(
                    class_label=item["class_label"],
                    count=item["count"],
                    revenue=Money(item["revenue"] or Decimal("0")),
                )
                for item in by_class
            ),
        )

    @translate_storage_errors("update booking")
    def update_booking(self, booking_id: BookingId, **changes) -> Booking | None:
        allowed = {"synced", "printed_at"}
        unknown = set(changes) - allowed
        if unknown:
            raise TypeError(f"Booking fields are immutable: {', '.join(sorted(unknown))}")
        row = models.Booking.objects.filter(id=booking_id.value).first()
        if row is None:
            return None
        for name, value in changes.items():
            setattr(row, name, value)
        row.save(update_fields=[*changes, "updated_at"])
        return _to_booking(row)

    @translate_storage_errors("delete booking")
    def delete_booking(self, booking_id: BookingId) -> bool:
        row = models.Booking.objects.filter(id=booking_id.value).first()
        if row is None:
            return False
        # Instance delete so post_delete fires for the audit log.
        row.delete()
        return True

    @translate_storage_errors("delete bookings")
    def delete_bookings(self, filters: BookingFilter) -> int:
        deleted = 0
        with transaction.atomic():
            for row in _filtered(filters):
                row.delete()
                deleted += 1
        return deleted


class DjangoBmsBookingStore(BmsBookingStore):
    """SQL-backed BMS seat records."""

    @staticmethod
    def _to_domain(row: models.BmsBooking) -> BmsBooking:
        return BmsBooking(
            seat_id=SeatId.from_string(row.seat_id),
            date=row.date,
            show=Show(row.show),
            class_label=row.class_label,
            created_at=row.created_at,
            status=SeatStatus(row.status),
        )

    @translate_storage_errors("load BMS seats")
    def bms_bookings(self, on: date, show: Show) -> list[BmsBooking]:
        rows = models.BmsBooking.objects.filter(
            date=on, show=show.value, status=SeatStatus.BMS_BOOKED.value
        ).order_by("seat_id")
        return [self._to_domain(row) for row in rows]

    @translate_storage_errors("save BMS seats")
    def mark_bms_booked(
        self, seats: dict[SeatId, str], on: date, show: Show
    ) -> list[BmsBooking]:
        saved = []
        with transaction.atomic():
            for seat_id, class_label in seats.items():
                row, _ = models.BmsBooking.objects.update_or_create(
                    seat_id=str(seat_id),
                    date=on,
                    show=show.value,
                    defaults={
                        "class_label": class_label,
                        "status": SeatStatus.BMS_BOOKED.value,
                    },
                )
                saved.append(self._to_domain(row))
        return saved

    @translate_storage_errors("release BMS seats")
    def release_bms(self, seat_ids: list[SeatId], on: date, show: Show) -> int:
        deleted, _ = models.BmsBooking.objects.filter(
            seat_id__in=[str(s) for s in seat_ids], date=on, show=show.value
        ).delete()
        return deleted


class DjangoSeatCatalogStore(SeatCatalogStore):
    """The seat catalog seeded from the default layout."""

    @translate_storage_errors("list seats")
    def list_seats(self) -> list[Seat]:
        return [
            Seat(
                seat_id=SeatId(row=row.row, number=row.number),
                class_label=row.class_label,
                status=SeatStatus(row.status),
            )
            for row in models.Seat.objects.all()
        ]


class DjangoSettingsStore(SettingsStore):
    @translate_storage_errors("load settings")
    def load(self, key: str) -> dict | None:
        row = models.TheaterSetting.objects.filter(key=key).first()
        return row.value if row else None

    @translate_storage_errors("save settings")
    def save(self, key: str, value: dict) -> None:
        models.TheaterSetting.objects.update_or_create(key=key, defaults={"value": value})


class DjangoTicketCounterStore(TicketCounterStore):
    """Ticket numbers kept in a single counter row per name."""

    def __init__(self, prefix: str = "TKT", padding: int = 6) -> None:
        self._defaults = {"prefix": prefix, "padding": padding}

    def _locked(self, name: str) -> models.TicketCounter:
        counter, _ = models.TicketCounter.objects.select_for_update().get_or_create(
            name=name, defaults=self._defaults
        )
        return counter

    @staticmethod
    def _to_domain(counter: models.TicketCounter) -> TicketNumber:
        return TicketNumber(
            current=counter.current_value,
            prefix=counter.prefix,
            padding=counter.padding,
        )

    @translate_storage_errors("read ticket counter")
    def current(self, name: str) -> TicketNumber:
        counter = models.TicketCounter.objects.filter(name=name).first()
        if counter is None:
            return TicketNumber(current=0, **self._defaults)
        return self._to_domain(counter)

    @translate_storage_errors("advance ticket counter")
    def advance(self, name: str) -> TicketNumber:
        with transaction.atomic():
            counter = self._locked(name)
            counter.current_value = F("current_value") + 1
            counter.save(update_fields=["current_value"])
            counter.refresh_from_db()
        return self._to_domain(counter)

    @translate_storage_errors("reset ticket counter")
    def reset(self, name: str, value: int) -> TicketNumber:
        with transaction.atomic():
            counter = self._locked(name)
            counter.current_value = value
            counter.save(update_fields=["current_value"])
        return self._to_domain(counter)
