"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in boxoffice/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from boxoffice.domain.value_objects import BookingId, Money, SeatId


class Show(str, Enum):
    """The four fixed daily screening slots."""

    MORNING = "MORNING"
    MATINEE = "MATINEE"
    EVENING = "EVENING"
    NIGHT = "NIGHT"


class SeatStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    SELECTED = "SELECTED"
    BOOKED = "BOOKED"
    BMS_BOOKED = "BMS_BOOKED"
    BLOCKED = "BLOCKED"


class BookingSource(str, Enum):
    LOCAL = "LOCAL"
    BMS = "BMS"
    VIP = "VIP"
    ONLINE = "ONLINE"


@dataclass(frozen=True)
class Seat:
    """Domain representation of a catalog seat."""

    seat_id: SeatId
    class_label: str
    status: SeatStatus = SeatStatus.AVAILABLE

    @property
    def row(self) -> str:
        return self.seat_id.row


@dataclass(frozen=True)
class BookingDraft:
    """A validated booking that has not been persisted yet."""

    date: date
    show: Show
    screen: str
    movie: str
    movie_language: str
    seat_ids: tuple[SeatId, ...]
    class_label: str
    price_per_seat: Money
    total_price: Money
    source: BookingSource = BookingSource.LOCAL
    customer_name: str = ""
    customer_phone: str = ""
    notes: str = ""

    def income_split(self) -> dict[str, Money]:
        """Total income plus the per-channel column the source maps to."""
        split = {
            "total_income": self.total_price,
            "local_income": Money.zero(),
            "bms_income": Money.zero(),
            "vip_income": Money.zero(),
        }
        channel = {
            BookingSource.LOCAL: "local_income",
            BookingSource.ONLINE: "local_income",
            BookingSource.BMS: "bms_income",
            BookingSource.VIP: "vip_income",
        }[self.source]
        split[channel] = self.total_price
        return split


@dataclass(frozen=True)
class Booking:
    """Domain representation of a completed booking."""

    id: BookingId
    date: date
    show: Show
    screen: str
    movie: str
    movie_language: str
    seat_ids: tuple[SeatId, ...]
    class_label: str
    price_per_seat: Money
    total_price: Money
    source: BookingSource
    synced: bool
    booked_at: datetime
    printed_at: datetime | None = None
    customer_name: str = ""
    customer_phone: str = ""
    notes: str = ""
    total_income: Money = field(default_factory=Money.zero)
    local_income: Money = field(default_factory=Money.zero)
    bms_income: Money = field(default_factory=Money.zero)
    vip_income: Money = field(default_factory=Money.zero)

    @property
    def seat_count(self) -> int:
        return len(self.seat_ids)


@dataclass(frozen=True)
class BmsBooking:
    """A seat sold through the external BMS channel."""

    seat_id: SeatId
    date: date
    show: Show
    class_label: str
    created_at: datetime
    status: SeatStatus = SeatStatus.BMS_BOOKED


@dataclass(frozen=True)
class SeatStatusSnapshot:
    """Server-side seat state for one (date, show)."""

    date: date
    show: Show
    booked: tuple[SeatId, ...] = ()
    bms: tuple[SeatId, ...] = ()
    selected: tuple[SeatId, ...] = ()
    blocked: tuple[SeatId, ...] = ()


@dataclass(frozen=True)
class ClassStats:
    class_label: str
    count: int
    revenue: Money


@dataclass(frozen=True)
class BookingStats:
    total_bookings: int
    total_revenue: Money
    by_class: tuple[ClassStats, ...] = ()


@dataclass(frozen=True)
class SeatConflict:
    """A seat referenced by more than one booking for the same show."""

    date: date
    show: Show
    seat_id: SeatId
    booking_ids: tuple[BookingId, ...]


@dataclass(frozen=True)
class ShowTime:
    key: Show
    label: str
    start_time: str
    end_time: str
    enabled: bool = True


@dataclass(frozen=True)
class PricingConfig:
    """Class label -> price, as edited by the operator."""

    prices: dict[str, Money] = field(default_factory=dict)

    def price_for(self, class_label: str) -> Money:
        return self.prices.get(class_label, Money.zero())


@dataclass(frozen=True)
class TheaterSettings:
    pricing: PricingConfig
    show_times: tuple[ShowTime, ...]
    movies: tuple[dict, ...] = ()

    def show_time(self, show: Show) -> ShowTime | None:
        return next((s for s in self.show_times if s.key == show), None)


@dataclass(frozen=True)
class TicketNumber:
    current: int
    prefix: str
    padding: int

    def __str__(self) -> str:
        return f"{self.prefix}{self.current:0{self.padding}d}"
