"""Ticket snapshots for the printing layer and the printed-ticket sequence.

format_ticket produces structured fields only; rendering them to text, PDF
or ESC/POS is the printer integration's job.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from itertools import groupby

from boxoffice.domain import Booking, Money, SeatId, TheaterSettings, TicketNumber
from boxoffice.domain.errors import InvalidInputError
from boxoffice.stores.interfaces import TicketCounterStore

CENTS = Decimal("0.01")
COUNTER_NAME = "tickets"


@dataclass(frozen=True)
class TheaterProfile:
    name: str
    location: str
    gstin: str
    cgst_rate: Decimal
    sgst_rate: Decimal
    maintenance_charge: Money


@dataclass(frozen=True)
class TaxBreakdown:
    net: Money
    cgst: Money
    sgst: Money
    maintenance_charge: Money
    total: Money


@dataclass(frozen=True)
class SeatGroup:
    row: str
    numbers: str


@dataclass(frozen=True)
class TicketFields:
    ticket_id: str | None
    theater_name: str
    location: str
    gstin: str
    movie: str
    movie_language: str
    date: str
    show: str
    show_label: str
    show_time: str
    screen: str
    class_label: str
    seats: tuple[SeatGroup, ...]
    seat_count: int
    price_per_seat: Money
    taxes: TaxBreakdown
    total: Money


def collapse_numbers(numbers: list[int]) -> str:
    """Render seat numbers as ranges: [1, 2, 3, 5] -> "1-3, 5"."""
    parts = []
    ordered = sorted(set(numbers))
    for _, run in groupby(enumerate(ordered), key=lambda pair: pair[1] - pair[0]):
        run = [number for _, number in run]
        parts.append(str(run[0]) if len(run) == 1 else f"{run[0]}-{run[-1]}")
    return ", ".join(parts)


def group_seats(seat_ids: tuple[SeatId, ...]) -> tuple[SeatGroup, ...]:
    by_row: dict[str, list[int]] = {}
    for seat in seat_ids:
        by_row.setdefault(seat.row, []).append(seat.number)
    return tuple(SeatGroup(row=row, numbers=collapse_numbers(numbers)) for row, numbers in by_row.items())


def split_taxes(total: Money, profile: TheaterProfile) -> TaxBreakdown:
    """Split a gross amount into net, CGST, SGST and the maintenance charge.

    The parts always add up to ``total``. SGST absorbs rounding, falling back
    to CGST and then net when the remainder would turn it negative.
    """
    charge = min(profile.maintenance_charge.amount, total.amount)
    taxable = total.amount - charge
    net = (taxable / (1 + profile.cgst_rate + profile.sgst_rate)).quantize(CENTS, rounding=ROUND_HALF_UP)
    cgst = (net * profile.cgst_rate).quantize(CENTS, rounding=ROUND_HALF_UP)
    sgst = (net * profile.sgst_rate).quantize(CENTS, rounding=ROUND_HALF_UP)
    remainder = taxable - net - cgst - sgst
    if sgst + remainder >= 0:
        sgst += remainder
    elif cgst + remainder >= 0:
        cgst += remainder
    else:
        net += remainder
    return TaxBreakdown(
        net=Money(net),
        cgst=Money(cgst),
        sgst=Money(sgst),
        maintenance_charge=Money(charge),
        total=total,
    )


class TicketService:
    """Build ticket snapshots and hand out ticket numbers."""

    def __init__(self, counter: TicketCounterStore, profile: TheaterProfile) -> None:
        self._counter = counter
        self._profile = profile

    def format_ticket(
        self, booking: Booking, settings: TheaterSettings, ticket_id: str | None = None
    ) -> TicketFields:
        show_time = settings.show_time(booking.show)
        return TicketFields(
            ticket_id=ticket_id,
            theater_name=self._profile.name,
            location=self._profile.location,
            gstin=self._profile.gstin,
            movie=booking.movie,
            movie_language=booking.movie_language,
            date=booking.date.strftime("%d/%m/%Y"),
            show=booking.show.value,
            show_label=show_time.label if show_time else booking.show.value.title(),
            show_time=show_time.start_time if show_time else "",
            screen=booking.screen,
            class_label=booking.class_label,
            seats=group_seats(booking.seat_ids),
            seat_count=booking.seat_count,
            price_per_seat=booking.price_per_seat,
            taxes=split_taxes(booking.total_price, self._profile),
            total=booking.total_price,
        )

    def current_ticket_id(self) -> TicketNumber:
        return self._counter.current(COUNTER_NAME)

    def next_ticket_id(self) -> TicketNumber:
        return self._counter.advance(COUNTER_NAME)

    def reset_ticket_id(self, value) -> TicketNumber:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidInputError("Ticket ID must be a non-negative integer")
        return self._counter.reset(COUNTER_NAME, value)
