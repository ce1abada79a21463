"""Seat registry: per-show seat status derived from the ledger.

Nothing here is cached. Status for a (date, show) is recomputed from
bookings, BMS bookings, the seat catalog and terminal holds on every call.
"""

import logging

from boxoffice.domain import (
    BmsBooking,
    SeatId,
    SeatStatus,
    SeatStatusSnapshot,
    Show,
)
from boxoffice.domain.errors import InvalidInputError, SeatConflictError
from boxoffice.services.pricing import class_for_row
from boxoffice.services.status_sync import reconcile
from boxoffice.services.validation import parse_date, parse_enum, parse_seat_ids
from boxoffice.stores.interfaces import (
    BmsBookingStore,
    BookingStore,
    SeatCatalogStore,
    SeatHoldStore,
)

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL = "default"

# Statuses a terminal may push for a seat; BMS marking has its own operation.
TERMINAL_STATUSES = {
    SeatStatus.AVAILABLE,
    SeatStatus.SELECTED,
    SeatStatus.BOOKED,
    SeatStatus.BLOCKED,
}


class SeatService:
    """Service for seat status queries and seat state changes."""

    def __init__(
        self,
        bookings: BookingStore,
        bms: BmsBookingStore,
        catalog: SeatCatalogStore,
        holds: SeatHoldStore,
    ) -> None:
        self._bookings = bookings
        self._bms = bms
        self._catalog = catalog
        self._holds = holds

    def get_status_snapshot(self, date, show) -> SeatStatusSnapshot:
        """Return booked, BMS, held and blocked seats for a date and show.

        Raises:
            InvalidInputError: If date or show is missing or malformed.
        """
        on = parse_date(date)
        show = parse_enum(Show, show, "show")
        blocked = [s.seat_id for s in self._catalog.list_seats() if s.status == SeatStatus.BLOCKED]
        return SeatStatusSnapshot(
            date=on,
            show=show,
            booked=tuple(sorted(set(self._bookings.booked_seats(on, show)))),
            bms=tuple(sorted(b.seat_id for b in self._bms.bms_bookings(on, show))),
            selected=tuple(sorted(self._holds.holds(on, show))),
            blocked=tuple(sorted(blocked)),
        )

    def get_seat_status(self, date, show, terminal_id: str | None = None) -> dict[SeatId, SeatStatus]:
        """Return the status of every seat for a date and show.

        Seats held by ``terminal_id`` report SELECTED, seats held by any
        other terminal report BLOCKED. Booked seats that are missing from
        the catalog are still included.
        """
        snapshot = self.get_status_snapshot(date, show)
        local = {seat.seat_id: SeatStatus.AVAILABLE for seat in self._catalog.list_seats()}
        for seat in (*snapshot.booked, *snapshot.bms, *snapshot.selected):
            local.setdefault(seat, SeatStatus.AVAILABLE)
        if terminal_id:
            holds = self._holds.holds(snapshot.date, snapshot.show)
            local.update(
                {seat: SeatStatus.SELECTED for seat, owner in holds.items() if owner == terminal_id}
            )
        return reconcile(
            local,
            server_booked=snapshot.booked,
            server_bms=snapshot.bms,
            server_selected=snapshot.selected,
            server_blocked=snapshot.blocked,
        )

    def save_bms_seats(self, seat_ids, status, date, show) -> list[BmsBooking] | int:
        """Mark seats as sold through BMS, or release them.

        Returns the saved BMS bookings for BMS_BOOKED, or the number of
        released rows for AVAILABLE.

        Raises:
            InvalidInputError: On a bad seat list, status, date or show.
            SeatConflictError: If a seat is already booked directly.
        """
        seats = parse_seat_ids(seat_ids)
        status = parse_enum(SeatStatus, status, "status")
        if status not in (SeatStatus.BMS_BOOKED, SeatStatus.AVAILABLE):
            raise InvalidInputError("status must be BMS_BOOKED or AVAILABLE")
        on = parse_date(date)
        show = parse_enum(Show, show, "show")

        if status == SeatStatus.AVAILABLE:
            released = self._bms.release_bms(seats, on, show)
            logger.info("Released %d BMS seat(s) for %s %s", released, on, show.value)
            return released

        taken = set(self._bookings.booked_seats(on, show)) & set(seats)
        if taken:
            raise SeatConflictError([str(s) for s in taken])
        saved = self._bms.mark_bms_booked(
            {seat: class_for_row(seat.row) for seat in seats}, on, show
        )
        self._holds.release(seats, on, show)
        logger.info("Marked %d BMS seat(s) for %s %s", len(saved), on, show.value)
        return saved

    def update_seat_status(self, updates, date, show, terminal_id: str | None = None):
        """Hold or release seats for a terminal.

        SELECTED holds the seat for ``terminal_id``; every other accepted
        status releases any hold. Last writer wins.

        Returns:
            List of (SeatId, SeatStatus) pairs as applied.
        """
        on = parse_date(date)
        show = parse_enum(Show, show, "show")
        if not isinstance(updates, (list, tuple)):
            raise InvalidInputError("seatUpdates must be an array")
        terminal = terminal_id or DEFAULT_TERMINAL

        applied: list[tuple[SeatId, SeatStatus]] = []
        for update in updates:
            if not isinstance(update, dict):
                raise InvalidInputError("seatUpdates entries must be objects")
            (seat,) = parse_seat_ids([update.get("seatId")])
            status = parse_enum(SeatStatus, update.get("status"), "status")
            if status not in TERMINAL_STATUSES:
                raise InvalidInputError(f"Invalid status: {status.value}")
            applied.append((seat, status))

        selected = [seat for seat, status in applied if status == SeatStatus.SELECTED]
        released = [seat for seat, status in applied if status != SeatStatus.SELECTED]
        if selected:
            self._holds.hold(selected, on, show, terminal)
        if released:
            self._holds.release(released, on, show)
        logger.debug(
            "Terminal %s holds +%d -%d seat(s) for %s %s",
            terminal, len(selected), len(released), on, show.value,
        )
        return applied
