"""Merge server-reported seat state into a terminal's local seat map."""

import logging
from collections.abc import Iterable, Mapping

from boxoffice.domain import SeatId, SeatStatus

logger = logging.getLogger(__name__)


def reconcile(
    local: Mapping[SeatId, SeatStatus],
    server_booked: Iterable[SeatId],
    server_bms: Iterable[SeatId],
    server_selected: Iterable[SeatId],
    server_blocked: Iterable[SeatId] = (),
) -> dict[SeatId, SeatStatus]:
    """Return a new seat map with the server state applied.

    Every local seat starts from AVAILABLE. Blocked, booked and BMS seats are
    applied in that order, so BMS wins over a direct booking of the same seat.
    Seats the server reports as selected by another terminal become BLOCKED
    unless this terminal has them SELECTED; this terminal's own selections
    survive unless the seat was taken meanwhile. Seats unknown to the local
    map are skipped.
    """
    merged = {seat: SeatStatus.AVAILABLE for seat in local}
    unknown: set[SeatId] = set()

    def apply(seats: Iterable[SeatId], status: SeatStatus) -> set[SeatId]:
        applied = set()
        for seat in seats:
            if seat in merged:
                merged[seat] = status
                applied.add(seat)
            else:
                unknown.add(seat)
        return applied

    taken = apply(server_blocked, SeatStatus.BLOCKED)
    taken |= apply(server_booked, SeatStatus.BOOKED)
    taken |= apply(server_bms, SeatStatus.BMS_BOOKED)

    mine = {seat for seat, status in local.items() if status == SeatStatus.SELECTED}
    apply((s for s in server_selected if s not in mine and s not in taken), SeatStatus.BLOCKED)
    for seat in mine - taken:
        merged[seat] = SeatStatus.SELECTED

    if unknown:
        logger.warning(
            "Skipped %d server seat(s) missing from local map: %s",
            len(unknown),
            ", ".join(sorted(str(s) for s in unknown)),
        )
    return merged
