"""Row -> class label -> price resolution.

The prefix table is static; prices come from an explicit PricingConfig so
the operator can edit them without touching code.
"""

from dataclasses import dataclass

from boxoffice.domain import Money, PricingConfig, SeatId

UNKNOWN_CLASS = "UNKNOWN"
MIXED_CLASS = "MIXED"

ROW_CLASS_PREFIXES: tuple[tuple[str, str], ...] = (
    ("BOX-", "BOX"),
    ("SC2-", "SECOND CLASS"),
    ("SC-", "STAR CLASS"),
    ("CB-", "CLASSIC"),
    ("FC-", "FIRST CLASS"),
)


def class_for_row(row: str) -> str:
    """Return the class label for a row id, or ``UNKNOWN``."""
    for prefix, label in ROW_CLASS_PREFIXES:
        if row.startswith(prefix):
            return label
    return UNKNOWN_CLASS


@dataclass(frozen=True)
class PriceQuote:
    class_label: str
    price: Money


class PricingResolver:
    """Resolve seat rows to class labels and configured prices."""

    def __init__(self, config: PricingConfig) -> None:
        self._config = config

    def price_for_row(self, row: str) -> PriceQuote:
        label = class_for_row(row)
        if label == UNKNOWN_CLASS:
            return PriceQuote(class_label=UNKNOWN_CLASS, price=Money.zero())
        return PriceQuote(class_label=label, price=self._config.price_for(label))

    def price_for_seat(self, seat_id: SeatId) -> PriceQuote:
        return self.price_for_row(seat_id.row)

    def class_for_seats(self, seat_ids: list[SeatId]) -> str:
        """Single class label shared by all seats, or ``MIXED``."""
        labels = {class_for_row(seat.row) for seat in seat_ids}
        if len(labels) == 1:
            return labels.pop()
        return MIXED_CLASS
