"""Input parsing shared by the services.

Each helper turns raw request values into domain types or raises
InvalidInputError naming the offending field.
"""

from datetime import date
from enum import Enum
from typing import TypeVar

from boxoffice.domain import BookingId, Money, SeatId
from boxoffice.domain.errors import InvalidBookingIdError, InvalidInputError

E = TypeVar("E", bound=Enum)


def require(value, field_name: str):
    if value is None or value == "":
        raise InvalidInputError(f"{field_name} is required")
    return value


def parse_date(value, field_name: str = "date") -> date:
    if isinstance(value, date):
        return value
    require(value, field_name)
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise InvalidInputError(f"{field_name} must be a valid date") from None


def parse_enum(enum_cls: type[E], value, field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    require(value, field_name)
    try:
        return enum_cls(str(value).upper())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidInputError(f"{field_name} must be one of: {choices}") from None


def parse_money(value, field_name: str) -> Money:
    """Parse a non-negative amount with at most two decimal places."""
    try:
        money = Money.of(value)
    except ValueError:
        raise InvalidInputError(
            f"{field_name} must be a non-negative number"
        ) from None
    if money.amount.normalize().as_tuple().exponent < -2:
        raise InvalidInputError(f"{field_name} must have at most 2 decimal places")
    return money


def parse_seat_ids(values, field_name: str = "seatIds") -> list[SeatId]:
    """Parse a non-empty list of distinct seat ids, keeping request order."""
    if not isinstance(values, (list, tuple)):
        raise InvalidInputError(f"{field_name} must be an array")
    if not values:
        raise InvalidInputError(f"{field_name} must not be empty")
    seats: list[SeatId] = []
    invalid = []
    for raw in values:
        try:
            seats.append(raw if isinstance(raw, SeatId) else SeatId.from_string(str(raw)))
        except ValueError:
            invalid.append(raw)
    if invalid:
        raise InvalidInputError(
            f"{field_name} contains invalid seat ids", details={"invalid": invalid}
        )
    if len(set(seats)) != len(seats):
        raise InvalidInputError(f"{field_name} contains duplicate seats")
    return seats


def parse_booking_id(value: str) -> BookingId:
    try:
        return BookingId.from_string(str(value))
    except ValueError:
        raise InvalidBookingIdError() from None
