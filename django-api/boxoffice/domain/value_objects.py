"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class SeatId:
    """Seat identifier of the form ``<row>-<number>``, e.g. ``BOX-A-7``.

    The row itself may contain dashes; the number is whatever follows the
    last one.
    """

    row: str
    number: int

    def __post_init__(self) -> None:
        if not self.row:
            raise ValueError("Seat row cannot be empty")
        if self.number < 1:
            raise ValueError("Seat number must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        row, sep, number = value.strip().rpartition("-")
        if not sep or not number.isdigit():
            raise ValueError(f"Invalid seat id: {value!r}")
        return cls(row=row, number=int(number))

    def __str__(self) -> str:
        return f"{self.row}-{self.number}"


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValueError("Money amount must be a finite number")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def of(cls, value: object) -> Self:
        """Build from an int, float, Decimal or numeric string."""
        if isinstance(value, bool) or value is None:
            raise ValueError(f"Not a valid amount: {value!r}")
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Not a valid amount: {value!r}") from None
        return cls(amount=amount)

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def times(self, count: int) -> "Money":
        return Money(self.amount * count)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
