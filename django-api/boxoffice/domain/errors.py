"""Domain error codes for the boxoffice module."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    NOT_ACCEPTABLE = "NOT_ACCEPTABLE"
    UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"
    RATE_LIMITED = "RATE_LIMITED"
    DATABASE_ERROR = "DATABASE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    details: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Raised when input fails shape or range validation."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            details=details,
        )


class InvalidBookingIdError(InvalidInputError):
    """Raised when a booking ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__("Invalid booking ID format")


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class ConflictError(DomainError):
    """Raised when a write collides with existing data."""

    def __init__(self, message: str = "Resource already exists", details: Any = None) -> None:
        super().__init__(
            code=ErrorCode.CONFLICT,
            message=message,
            details=details,
        )


class SeatConflictError(ConflictError):
    """Raised when seats are already taken for a date and show."""

    def __init__(self, seat_ids: list[str] | None = None) -> None:
        seat_ids = sorted(seat_ids or [])
        message = "Seats already booked for this show"
        if seat_ids:
            message = f"{message}: {', '.join(seat_ids)}"
        super().__init__(message, {"seatIds": seat_ids} if seat_ids else None)
        self.seat_ids = seat_ids


class StorageError(DomainError):
    """Raised when the storage layer fails for an unclassified reason."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.DATABASE_ERROR,
            message=f"Database operation failed: {operation}",
        )
        self.operation = operation


class UnauthorizedError(DomainError):
    """Raised when an admin operation is attempted without credentials."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message="Unauthorized")


class ForbiddenError(DomainError):
    """Raised when admin credentials are present but wrong."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message="Forbidden")


class SeatUnavailableError(ConflictError):
    """Raised when seats are blocked in the catalog."""

    def __init__(self, seat_ids: list[str]) -> None:
        seat_ids = sorted(seat_ids)
        super().__init__(
            f"Seats are blocked: {', '.join(seat_ids)}", {"seatIds": seat_ids}
        )
        self.seat_ids = seat_ids
