"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors propagate to the exception handler
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.db import DatabaseError, connection
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from boxoffice import dependencies
from boxoffice.domain import BmsBooking
from boxoffice.domain.errors import InvalidInputError
from boxoffice.handlers.auth import require_admin
from boxoffice.handlers.serializers import (
    BmsBookingSerializer,
    BookingSerializer,
    BookingStatsSerializer,
    PriceQuoteSerializer,
    SeatStatusSnapshotSerializer,
    TicketFieldsSerializer,
    TicketNumberSerializer,
)
from boxoffice.services.settings_service import to_document
from boxoffice.services.validation import require

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no"}


def _body(request: Request) -> dict:
    if not isinstance(request.data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return request.data


def _optional_bool(value, field_name: str) -> bool | None:
    if value in (None, ""):
        return None
    lowered = str(value).lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise InvalidInputError(f"{field_name} must be true or false")


class BookingListView(APIView):
    """Handler for GET/POST /api/bookings"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        bookings = dependencies.booking_service().list_bookings(
            date=params.get("date"),
            show=params.get("show"),
            source=params.get("source"),
            synced=_optional_bool(params.get("synced"), "synced"),
        )
        return Response(BookingSerializer(bookings, many=True).data)

    def post(self, request: Request) -> Response:
        data = _body(request)
        booking = dependencies.booking_service().create_booking(
            date=data.get("date"),
            show=data.get("show"),
            movie=data.get("movie"),
            seat_ids=data.get("seatIds"),
            class_label=data.get("classLabel"),
            price_per_seat=data.get("pricePerSeat"),
            screen=data.get("screen"),
            movie_language=data.get("movieLanguage") or "HINDI",
            source=data.get("source") or "LOCAL",
            customer_name=data.get("customerName") or "",
            customer_phone=data.get("customerPhone") or "",
            notes=data.get("notes") or "",
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingStatsView(APIView):
    """Handler for GET /api/bookings/stats"""

    def get(self, request: Request) -> Response:
        stats = dependencies.booking_service().get_stats(
            date=request.query_params.get("date"),
            show=request.query_params.get("show"),
        )
        return Response(BookingStatsSerializer(stats).data)


class BookingDetailView(APIView):
    """Handler for GET/DELETE /api/bookings/{booking_id}"""

    def get(self, request: Request, booking_id: str) -> Response:
        booking = dependencies.booking_service().get_booking(booking_id)
        return Response(BookingSerializer(booking).data)

    def delete(self, request: Request, booking_id: str) -> Response:
        require_admin(request)
        dependencies.booking_service().delete_booking(booking_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class BookingSyncedView(APIView):
    """Handler for PATCH /api/bookings/{booking_id}/synced"""

    def patch(self, request: Request, booking_id: str) -> Response:
        synced = _body(request).get("synced", True)
        booking = dependencies.booking_service().mark_synced(booking_id, synced)
        return Response(BookingSerializer(booking).data)


class BookingTicketView(APIView):
    """Handler for POST /api/bookings/{booking_id}/ticket

    Allocates the next ticket number and marks the booking printed.
    """

    def post(self, request: Request, booking_id: str) -> Response:
        bookings = dependencies.booking_service()
        tickets = dependencies.ticket_service()
        booking = bookings.get_booking(booking_id)
        ticket_id = tickets.next_ticket_id()
        booking = bookings.mark_printed(booking_id)
        fields = tickets.format_ticket(
            booking, dependencies.settings_service().load(), ticket_id=str(ticket_id)
        )
        return Response(TicketFieldsSerializer(fields).data)


class SeatStatusView(APIView):
    """Handler for GET/POST /api/seats/status"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        seats = dependencies.seat_service()
        snapshot = seats.get_status_snapshot(params.get("date"), params.get("show"))
        statuses = seats.get_seat_status(
            snapshot.date, snapshot.show, terminal_id=params.get("terminalId")
        )
        data = dict(SeatStatusSnapshotSerializer(snapshot).data)
        data["seats"] = {str(seat): seat_status.value for seat, seat_status in sorted(statuses.items())}
        return Response(data)

    def post(self, request: Request) -> Response:
        data = _body(request)
        applied = dependencies.seat_service().update_seat_status(
            data.get("seatUpdates"),
            data.get("date"),
            data.get("show"),
            terminal_id=data.get("terminalId"),
        )
        return Response(
            {"updated": [{"seatId": str(seat), "status": s.value} for seat, s in applied]}
        )


class BmsSeatsView(APIView):
    """Handler for POST /api/seats/bms"""

    def post(self, request: Request) -> Response:
        data = _body(request)
        result = dependencies.seat_service().save_bms_seats(
            data.get("seatIds"), data.get("status"), data.get("date"), data.get("show")
        )
        if isinstance(result, int):
            return Response({"released": result})
        saved: list[BmsBooking] = result
        return Response({"saved": BmsBookingSerializer(saved, many=True).data})


class SeatPriceView(APIView):
    """Handler for GET /api/seats/price?row="""

    def get(self, request: Request) -> Response:
        row = require(request.query_params.get("row"), "row")
        quote = dependencies.settings_service().pricing_resolver().price_for_row(row)
        return Response(PriceQuoteSerializer(quote).data)


class SettingsView(APIView):
    """Handler for GET/PUT /api/settings"""

    def get(self, request: Request) -> Response:
        return Response(to_document(dependencies.settings_service().load()))

    def put(self, request: Request) -> Response:
        data = _body(request)
        saved = dependencies.settings_service().save(
            pricing=data.get("pricing"),
            show_times=data.get("showTimes"),
            movies=data.get("movies"),
        )
        return Response(to_document(saved))


class TicketIdCurrentView(APIView):
    """Handler for GET /api/ticket-id/current"""

    def get(self, request: Request) -> Response:
        number = dependencies.ticket_service().current_ticket_id()
        return Response(TicketNumberSerializer(number).data)


class TicketIdNextView(APIView):
    """Handler for POST /api/ticket-id/next"""

    def post(self, request: Request) -> Response:
        number = dependencies.ticket_service().next_ticket_id()
        return Response(TicketNumberSerializer(number).data)


class TicketIdResetView(APIView):
    """Handler for POST /api/ticket-id/reset"""

    def post(self, request: Request) -> Response:
        require_admin(request)
        number = dependencies.ticket_service().reset_ticket_id(
            require(_body(request).get("newId"), "newId")
        )
        logger.info("Ticket counter reset to %s", number)
        return Response(TicketNumberSerializer(number).data)


class HealthView(APIView):
    """Handler for GET /api/health"""

    def get(self, request: Request) -> Response:
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            database = "healthy"
        except DatabaseError:
            logger.error("Health check could not reach the database", exc_info=True)
            database = "unhealthy"
        healthy = database == "healthy"
        return Response(
            {
                "status": "healthy" if healthy else "unhealthy",
                "database": database,
                "timestamp": timezone.now().isoformat(),
            },
            status=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        )
