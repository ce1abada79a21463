"""Integration tests for the booking HTTP API.

Run with: pytest tests/test_api.py -v
"""

import uuid
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from boxoffice.models import BookedSeat, Booking, Seat


def create_booking(client: APIClient, **overrides):
    payload = {
        "date": "2025-08-06",
        "show": "EVENING",
        "movie": "Test Movie",
        "seatIds": ["A-1", "A-2"],
        "pricePerSeat": 100,
        **overrides,
    }
    return client.post("/api/bookings", payload, format="json")


def seat_status(client: APIClient, **params):
    query = {"date": "2025-08-06", "show": "EVENING", **params}
    return client.get("/api/seats/status", query)


@pytest.fixture
def admin_token(settings):
    settings.BOXOFFICE = {**settings.BOXOFFICE, "ADMIN_TOKEN": "s3cret"}
    return "s3cret"


@pytest.mark.django_db
class TestCreateBooking:
    """Tests for POST /api/bookings"""

    def test_scenario_two_seats_evening(self, api_client: APIClient):
        """A-1/A-2 at 100 each totals 200 and both seats report BOOKED."""
        response = create_booking(api_client)
        assert response.status_code == 201
        assert response.data["totalPrice"] == 200
        assert response.data["bookedSeats"] == ["A-1", "A-2"]

        status = seat_status(api_client)
        assert status.status_code == 200
        assert status.data["seats"]["A-1"] == "BOOKED"
        assert status.data["seats"]["A-2"] == "BOOKED"
        assert sorted(status.data["bookedSeats"]) == ["A-1", "A-2"]

    def test_create_persists_one_row_per_seat(self, api_client: APIClient):
        response = create_booking(api_client)
        booking = Booking.objects.get(id=response.data["id"])
        assert booking.seat_count == 2
        assert set(BookedSeat.objects.filter(booking=booking).values_list("seat_id", flat=True)) == {"A-1", "A-2"}

    def test_round_trip(self, api_client: APIClient):
        created = create_booking(api_client).data
        fetched = api_client.get(f"/api/bookings/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.data["bookedSeats"] == created["bookedSeats"]
        assert fetched.data["date"] == created["date"] == "2025-08-06"
        assert fetched.data["totalPrice"] == created["totalPrice"]

    def test_empty_seat_list_rejected(self, api_client: APIClient):
        response = create_booking(api_client, seatIds=[])
        assert response.status_code == 400
        assert response.data["type"] == "VALIDATION_ERROR"
        assert response.data["code"] == 400

    def test_negative_price_rejected(self, api_client: APIClient):
        response = create_booking(api_client, pricePerSeat=-10)
        assert response.status_code == 400
        assert response.data["type"] == "VALIDATION_ERROR"

    def test_overlapping_seats_conflict(self, api_client: APIClient):
        create_booking(api_client)
        response = create_booking(api_client, seatIds=["A-2", "A-3"])
        assert response.status_code == 409
        assert response.data["type"] == "CONFLICT"
        assert response.data["details"] == {"seatIds": ["A-2"]}
        assert Booking.objects.count() == 1

    def test_per_seat_rows_decide_availability(self, api_client: APIClient):
        """Seat rows are what block a booking, not the booking's JSON seat list."""
        first = create_booking(api_client, show="NIGHT", seatIds=["B-1"]).data
        BookedSeat.objects.create(
            booking_id=first["id"], seat_id="B-9", date="2025-08-06", show="NIGHT"
        )
        response = create_booking(api_client, show="NIGHT", seatIds=["B-9"])
        assert response.status_code == 409

    def test_price_resolved_from_settings(self, api_client: APIClient):
        response = create_booking(api_client, seatIds=["CB-A-1", "CB-A-2"], pricePerSeat=None)
        assert response.status_code == 201
        assert response.data["classLabel"] == "CLASSIC"
        assert response.data["totalPrice"] == 240

    def test_cent_prices_round_trip(self, api_client: APIClient):
        created = create_booking(api_client, seatIds=["A-1", "A-2", "A-3"], pricePerSeat="33.33").data
        fetched = api_client.get(f"/api/bookings/{created['id']}").data
        assert created["totalPrice"] == fetched["totalPrice"] == Decimal("99.99")
        assert fetched["pricePerSeat"] == Decimal("33.33")

    def test_sub_cent_price_rejected(self, api_client: APIClient):
        response = create_booking(api_client, seatIds=["A-1", "A-2", "A-3"], pricePerSeat="0.005")
        assert response.status_code == 400
        assert response.data["type"] == "VALIDATION_ERROR"
        assert not Booking.objects.exists()

    def test_largest_storable_price_is_returned(self, api_client: APIClient):
        response = create_booking(api_client, seatIds=["B-1", "B-2"], pricePerSeat=99999999)
        assert response.status_code == 201
        assert response.data["totalPrice"] == 199999998
        fetched = api_client.get(f"/api/bookings/{response.data['id']}")
        assert fetched.data["totalPrice"] == 199999998

    def test_price_beyond_column_rejected_before_insert(self, api_client: APIClient):
        response = create_booking(api_client, seatIds=["B-1", "B-2"], pricePerSeat=100000000)
        assert response.status_code == 400
        assert response.data["type"] == "VALIDATION_ERROR"
        assert not Booking.objects.exists()

    def test_blocked_catalog_seat_rejected(self, api_client: APIClient):
        Seat.objects.filter(seat_id="FC-A-1").update(status="BLOCKED")
        response = create_booking(api_client, seatIds=["FC-A-1", "FC-A-2"])
        assert response.status_code == 409
        assert response.data["type"] == "CONFLICT"
        assert response.data["details"] == {"seatIds": ["FC-A-1"]}
        assert not Booking.objects.exists()
        assert seat_status(api_client).data["seats"]["FC-A-1"] == "BLOCKED"

    def test_non_object_body_rejected(self, api_client: APIClient):
        response = api_client.post("/api/bookings", ["A-1"], format="json")
        assert response.status_code == 400
        assert response.data["type"] == "VALIDATION_ERROR"

    def test_malformed_json_uses_error_envelope(self, api_client: APIClient):
        response = api_client.post(
            "/api/bookings", data="{not json", content_type="application/json"
        )
        assert response.status_code == 400
        assert response.data["type"] == "VALIDATION_ERROR"
        assert "requestId" in response.data

    def test_wrong_method_uses_its_own_error_type(self, api_client: APIClient):
        response = api_client.delete("/api/bookings")
        assert response.status_code == 405
        assert response.data["type"] == "METHOD_NOT_ALLOWED"
        assert response.data["code"] == 405

    def test_unsupported_media_type(self, api_client: APIClient):
        response = api_client.post("/api/bookings", data="A-1", content_type="text/plain")
        assert response.status_code == 415
        assert response.data["type"] == "UNSUPPORTED_MEDIA_TYPE"


@pytest.mark.django_db
class TestBookingQueries:
    """Tests for GET /api/bookings and /api/bookings/stats"""

    def test_list_filters_by_date_and_show(self, api_client: APIClient):
        create_booking(api_client)
        create_booking(api_client, show="NIGHT")
        response = api_client.get("/api/bookings", {"date": "2025-08-06", "show": "NIGHT"})
        assert response.status_code == 200
        assert len(response.data) == 1
        assert response.data[0]["show"] == "NIGHT"

    def test_list_filters_by_synced(self, api_client: APIClient):
        booking_id = create_booking(api_client).data["id"]
        create_booking(api_client, show="NIGHT")
        api_client.patch(f"/api/bookings/{booking_id}/synced", {"synced": True}, format="json")
        response = api_client.get("/api/bookings", {"synced": "true"})
        assert [b["id"] for b in response.data] == [booking_id]

    def test_list_rejects_bad_synced_flag(self, api_client: APIClient):
        response = api_client.get("/api/bookings", {"synced": "maybe"})
        assert response.status_code == 400

    def test_stats(self, api_client: APIClient):
        create_booking(api_client, seatIds=["CB-A-1", "CB-A-2"], pricePerSeat=None)
        create_booking(api_client, seatIds=["BOX-A-1"], pricePerSeat=None)
        response = api_client.get("/api/bookings/stats", {"date": "2025-08-06"})
        assert response.status_code == 200
        assert response.data["totalBookings"] == 2
        assert response.data["totalRevenue"] == 390
        assert {c["classLabel"] for c in response.data["byClass"]} == {"BOX", "CLASSIC"}

    def test_invalid_booking_id(self, api_client: APIClient):
        response = api_client.get("/api/bookings/not-a-uuid")
        assert response.status_code == 400
        assert response.data["message"] == "Invalid booking ID format"

    def test_booking_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/bookings/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.data["type"] == "NOT_FOUND"


@pytest.mark.django_db
class TestSeatStatus:
    """Tests for /api/seats/*"""

    def test_catalog_seats_available(self, api_client: APIClient):
        response = seat_status(api_client)
        assert response.data["seats"]["BOX-A-1"] == "AVAILABLE"
        assert len(response.data["seats"]) == Seat.objects.count()

    def test_status_is_idempotent(self, api_client: APIClient):
        create_booking(api_client, seatIds=["FC-A-1"])
        first = seat_status(api_client, terminalId="t1").data
        second = seat_status(api_client, terminalId="t1").data
        assert first == second

    def test_missing_show_rejected(self, api_client: APIClient):
        response = api_client.get("/api/seats/status", {"date": "2025-08-06"})
        assert response.status_code == 400
        assert response.data["type"] == "VALIDATION_ERROR"

    def test_hold_visible_to_other_terminals_as_blocked(self, api_client: APIClient):
        response = api_client.post(
            "/api/seats/status",
            {
                "date": "2025-08-06",
                "show": "EVENING",
                "terminalId": "t1",
                "seatUpdates": [{"seatId": "FC-A-5", "status": "SELECTED"}],
            },
            format="json",
        )
        assert response.status_code == 200
        assert response.data["updated"] == [{"seatId": "FC-A-5", "status": "SELECTED"}]
        assert seat_status(api_client, terminalId="t1").data["seats"]["FC-A-5"] == "SELECTED"
        assert seat_status(api_client, terminalId="t2").data["seats"]["FC-A-5"] == "BLOCKED"
        assert seat_status(api_client).data["selectedSeats"] == ["FC-A-5"]

    def test_bms_seats(self, api_client: APIClient):
        response = api_client.post(
            "/api/seats/bms",
            {"date": "2025-08-06", "show": "EVENING", "seatIds": ["SC-A-1"], "status": "BMS_BOOKED"},
            format="json",
        )
        assert response.status_code == 200
        assert response.data["saved"][0]["classLabel"] == "STAR CLASS"
        assert seat_status(api_client).data["seats"]["SC-A-1"] == "BMS_BOOKED"

        conflict = create_booking(api_client, seatIds=["SC-A-1"])
        assert conflict.status_code == 409

        released = api_client.post(
            "/api/seats/bms",
            {"date": "2025-08-06", "show": "EVENING", "seatIds": ["SC-A-1"], "status": "AVAILABLE"},
            format="json",
        )
        assert released.data == {"released": 1}

    def test_price_quote(self, api_client: APIClient):
        response = api_client.get("/api/seats/price", {"row": "BOX-A"})
        assert response.data == {"classLabel": "BOX", "price": 150}

    def test_unknown_row_priced_zero(self, api_client: APIClient):
        response = api_client.get("/api/seats/price", {"row": "ZZ"})
        assert response.status_code == 200
        assert response.data == {"classLabel": "UNKNOWN", "price": 0}


@pytest.mark.django_db
class TestSettingsAndTickets:
    """Tests for /api/settings, /api/ticket-id/* and ticket allocation"""

    def test_settings_defaults_and_update(self, api_client: APIClient):
        assert api_client.get("/api/settings").data["pricing"]["CLASSIC"] == 120
        response = api_client.put("/api/settings", {"pricing": {"CLASSIC": 130}}, format="json")
        assert response.status_code == 200
        assert api_client.get("/api/settings").data["pricing"] == {"CLASSIC": 130}
        assert api_client.get("/api/seats/price", {"row": "CB-A"}).data["price"] == 130

    def test_settings_reject_negative_price(self, api_client: APIClient):
        response = api_client.put("/api/settings", {"pricing": {"CLASSIC": -1}}, format="json")
        assert response.status_code == 400

    def test_ticket_counter(self, api_client: APIClient):
        assert api_client.get("/api/ticket-id/current").data["ticketId"] == "TKT000000"
        assert api_client.post("/api/ticket-id/next").data["ticketId"] == "TKT000001"
        assert api_client.post("/api/ticket-id/next").data["currentValue"] == 2

    def test_ticket_reset(self, api_client: APIClient):
        response = api_client.post("/api/ticket-id/reset", {"newId": 99}, format="json")
        assert response.data["ticketId"] == "TKT000099"
        bad = api_client.post("/api/ticket-id/reset", {"newId": -3}, format="json")
        assert bad.status_code == 400

    def test_print_ticket(self, api_client: APIClient):
        booking_id = create_booking(api_client, seatIds=["CB-A-1", "CB-A-2", "CB-A-3"], pricePerSeat=None).data["id"]
        response = api_client.post(f"/api/bookings/{booking_id}/ticket")
        assert response.status_code == 200
        assert response.data["ticketId"] == "TKT000001"
        assert response.data["seats"] == [{"row": "CB-A", "numbers": "1-3"}]
        assert response.data["date"] == "06/08/2025"
        assert response.data["total"] == 360
        assert api_client.get(f"/api/bookings/{booking_id}").data["printedAt"] is not None

    def test_print_unknown_booking_does_not_consume_number(self, api_client: APIClient):
        response = api_client.post(f"/api/bookings/{uuid.uuid4()}/ticket")
        assert response.status_code == 404
        assert api_client.get("/api/ticket-id/current").data["currentValue"] == 0


@pytest.mark.django_db
class TestAdminAndHealth:
    def test_delete_without_token_configured(self, api_client: APIClient):
        booking_id = create_booking(api_client).data["id"]
        response = api_client.delete(f"/api/bookings/{booking_id}")
        assert response.status_code == 204
        assert not BookedSeat.objects.exists()
        assert create_booking(api_client).status_code == 201

    def test_delete_requires_token(self, api_client: APIClient, admin_token):
        booking_id = create_booking(api_client).data["id"]
        missing = api_client.delete(f"/api/bookings/{booking_id}")
        assert missing.status_code == 401
        assert missing.data["type"] == "UNAUTHORIZED"

        wrong = api_client.delete(f"/api/bookings/{booking_id}", HTTP_X_ADMIN_TOKEN="nope")
        assert wrong.status_code == 403
        assert wrong.data["type"] == "FORBIDDEN"

        ok = api_client.delete(f"/api/bookings/{booking_id}", HTTP_X_ADMIN_TOKEN=admin_token)
        assert ok.status_code == 204

    def test_reset_requires_token(self, api_client: APIClient, admin_token):
        response = api_client.post("/api/ticket-id/reset", {"newId": 1}, format="json")
        assert response.status_code == 401

    def test_health(self, api_client: APIClient):
        response = api_client.get("/api/health")
        assert response.status_code == 200
        assert response.data["status"] == "healthy"
        assert response.data["database"] == "healthy"

    def test_request_id_is_echoed(self, api_client: APIClient):
        response = api_client.get(
            "/api/bookings/not-a-uuid", HTTP_X_REQUEST_ID="req-123"
        )
        assert response["X-Request-ID"] == "req-123"
        assert response.data["requestId"] == "req-123"
