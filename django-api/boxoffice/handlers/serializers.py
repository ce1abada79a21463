"""Serializers for transforming domain models to API responses.

Field names are camelCase on the wire; sources point at the domain
dataclass attributes.
"""

from rest_framework import serializers


def money_field(source: str, max_digits: int | None = 12) -> serializers.DecimalField:
    return serializers.DecimalField(
        max_digits=max_digits, decimal_places=2, source=f"{source}.amount"
    )


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.CharField()
    date = serializers.DateField()
    show = serializers.CharField(source="show.value")
    screen = serializers.CharField()
    movie = serializers.CharField()
    movieLanguage = serializers.CharField(source="movie_language")
    bookedSeats = serializers.ListField(child=serializers.CharField(), source="seat_ids")
    seatCount = serializers.IntegerField(source="seat_count")
    classLabel = serializers.CharField(source="class_label")
    pricePerSeat = money_field("price_per_seat")
    totalPrice = money_field("total_price")
    source = serializers.CharField(source="source.value")
    synced = serializers.BooleanField()
    bookedAt = serializers.DateTimeField(source="booked_at")
    printedAt = serializers.DateTimeField(source="printed_at", allow_null=True)
    customerName = serializers.CharField(source="customer_name")
    customerPhone = serializers.CharField(source="customer_phone")
    notes = serializers.CharField()
    totalIncome = money_field("total_income")
    localIncome = money_field("local_income")
    bmsIncome = money_field("bms_income")
    vipIncome = money_field("vip_income")


class ClassStatsSerializer(serializers.Serializer):
    classLabel = serializers.CharField(source="class_label")
    count = serializers.IntegerField()
    revenue = money_field("revenue", max_digits=None)


class BookingStatsSerializer(serializers.Serializer):
    totalBookings = serializers.IntegerField(source="total_bookings")
    totalRevenue = money_field("total_revenue", max_digits=None)
    byClass = ClassStatsSerializer(source="by_class", many=True)


class BmsBookingSerializer(serializers.Serializer):
    seatId = serializers.CharField(source="seat_id")
    date = serializers.DateField()
    show = serializers.CharField(source="show.value")
    classLabel = serializers.CharField(source="class_label")
    status = serializers.CharField(source="status.value")
    createdAt = serializers.DateTimeField(source="created_at")


class SeatStatusSnapshotSerializer(serializers.Serializer):
    date = serializers.DateField()
    show = serializers.CharField(source="show.value")
    bookedSeats = serializers.ListField(child=serializers.CharField(), source="booked")
    bmsSeats = serializers.ListField(child=serializers.CharField(), source="bms")
    selectedSeats = serializers.ListField(child=serializers.CharField(), source="selected")
    blockedSeats = serializers.ListField(child=serializers.CharField(), source="blocked")


class PriceQuoteSerializer(serializers.Serializer):
    classLabel = serializers.CharField(source="class_label")
    price = money_field("price")


class TicketNumberSerializer(serializers.Serializer):
    ticketId = serializers.CharField(source="*")
    currentValue = serializers.IntegerField(source="current")


class SeatGroupSerializer(serializers.Serializer):
    row = serializers.CharField()
    numbers = serializers.CharField()


class TaxBreakdownSerializer(serializers.Serializer):
    net = money_field("net")
    cgst = money_field("cgst")
    sgst = money_field("sgst")
    maintenanceCharge = money_field("maintenance_charge")
    total = money_field("total")


class TicketFieldsSerializer(serializers.Serializer):
    ticketId = serializers.CharField(source="ticket_id", allow_null=True)
    theaterName = serializers.CharField(source="theater_name")
    location = serializers.CharField()
    gstin = serializers.CharField()
    movie = serializers.CharField()
    movieLanguage = serializers.CharField(source="movie_language")
    date = serializers.CharField()
    show = serializers.CharField()
    showLabel = serializers.CharField(source="show_label")
    showTime = serializers.CharField(source="show_time")
    screen = serializers.CharField()
    classLabel = serializers.CharField(source="class_label")
    seats = SeatGroupSerializer(many=True)
    seatCount = serializers.IntegerField(source="seat_count")
    pricePerSeat = money_field("price_per_seat")
    taxes = TaxBreakdownSerializer()
    total = money_field("total")
