"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models

SHOW_CHOICES = [
    ("MORNING", "Morning"),
    ("MATINEE", "Matinee"),
    ("EVENING", "Evening"),
    ("NIGHT", "Night"),
]

SOURCE_CHOICES = [
    ("LOCAL", "Local"),
    ("BMS", "BMS"),
    ("VIP", "VIP"),
    ("ONLINE", "Online"),
]

SEAT_STATUS_CHOICES = [
    ("AVAILABLE", "Available"),
    ("BLOCKED", "Blocked"),
]


class Booking(models.Model):
    """Persistence model for bookings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateField()
    show = models.CharField(max_length=10, choices=SHOW_CHOICES)
    screen = models.CharField(max_length=50)
    movie = models.CharField(max_length=255)
    movie_language = models.CharField(max_length=50, default="HINDI")
    booked_seats = models.JSONField(default=list)
    seat_count = models.PositiveIntegerField()
    class_label = models.CharField(max_length=50)
    price_per_seat = models.DecimalField(max_digits=10, decimal_places=2)
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    source = models.CharField(max_length=10, choices=SOURCE_CHOICES, default="LOCAL")
    synced = models.BooleanField(default=False)
    customer_name = models.CharField(max_length=100, blank=True, default="")
    customer_phone = models.CharField(max_length=20, blank=True, default="")
    notes = models.TextField(blank=True, default="")
    total_income = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    local_income = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    bms_income = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    vip_income = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    booked_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    printed_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ["-booked_at"]
        indexes = [
            models.Index(fields=["date", "show"], name="booking_date_show_idx"),
            models.Index(fields=["class_label"], name="booking_class_label_idx"),
            models.Index(fields=["-booked_at"], name="booking_booked_at_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.movie} - {self.date} {self.show} ({self.seat_count} seats)"


class BookedSeat(models.Model):
    """One row per seat of a booking; keeps a seat unique per date and show."""

    booking = models.ForeignKey(
        Booking, on_delete=models.CASCADE, related_name="seats"
    )
    seat_id = models.CharField(max_length=20)
    date = models.DateField()
    show = models.CharField(max_length=10, choices=SHOW_CHOICES)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["date", "show", "seat_id"],
                name="unique_booked_seat_per_show",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.seat_id} - {self.date} {self.show}"


class BmsBooking(models.Model):
    """Persistence model for seats sold through the BMS channel."""

    seat_id = models.CharField(max_length=20)
    date = models.DateField()
    show = models.CharField(max_length=10, choices=SHOW_CHOICES)
    class_label = models.CharField(max_length=50)
    status = models.CharField(max_length=20, default="BMS_BOOKED")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["seat_id", "date", "show"],
                name="unique_bms_seat_per_show",
            ),
        ]
        indexes = [
            models.Index(fields=["date", "show"], name="bms_date_show_idx"),
        ]

    def __str__(self) -> str:
        return f"BMS {self.seat_id} - {self.date} {self.show}"


class Seat(models.Model):
    """Persistence model for the seat catalog."""

    seat_id = models.CharField(max_length=20, unique=True)
    row = models.CharField(max_length=10)
    number = models.PositiveIntegerField()
    class_label = models.CharField(max_length=50)
    status = models.CharField(
        max_length=10, choices=SEAT_STATUS_CHOICES, default="AVAILABLE"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["row", "number"]
        indexes = [
            models.Index(fields=["class_label"], name="seat_class_label_idx"),
        ]

    def __str__(self) -> str:
        return self.seat_id


class TheaterSetting(models.Model):
    """Key/value store for operator-edited settings."""

    key = models.CharField(max_length=100, unique=True)
    value = models.JSONField(default=dict)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.key


class TicketCounter(models.Model):
    """Sequential printed-ticket number."""

    name = models.CharField(max_length=50, unique=True)
    current_value = models.PositiveIntegerField(default=0)
    prefix = models.CharField(max_length=10, default="TKT")
    padding = models.PositiveSmallIntegerField(default=6)

    def __str__(self) -> str:
        return f"{self.name}: {self.current_value}"
