from django.urls import path

from boxoffice.handlers import (
    BmsSeatsView,
    BookingDetailView,
    BookingListView,
    BookingStatsView,
    BookingSyncedView,
    BookingTicketView,
    HealthView,
    SeatPriceView,
    SeatStatusView,
    SettingsView,
    TicketIdCurrentView,
    TicketIdNextView,
    TicketIdResetView,
)

urlpatterns = [
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/stats", BookingStatsView.as_view(), name="booking-stats"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path(
        "bookings/<str:booking_id>/synced",
        BookingSyncedView.as_view(),
        name="booking-synced",
    ),
    path(
        "bookings/<str:booking_id>/ticket",
        BookingTicketView.as_view(),
        name="booking-ticket",
    ),
    path("seats/status", SeatStatusView.as_view(), name="seat-status"),
    path("seats/bms", BmsSeatsView.as_view(), name="seat-bms"),
    path("seats/price", SeatPriceView.as_view(), name="seat-price"),
    path("settings", SettingsView.as_view(), name="settings"),
    path("ticket-id/current", TicketIdCurrentView.as_view(), name="ticket-id-current"),
    path("ticket-id/next", TicketIdNextView.as_view(), name="ticket-id-next"),
    path("ticket-id/reset", TicketIdResetView.as_view(), name="ticket-id-reset"),
    path("health", HealthView.as_view(), name="health"),
]
