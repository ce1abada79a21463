from boxoffice.handlers.views import (
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

__all__ = [
    "BmsSeatsView",
    "BookingDetailView",
    "BookingListView",
    "BookingStatsView",
    "BookingSyncedView",
    "BookingTicketView",
    "HealthView",
    "SeatPriceView",
    "SeatStatusView",
    "SettingsView",
    "TicketIdCurrentView",
    "TicketIdNextView",
    "TicketIdResetView",
]
