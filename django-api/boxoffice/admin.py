from django.contrib import admin

from boxoffice.models import BmsBooking, BookedSeat, Booking, Seat, TheaterSetting, TicketCounter


class BookedSeatInline(admin.TabularInline):
    model = BookedSeat
    extra = 0
    readonly_fields = ["seat_id", "date", "show"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["id", "date", "show", "movie", "seat_count", "total_price", "source", "synced"]
    list_filter = ["date", "show", "source", "synced"]
    search_fields = ["movie", "customer_name", "customer_phone"]
    inlines = [BookedSeatInline]


@admin.register(BmsBooking)
class BmsBookingAdmin(admin.ModelAdmin):
    list_display = ["seat_id", "date", "show", "class_label", "status"]
    list_filter = ["date", "show"]


@admin.register(Seat)
class SeatAdmin(admin.ModelAdmin):
    list_display = ["seat_id", "class_label", "status"]
    list_filter = ["class_label", "status"]
    search_fields = ["seat_id"]


@admin.register(TheaterSetting)
class TheaterSettingAdmin(admin.ModelAdmin):
    list_display = ["key", "updated_at"]


@admin.register(TicketCounter)
class TicketCounterAdmin(admin.ModelAdmin):
    list_display = ["name", "prefix", "current_value", "padding"]
