from django.contrib import admin

from bookings.models import Attendee, Booking, BookingReference, EventType


class AttendeeInline(admin.TabularInline):
    model = Attendee
    fields = ("name", "email", "time_zone")
    extra = 0


class BookingReferenceInline(admin.TabularInline):
    model = BookingReference
    fields = ("type", "uid")
    extra = 0


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("id", "uid", "title", "user", "status", "start_time", "end_time")
    list_filter = ("status",)
    search_fields = ("uid", "title", "user__email")
    readonly_fields = ("uid", "created", "modified")
    inlines = (AttendeeInline, BookingReferenceInline)


@admin.register(EventType)
class EventTypeAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "slug", "user", "length")
    search_fields = ("title", "slug", "user__email")
