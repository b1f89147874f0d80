from collections.abc import Callable

from django.conf import settings
from django.db import models

from cuid2 import cuid_wrapper

from bookings.constants import BookingStatus
from common.models import BaseModel


cuid_generator: Callable[[], str] = cuid_wrapper()


def generate_booking_uid() -> str:
    return cuid_generator()


class EventType(BaseModel):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="event_types"
    )
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255)
    length = models.PositiveIntegerField(help_text="Duration in minutes")

    def __str__(self):
        return self.title


class Booking(BaseModel):
    """
    A scheduled appointment between its owner and the attendees. Cancelling only moves `status`
    to CANCELLED, the row itself is kept.
    """

    uid = models.CharField(max_length=255, unique=True, default=generate_booking_uid)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    event_type = models.ForeignKey(
        EventType,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    status = models.CharField(
        max_length=50,
        choices=BookingStatus,
        default=BookingStatus.ACCEPTED,
    )

    def __str__(self):
        return f"{self.title} ({self.uid})"


class Attendee(BaseModel):
    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="attendees")
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    time_zone = models.CharField(max_length=255, default="UTC")

    def __str__(self):
        return f"{self.name} <{self.email}>"


class BookingReference(BaseModel):
    """External identifier a provider assigned to an artifact created for a booking."""

    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="references")
    type = models.CharField(max_length=255)  # noqa: A003
    uid = models.CharField(max_length=255)

    def __str__(self):
        return f"BookingReference(type={self.type}, uid={self.uid})"
