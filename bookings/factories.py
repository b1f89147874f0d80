import datetime

from django.utils import timezone

from model_bakery import baker

from bookings.constants import BookingStatus
from bookings.models import Attendee, Booking, BookingReference, EventType
from users.models import User


class BookingFactory:
    def create_event_type(self, user: User, **kwargs) -> EventType:
        return baker.make(
            EventType,
            user=user,
            title=kwargs.get("title", "30 Minute Meeting"),
            slug=kwargs.get("slug", "30min"),
            length=kwargs.get("length", 30),
        )

    def create_booking(self, user: User | None, **kwargs) -> Booking:
        start_time = kwargs.get("start_time", timezone.now() + datetime.timedelta(days=1))
        return baker.make(
            Booking,
            user=user,
            event_type=kwargs.get("event_type"),
            title=kwargs.get("title", "Intro call"),
            description=kwargs.get("description", ""),
            start_time=start_time,
            end_time=kwargs.get("end_time", start_time + datetime.timedelta(minutes=30)),
            status=kwargs.get("status", BookingStatus.ACCEPTED),
        )

    def create_attendee(self, booking: Booking, **kwargs) -> Attendee:
        return baker.make(
            Attendee,
            booking=booking,
            name=kwargs.get("name", "Guest"),
            email=kwargs.get("email", "guest@example.com"),
            time_zone=kwargs.get("time_zone", "UTC"),
        )

    def create_reference(self, booking: Booking, type: str, uid: str) -> BookingReference:  # noqa: A002
        return baker.make(BookingReference, booking=booking, type=type, uid=uid)
