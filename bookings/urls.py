from django.db import transaction
from django.urls import path

from bookings.views import CancelBookingView


urlpatterns = [
    path(
        "cancel/",
        transaction.non_atomic_requests(CancelBookingView.as_view()),
        name="booking-cancel",
    ),
]
