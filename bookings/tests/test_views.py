import json
from unittest.mock import Mock, patch

from django.urls import reverse

import pytest
from rest_framework import status

from bookings.constants import BookingStatus
from bookings.exceptions import BookingNotFoundError, BookingPersistenceError
from bookings.factories import BookingFactory
from bookings.models import Attendee, BookingReference
from bookings.services import BookingCancellationService
from calendar_integration.services.calendar_service import CalendarService
from users.factories import CredentialFactory
from webhooks.constants import WebhookStatus, WebhookTrigger
from webhooks.models import WebhookConfiguration, WebhookEvent


def assert_response_status_code(response, expected_status_code):
    assert response.status_code == expected_status_code, (
        f"The status error {response.status_code} != {expected_status_code}\n"
        f"Response Payload: {json.dumps(response.data) if response.data else ''}"
    )


@pytest.fixture
def url():
    return reverse("booking-cancel")


@pytest.fixture
def mock_cancellation_service():
    return Mock(spec=BookingCancellationService)


@pytest.mark.django_db
class TestCancelBookingView:
    @pytest.mark.parametrize("method", ["post", "delete"])
    def test_cancel_returns_no_content(
        self, api_client, url, di_container, mock_cancellation_service, method
    ):
        with di_container.booking_cancellation_service.override(mock_cancellation_service):
            response = getattr(api_client, method)(url, {"uid": "booking-uid"}, format="json")

        assert_response_status_code(response, status.HTTP_204_NO_CONTENT)
        assert not response.content
        mock_cancellation_service.cancel.assert_called_once_with("booking-uid")

    @pytest.mark.parametrize("method", ["get", "put", "patch", "options"])
    def test_other_methods_are_not_allowed(
        self, api_client, url, di_container, mock_cancellation_service, method
    ):
        with di_container.booking_cancellation_service.override(mock_cancellation_service):
            response = getattr(api_client, method)(url, {"uid": "booking-uid"}, format="json")

        assert_response_status_code(response, status.HTTP_405_METHOD_NOT_ALLOWED)
        mock_cancellation_service.cancel.assert_not_called()

    def test_unknown_booking_returns_not_found(
        self, api_client, url, di_container, mock_cancellation_service
    ):
        mock_cancellation_service.cancel.side_effect = BookingNotFoundError()

        with di_container.booking_cancellation_service.override(mock_cancellation_service):
            response = api_client.post(url, {"uid": "missing"}, format="json")

        assert_response_status_code(response, status.HTTP_404_NOT_FOUND)
        assert response.data["detail"] == "Booking not found."

    @pytest.mark.parametrize("body", [{}, {"uid": 123}, {"uid": ["a", "b"]}, {"uid": None}])
    def test_missing_or_non_string_uid_is_treated_as_empty(
        self, api_client, url, di_container, mock_cancellation_service, body
    ):
        with di_container.booking_cancellation_service.override(mock_cancellation_service):
            api_client.post(url, body, format="json")

        mock_cancellation_service.cancel.assert_called_once_with("")

    def test_status_commit_failure_returns_server_error(
        self, api_client, url, di_container, mock_cancellation_service
    ):
        mock_cancellation_service.cancel.side_effect = BookingPersistenceError()

        with di_container.booking_cancellation_service.override(mock_cancellation_service):
            response = api_client.delete(url, {"uid": "booking-uid"}, format="json")

        assert_response_status_code(response, status.HTTP_500_INTERNAL_SERVER_ERROR)
        assert response.data["code"] == "booking_cancellation_failed"
        assert response.data["detail"]


@pytest.mark.django_db
class TestCancelBookingEndToEnd:
    def test_cancel_booking(self, api_client, url, di_container, user):
        event_type = BookingFactory().create_event_type(user)
        booking = BookingFactory().create_booking(user, event_type=event_type)
        BookingFactory().create_attendee(booking)
        BookingFactory().create_reference(booking, "google_calendar", "cal-1")
        credential = CredentialFactory().create_credential(user, "google_calendar")
        configuration = WebhookConfiguration.objects.create(
            event_type=event_type,
            trigger=WebhookTrigger.BOOKING_CANCELLED,
            url="https://example.com/webhook",
        )
        mock_calendar_service = Mock(spec=CalendarService)

        with (
            di_container.calendar_service.override(mock_calendar_service),
            patch("webhooks.services.webhook_service.requests.post") as mock_post,
        ):
            mock_post.return_value = Mock(status_code=200, headers={}, json=Mock(return_value={}))
            response = api_client.post(url, {"uid": booking.uid}, format="json")

        assert_response_status_code(response, status.HTTP_204_NO_CONTENT)
        booking.refresh_from_db()
        assert booking.status == BookingStatus.CANCELLED
        assert not Attendee.objects.filter(booking=booking).exists()
        assert not BookingReference.objects.filter(booking=booking).exists()
        mock_calendar_service.delete_event.assert_called_once_with(credential, "cal-1")

        webhook_event = WebhookEvent.objects.get(configuration=configuration)
        assert webhook_event.status == WebhookStatus.SUCCESS
        assert webhook_event.payload["trigger_event"] == WebhookTrigger.BOOKING_CANCELLED
        assert webhook_event.payload["payload"]["title"] == booking.title
        mock_post.assert_called_once()

    def test_cancel_unknown_booking(self, api_client, url):
        response = api_client.delete(url, {"uid": "does-not-exist"}, format="json")

        assert_response_status_code(response, status.HTTP_404_NOT_FOUND)
