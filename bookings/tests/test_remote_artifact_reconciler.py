import logging
import threading
import time
from unittest.mock import Mock

import pytest
from django_guid import clear_guid, set_guid
from django_guid.log_filters import CorrelationId

from bookings.exceptions import RemoteArtifactDeletionError
from bookings.models import BookingReference
from bookings.services import RemoteArtifactReconciler
from calendar_integration.exceptions import GoogleCalendarAdapterError
from calendar_integration.services.calendar_service import CalendarService
from users.models import Credential
from video_integration.services.video_service import VideoService


def make_credential(pk, type):  # noqa: A002
    return Credential(id=pk, type=type, key={"access_token": f"token-{pk}"})


def make_reference(type, uid):  # noqa: A002
    return BookingReference(type=type, uid=uid)


@pytest.fixture
def calendar_service():
    return Mock(spec=CalendarService)


@pytest.fixture
def video_service():
    return Mock(spec=VideoService)


@pytest.fixture
def reconciler(calendar_service, video_service):
    return RemoteArtifactReconciler(
        calendar_service=calendar_service, video_service=video_service, max_concurrency=5
    )


def test_reconcile_deletes_calendar_event_and_video_meeting(
    reconciler, calendar_service, video_service
):
    google = make_credential(1, "google_calendar")
    zoom = make_credential(2, "zoom_video")

    results = reconciler.reconcile(
        [google, zoom],
        [make_reference("google_calendar", "cal-1"), make_reference("zoom_video", "zoom-1")],
    )

    calendar_service.delete_event.assert_called_once_with(google, "cal-1")
    video_service.delete_meeting.assert_called_once_with(zoom, "zoom-1")
    assert [(r.credential_id, r.reference_uid, r.status) for r in results] == [
        (1, "cal-1", "deleted"),
        (2, "zoom-1", "deleted"),
    ]


def test_reconcile_runs_provider_calls_concurrently(reconciler, calendar_service, video_service):
    # Each call waits for the other one, so both only succeed if they overlap
    barrier = threading.Barrier(2, timeout=5)
    calendar_service.delete_event.side_effect = lambda *args: barrier.wait()
    video_service.delete_meeting.side_effect = lambda *args: barrier.wait()

    results = reconciler.reconcile(
        [make_credential(1, "google_calendar"), make_credential(2, "zoom_video")],
        [make_reference("google_calendar", "cal-1"), make_reference("zoom_video", "zoom-1")],
    )

    assert [r.status for r in results] == ["deleted", "deleted"]


def test_calendar_failure_does_not_prevent_meeting_deletion(
    reconciler, calendar_service, video_service
):
    zoom = make_credential(2, "zoom_video")
    calendar_service.delete_event.side_effect = GoogleCalendarAdapterError("boom")

    results = reconciler.reconcile(
        [make_credential(1, "google_calendar"), zoom],
        [make_reference("google_calendar", "cal-1"), make_reference("zoom_video", "zoom-1")],
    )

    video_service.delete_meeting.assert_called_once_with(zoom, "zoom-1")
    failed, deleted = results
    assert failed.status == "failed"
    assert isinstance(failed.error, RemoteArtifactDeletionError)
    assert isinstance(failed.error.__cause__, GoogleCalendarAdapterError)
    assert deleted.status == "deleted"
    assert deleted.error is None


def test_credential_without_matching_reference_is_skipped(
    reconciler, calendar_service, video_service
):
    results = reconciler.reconcile(
        [make_credential(1, "outlook_calendar")],
        [make_reference("google_calendar", "cal-1")],
    )

    calendar_service.delete_event.assert_not_called()
    video_service.delete_meeting.assert_not_called()
    assert results[0].status == "skipped"
    assert results[0].error is None


def test_reference_with_empty_uid_is_skipped(reconciler, calendar_service):
    results = reconciler.reconcile(
        [make_credential(1, "google_calendar")],
        [make_reference("google_calendar", "")],
    )

    calendar_service.delete_event.assert_not_called()
    assert results[0].status == "skipped"


def test_first_matching_reference_wins(reconciler, calendar_service):
    google = make_credential(1, "google_calendar")

    reconciler.reconcile(
        [google],
        [make_reference("google_calendar", "first"), make_reference("google_calendar", "second")],
    )

    calendar_service.delete_event.assert_called_once_with(google, "first")


def test_unknown_credential_suffix_is_a_no_op(reconciler, calendar_service, video_service):
    results = reconciler.reconcile(
        [make_credential(1, "stripe_payment")],
        [make_reference("stripe_payment", "acct-1")],
    )

    calendar_service.delete_event.assert_not_called()
    video_service.delete_meeting.assert_not_called()
    assert results[0].status == "skipped"


def test_reconcile_without_credentials_returns_no_results(reconciler):
    assert reconciler.reconcile([], [make_reference("google_calendar", "cal-1")]) == []


def test_at_most_five_deletions_in_flight(calendar_service, video_service):
    lock = threading.Lock()
    in_flight = 0
    max_in_flight = 0

    def slow_delete(*args):
        nonlocal in_flight, max_in_flight
        with lock:
            in_flight += 1
            max_in_flight = max(max_in_flight, in_flight)
        time.sleep(0.05)
        with lock:
            in_flight -= 1

    calendar_service.delete_event.side_effect = slow_delete
    reconciler = RemoteArtifactReconciler(
        calendar_service=calendar_service, video_service=video_service, max_concurrency=5
    )
    credentials = [make_credential(pk, f"provider{pk}_calendar") for pk in range(12)]
    references = [make_reference(f"provider{pk}_calendar", f"event-{pk}") for pk in range(12)]

    results = reconciler.reconcile(credentials, references)

    assert calendar_service.delete_event.call_count == 12
    assert all(result.status == "deleted" for result in results)
    assert 1 < max_in_flight <= 5


def test_default_concurrency_limit_is_five(calendar_service, video_service):
    reconciler = RemoteArtifactReconciler(
        calendar_service=calendar_service, video_service=video_service
    )

    assert reconciler.max_concurrency == 5


def test_failure_logs_keep_the_request_correlation_id(reconciler, calendar_service):
    records = []

    class RecordingHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    handler = RecordingHandler()
    handler.addFilter(CorrelationId())
    reconciler_logger = logging.getLogger("bookings.services.remote_artifact_reconciler")
    reconciler_logger.addHandler(handler)
    calendar_service.delete_event.side_effect = GoogleCalendarAdapterError("boom")

    set_guid("req-123")
    try:
        reconciler.reconcile(
            [make_credential(1, "google_calendar")],
            [make_reference("google_calendar", "cal-1")],
        )
    finally:
        reconciler_logger.removeHandler(handler)
        clear_guid()

    assert [record.correlation_id for record in records] == ["req-123"]
