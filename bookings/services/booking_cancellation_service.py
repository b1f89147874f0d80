import logging
from concurrent.futures import ThreadPoolExecutor

from django.db import DatabaseError, transaction
from django.db.models import Prefetch
from django.utils import timezone

from bookings.constants import BookingStatus
from bookings.exceptions import BookingNotFoundError, BookingPersistenceError
from bookings.models import Attendee, Booking, BookingReference
from bookings.services.remote_artifact_reconciler import RemoteArtifactReconciler
from common.concurrency import bind_request_context
from users.models import User
from webhooks.constants import WebhookTrigger
from webhooks.services import WebhookService
from webhooks.services.payloads import BookingWebhookPayload, PersonWebhookPayload


logger = logging.getLogger(__name__)


class BookingCancellationService:
    """
    Cancels bookings.

    The CANCELLED status is committed before anything is removed, so a booking never loses its
    remote artifacts while still showing as active. Webhooks, remote deletions and local cleanup
    are best-effort: their failures are logged and never change the outcome of `cancel`.
    """

    def __init__(
        self,
        webhook_service: WebhookService,
        remote_artifact_reconciler: RemoteArtifactReconciler,
    ):
        self.webhook_service = webhook_service
        self.remote_artifact_reconciler = remote_artifact_reconciler

    def get_booking(self, uid: str) -> Booking:
        if not uid:
            logger.info("Cancellation requested without a booking uid")
            raise BookingNotFoundError()

        booking = (
            Booking.objects.select_related("user")
            .prefetch_related(
                "user__credentials",
                "attendees",
                Prefetch("references", queryset=BookingReference.objects.order_by("id")),
            )
            .filter(uid=uid)
            .first()
        )
        if booking is None:
            logger.info("Booking %s not found", uid)
            raise BookingNotFoundError()
        return booking

    def get_organizer(self, booking: Booking) -> PersonWebhookPayload | None:
        if booking.user_id is None:
            return None

        try:
            organizer = (
                User.objects.filter(pk=booking.user_id)
                .values("name", "email", "time_zone")
                .first()
            )
        except DatabaseError:
            logger.exception("Failed to load organizer of booking %s", booking.uid)
            return None

        if organizer is None:
            return None
        return {
            "name": organizer["name"],
            "email": organizer["email"],
            "time_zone": organizer["time_zone"],
        }

    def build_cancellation_payload(
        self,
        booking: Booking,
        organizer: PersonWebhookPayload | None,
        attendees: list[Attendee],
    ) -> BookingWebhookPayload:
        return {
            "type": booking.title,
            "title": booking.title,
            "description": booking.description or "",
            "start_time": booking.start_time.isoformat(),
            "end_time": booking.end_time.isoformat(),
            "organizer": organizer,
            "attendees": [
                {"name": attendee.name, "email": attendee.email, "time_zone": attendee.time_zone}
                for attendee in attendees
            ],
        }

    def cancel(self, uid: str) -> None:
        """
        Cancel the booking identified by `uid`.

        Raises:
            BookingNotFoundError: No booking has this `uid`. Nothing was changed.
            BookingPersistenceError: The status could not be saved. The booking keeps its previous
                status and nothing was deleted.
        """
        booking = self.get_booking(uid)
        logger.info("Cancelling booking %s", booking.uid)

        credentials = list(booking.user.credentials.all()) if booking.user else []
        attendees = list(booking.attendees.all())
        references = list(booking.references.all())

        payload = self.build_cancellation_payload(
            booking=booking,
            organizer=self.get_organizer(booking),
            attendees=attendees,
        )
        self.webhook_service.notify(
            owner_id=booking.user_id,
            event_type_id=booking.event_type_id,
            trigger=WebhookTrigger.BOOKING_CANCELLED,
            created_at=timezone.now(),
            payload=payload,
        )

        if not self._commit_cancelled_status(booking):
            # Deleted after it was loaded: its attendees and references went with it
            logger.warning("Booking %s was deleted while being cancelled", booking.uid)
            return

        with ThreadPoolExecutor(max_workers=1, thread_name_prefix="booking-cancellation") as executor:
            reconciliation = executor.submit(
                bind_request_context(self.remote_artifact_reconciler.reconcile),
                credentials,
                references,
            )
            self._delete_attendees(booking)
            self._delete_references(booking)

            try:
                results = reconciliation.result()
            except Exception:
                logger.exception("Remote artifact deletion crashed for booking %s", booking.uid)
            else:
                failed = [result for result in results if result.status == "failed"]
                if failed:
                    logger.warning(
                        "Booking %s cancelled with %d remote artifact(s) left undeleted",
                        booking.uid,
                        len(failed),
                    )

    def _commit_cancelled_status(self, booking: Booking) -> bool:
        try:
            with transaction.atomic():
                updated = Booking.objects.filter(uid=booking.uid).update(
                    status=BookingStatus.CANCELLED
                )
        except DatabaseError as e:
            logger.exception("Failed to save cancelled status of booking %s", booking.uid)
            raise BookingPersistenceError() from e

        return updated > 0

    def _delete_attendees(self, booking: Booking) -> None:
        try:
            Attendee.objects.filter(booking_id=booking.pk).delete()
        except DatabaseError:
            logger.exception("Failed to delete attendees of booking %s", booking.uid)

    def _delete_references(self, booking: Booking) -> None:
        try:
            BookingReference.objects.filter(booking_id=booking.pk).delete()
        except DatabaseError:
            logger.exception("Failed to delete references of booking %s", booking.uid)
