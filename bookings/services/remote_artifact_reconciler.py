import dataclasses
import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Literal

from bookings.exceptions import RemoteArtifactDeletionError
from bookings.models import BookingReference
from calendar_integration.constants import CALENDAR_CREDENTIAL_SUFFIX
from calendar_integration.services.calendar_service import CalendarService
from common.concurrency import bind_request_context
from users.models import Credential
from video_integration.constants import VIDEO_CREDENTIAL_SUFFIX
from video_integration.services.video_service import VideoService


logger = logging.getLogger(__name__)


DEFAULT_MAX_CONCURRENCY = 5


@dataclasses.dataclass(frozen=True)
class ArtifactDeletionResult:
    credential_id: int
    credential_type: str
    reference_uid: str | None
    status: Literal["deleted", "skipped", "failed"]
    error: Exception | None = None


class RemoteArtifactReconciler:
    """
    Deletes the calendar events and video meetings a booking created on external providers.

    One deletion is attempted per credential, against the first booking reference with the same
    provider type. Deletions run on a bounded thread pool and a provider failure is reported in
    that credential's result without affecting the others.
    """

    def __init__(
        self,
        calendar_service: CalendarService,
        video_service: VideoService,
        max_concurrency: int | None = None,
    ):
        self.calendar_service = calendar_service
        self.video_service = video_service
        self.max_concurrency = max_concurrency or DEFAULT_MAX_CONCURRENCY

    def reconcile(
        self,
        credentials: Iterable[Credential],
        references: Iterable[BookingReference],
    ) -> list[ArtifactDeletionResult]:
        """
        Delete the remote artifacts matching `credentials`.

        Both arguments must already be loaded, deletions run outside the request thread.

        Returns:
            list[ArtifactDeletionResult]: One result per credential, in the given order.
        """
        credentials = list(credentials)
        if not credentials:
            return []

        references_uid_by_type: dict[str, str] = {}
        for reference in references:
            references_uid_by_type.setdefault(reference.type, reference.uid)

        with ThreadPoolExecutor(
            max_workers=self.max_concurrency, thread_name_prefix="remote-artifact-deletion"
        ) as executor:
            futures = [
                executor.submit(
                    bind_request_context(self._delete_artifact),
                    credential,
                    references_uid_by_type.get(credential.type),
                )
                for credential in credentials
            ]
            return [future.result() for future in futures]

    def _delete_artifact(
        self, credential: Credential, reference_uid: str | None
    ) -> ArtifactDeletionResult:
        if not reference_uid:
            return ArtifactDeletionResult(
                credential_id=credential.pk,
                credential_type=credential.type,
                reference_uid=reference_uid,
                status="skipped",
            )

        try:
            deleted = self._dispatch_deletion(credential, reference_uid)
        except Exception as e:
            error = RemoteArtifactDeletionError(credential.type, reference_uid)
            error.__cause__ = e
            logger.warning(
                "Failed to delete %s artifact %s for credential %s",
                credential.type,
                reference_uid,
                credential.pk,
                exc_info=e,
            )
            return ArtifactDeletionResult(
                credential_id=credential.pk,
                credential_type=credential.type,
                reference_uid=reference_uid,
                status="failed",
                error=error,
            )

        return ArtifactDeletionResult(
            credential_id=credential.pk,
            credential_type=credential.type,
            reference_uid=reference_uid,
            status="deleted" if deleted else "skipped",
        )

    def _dispatch_deletion(self, credential: Credential, reference_uid: str) -> bool:
        if credential.type.endswith(CALENDAR_CREDENTIAL_SUFFIX):
            self.calendar_service.delete_event(credential, reference_uid)
            return True
        if credential.type.endswith(VIDEO_CREDENTIAL_SUFFIX):
            self.video_service.delete_meeting(credential, reference_uid)
            return True
        return False
