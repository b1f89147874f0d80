from dependency_injector import containers, providers

from bookings.services import BookingCancellationService, RemoteArtifactReconciler
from calendar_integration.services.calendar_service import CalendarService
from video_integration.services.video_service import VideoService
from webhooks.services import WebhookService


# Modules holding `Provide` markers
WIRED_MODULES = [
    "bookings.views",
    "webhooks.tasks",
]


class AppContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    webhook_service = providers.Factory(
        WebhookService,
    )

    calendar_service = providers.Factory(
        CalendarService,
    )

    video_service = providers.Factory(
        VideoService,
        daily_api_key=config.DAILY_API_KEY,
    )

    remote_artifact_reconciler = providers.Factory(
        RemoteArtifactReconciler,
        calendar_service=calendar_service,
        video_service=video_service,
        max_concurrency=config.REMOTE_ARTIFACT_DELETION_CONCURRENCY,
    )

    booking_cancellation_service = providers.Factory(
        BookingCancellationService,
        webhook_service=webhook_service,
        remote_artifact_reconciler=remote_artifact_reconciler,
    )


container: AppContainer | None = None  # set during app startup
