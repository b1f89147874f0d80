from typing import TYPE_CHECKING, Annotated

from dependency_injector.wiring import Provide, inject

from booking_api.celery import app
from webhooks.constants import WebhookStatus
from webhooks.exceptions import WebhookDeliveryError
from webhooks.models import WebhookEvent


if TYPE_CHECKING:
    from webhooks.services import WebhookService


@app.task
@inject
def process_webhook_event(
    event_id: int,
    webhook_service: Annotated["WebhookService | None", Provide["webhook_service"]] = None,
):
    if not webhook_service:
        return

    webhook_event = WebhookEvent.objects.filter(id=event_id, status=WebhookStatus.PENDING).first()

    if not webhook_event:
        return

    webhook_event = webhook_service.process_webhook_event(event=webhook_event)
    if webhook_event.status == WebhookStatus.FAILED:
        # failed deliveries fail the task
        raise WebhookDeliveryError(
            webhook_event.url,
            str(webhook_event.response_status or (webhook_event.response_body or {}).get("error")),
        )
