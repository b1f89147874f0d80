import datetime
import logging

from django.db import DatabaseError
from django.db.models import Q, QuerySet

import requests

from webhooks.constants import WebhookStatus, WebhookTrigger
from webhooks.models import WebhookConfiguration, WebhookEvent
from webhooks.services.payloads import WebhookEnvelope
from webhooks.tasks import process_webhook_event


logger = logging.getLogger(__name__)


class WebhookService:
    def get_subscriber_configurations(
        self, owner_id: int | None, event_type_id: int | None, trigger: WebhookTrigger
    ) -> QuerySet[WebhookConfiguration]:
        """
        Active configurations subscribed to `trigger` either through the booking owner or through
        the booking's event type.
        """
        subscriber_filter = Q()
        if owner_id is not None:
            subscriber_filter |= Q(user_id=owner_id)
        if event_type_id is not None:
            subscriber_filter |= Q(event_type_id=event_type_id)
        if not subscriber_filter:
            return WebhookConfiguration.objects.none()

        return WebhookConfiguration.objects.filter(
            subscriber_filter, trigger=trigger, active=True, deleted_at__isnull=True
        ).order_by("id")

    def get_subscriber_urls(
        self, owner_id: int | None, event_type_id: int | None, trigger: WebhookTrigger
    ) -> list[str]:
        return list(
            self.get_subscriber_configurations(owner_id, event_type_id, trigger).values_list(
                "url", flat=True
            )
        )

    def notify(
        self,
        owner_id: int | None,
        event_type_id: int | None,
        trigger: WebhookTrigger,
        created_at: datetime.datetime,
        payload: dict,
    ) -> None:
        """
        Fire-and-forget dispatch of `payload` to every subscriber of `trigger`.

        Deliveries run on Celery and are never awaited here. Failures to look up subscribers or to
        schedule a delivery are logged and never raised, so callers can go on regardless.
        """
        try:
            configurations = list(
                self.get_subscriber_configurations(owner_id, event_type_id, trigger)
            )
        except DatabaseError:
            logger.exception("Failed to look up %s webhook subscribers", trigger)
            return

        for configuration in configurations:
            try:
                self.send_payload(
                    trigger=trigger,
                    created_at=created_at,
                    url=configuration.url,
                    payload=payload,
                    headers=configuration.headers,
                    configuration=configuration,
                )
            except Exception:
                logger.exception(
                    "Failed to dispatch %s webhook to %s", trigger, configuration.url
                )

    def send_payload(
        self,
        trigger: WebhookTrigger,
        created_at: datetime.datetime,
        url: str,
        payload: dict,
        headers: dict | None = None,
        configuration: WebhookConfiguration | None = None,
    ) -> WebhookEvent:
        """
        Record a webhook event for `url` and schedule its delivery.

        Args:
            trigger (WebhookTrigger): The event that happened.
            created_at (datetime): When it happened, sent as ISO-8601.
            url (str): Subscriber endpoint.
            payload (dict): The event body, wrapped in the webhook envelope.
        """
        envelope: WebhookEnvelope = {
            "trigger_event": trigger,
            "created_at": created_at.isoformat(),
            "payload": payload,
        }
        webhook_event = WebhookEvent.objects.create(
            configuration=configuration,
            trigger=trigger,
            url=url,
            headers=headers or {},
            payload=envelope,
        )
        self._schedule_webhook_event(event=webhook_event)
        return webhook_event

    def _schedule_webhook_event(self, event: WebhookEvent):
        process_webhook_event.delay(event_id=event.pk)

    def process_webhook_event(self, event: WebhookEvent) -> WebhookEvent:
        """
        Process a webhook event by sending an HTTP POST request to its URL. There is a single
        attempt per event.

        Args:
            event (WebhookEvent): The webhook event to process.

        Return:
            WebhookEvent: The processed webhook event.
        """

        try:
            response = requests.post(
                event.url,
                headers=event.headers,
                json=event.payload,
                timeout=60,
            )
        except requests.RequestException as e:
            event.status = WebhookStatus.FAILED
            event.response_body = {"error": str(e)}
            event.save()
            logger.warning("Webhook event %s to %s failed: %s", event.pk, event.url, e)
            return event

        event.status = (
            WebhookStatus.SUCCESS
            if response.status_code >= 200 and response.status_code < 300
            else WebhookStatus.FAILED
        )
        event.response_status = response.status_code
        try:
            event.response_body = {"body": response.json()}
        except ValueError:
            event.response_body = {"body": response.text}
        event.response_headers = dict(response.headers)
        event.save()

        if event.status == WebhookStatus.FAILED:
            logger.warning(
                "Webhook event %s to %s answered %s", event.pk, event.url, response.status_code
            )

        return event
