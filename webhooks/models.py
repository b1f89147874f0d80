from django.conf import settings
from django.db import models

from common.models import BaseModel
from webhooks.constants import WebhookStatus, WebhookTrigger


class WebhookConfiguration(BaseModel):
    """
    A subscriber endpoint. It receives `trigger` events for bookings owned by `user` or made
    for `event_type`.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="webhook_configurations",
    )
    event_type = models.ForeignKey(
        "bookings.EventType",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="webhook_configurations",
    )
    trigger = models.CharField(
        max_length=255,
        choices=WebhookTrigger,
        default=WebhookTrigger.BOOKING_CREATED,
    )
    url = models.URLField(max_length=2000)
    headers = models.JSONField(default=dict, blank=True)
    active = models.BooleanField(default=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        return f"WebhookConfiguration(id={self.id}, trigger={self.trigger}, url={self.url})"


class WebhookEvent(BaseModel):
    configuration = models.ForeignKey(
        WebhookConfiguration, on_delete=models.SET_NULL, null=True, blank=True
    )
    trigger = models.CharField(max_length=255, choices=WebhookTrigger)
    url = models.URLField(max_length=2000)
    status = models.CharField(
        max_length=50,
        choices=WebhookStatus,
        default=WebhookStatus.PENDING,
    )
    headers = models.JSONField(default=dict, blank=True)
    payload = models.JSONField()
    response_status = models.PositiveBigIntegerField(null=True, blank=True)
    response_body = models.JSONField(null=True, blank=True)
    response_headers = models.JSONField(null=True, blank=True)

    def __str__(self):
        return f"WebhookEvent(id={self.id}, trigger={self.trigger}, url={self.url})"
