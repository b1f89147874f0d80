from typing import TypedDict


class PersonWebhookPayload(TypedDict):
    name: str
    email: str
    time_zone: str


class BookingWebhookPayload(TypedDict):
    type: str  # noqa: A003
    title: str
    description: str
    start_time: str
    end_time: str
    organizer: PersonWebhookPayload | None
    attendees: list[PersonWebhookPayload]


class WebhookEnvelope(TypedDict):
    trigger_event: str
    created_at: str
    payload: BookingWebhookPayload | dict
