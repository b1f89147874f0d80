import logging
from typing import TypedDict

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from calendar_integration.constants import DEFAULT_CALENDAR_ID, CalendarProvider
from calendar_integration.exceptions import GoogleCalendarAdapterError, GoogleCredentialsError
from calendar_integration.services.protocols.calendar_adapter import CalendarAdapter


logger = logging.getLogger(__name__)

# Google answers these when the event was already removed
ALREADY_DELETED_STATUSES = {404, 410}


class GoogleCredentialTypedDict(TypedDict):
    access_token: str
    refresh_token: str


class GoogleCalendarAdapter(CalendarAdapter):
    provider = CalendarProvider.GOOGLE

    def __init__(self, credentials_dict: GoogleCredentialTypedDict):
        GOOGLE_CLIENT_ID = getattr(settings, "GOOGLE_CLIENT_ID", None)  # noqa: N806
        GOOGLE_CLIENT_SECRET = getattr(settings, "GOOGLE_CLIENT_SECRET", None)  # noqa: N806
        if not GOOGLE_CLIENT_ID or not GOOGLE_CLIENT_SECRET:
            raise ImproperlyConfigured(
                "Google Calendar integration requires GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET settings."
            )

        credentials = Credentials(
            token=credentials_dict.get("access_token"),
            refresh_token=credentials_dict.get("refresh_token"),
            token_uri="https://oauth2.googleapis.com/token",  # noqa: S106
            client_id=GOOGLE_CLIENT_ID,
            client_secret=GOOGLE_CLIENT_SECRET,
        )
        if not credentials.valid and credentials.refresh_token:
            try:
                credentials.refresh(Request())
            except RefreshError as e:
                raise GoogleCredentialsError() from e
        elif not credentials.valid:
            raise GoogleCredentialsError()

        self.client = build("calendar", "v3", credentials=credentials)

    def delete_event(self, event_id: str, calendar_id: str | None = None) -> None:
        try:
            self.client.events().delete(
                calendarId=calendar_id or DEFAULT_CALENDAR_ID,
                eventId=event_id,
                sendUpdates="all",
            ).execute()
        except HttpError as e:
            if e.resp.status in ALREADY_DELETED_STATUSES:
                logger.info("Google Calendar event %s was already deleted", event_id)
                return
            raise GoogleCalendarAdapterError(f"Failed to delete event: {e}") from e
