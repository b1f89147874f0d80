import logging
from typing import TypedDict

from calendar_integration.constants import CalendarProvider
from calendar_integration.exceptions import MSGraphCredentialsError, MSOutlookAdapterError
from calendar_integration.services.calendar_clients.ms_outlook_calendar_api_client import (
    MSGraphAPIError,
    MSOutlookCalendarAPIClient,
)
from calendar_integration.services.protocols.calendar_adapter import CalendarAdapter


logger = logging.getLogger(__name__)


class MSOutlookCredentialTypedDict(TypedDict):
    access_token: str
    refresh_token: str


class MSOutlookCalendarAdapter(CalendarAdapter):
    provider = CalendarProvider.MICROSOFT

    def __init__(self, credentials_dict: MSOutlookCredentialTypedDict):
        access_token = credentials_dict.get("access_token")
        if not access_token:
            raise MSGraphCredentialsError()

        self.client = MSOutlookCalendarAPIClient(access_token=access_token)

    def delete_event(self, event_id: str, calendar_id: str | None = None) -> None:
        """Delete an event from the calendar."""
        try:
            self.client.delete_event(event_id, calendar_id)
        except MSGraphAPIError as e:
            if e.status_code == 404:
                logger.info("Outlook event %s was already deleted", event_id)
                return
            raise MSOutlookAdapterError(f"Failed to delete event: {e}") from e
