import logging

from calendar_integration.constants import CalendarProvider
from calendar_integration.services.protocols.calendar_adapter import CalendarAdapter
from users.models import Credential


logger = logging.getLogger(__name__)


class CalendarService:
    """Removes calendar events from the provider a credential belongs to."""

    @staticmethod
    def _get_calendar_adapter_cls_for_provider(provider: str) -> type[CalendarAdapter] | None:
        if provider == CalendarProvider.GOOGLE:
            from calendar_integration.services.calendar_adapters.google_calendar_adapter import (
                GoogleCalendarAdapter,
            )

            return GoogleCalendarAdapter

        if provider == CalendarProvider.MICROSOFT:
            from calendar_integration.services.calendar_adapters.ms_outlook_calendar_adapter import (
                MSOutlookCalendarAdapter,
            )

            return MSOutlookCalendarAdapter

        return None

    def get_calendar_adapter_for_credential(self, credential: Credential) -> CalendarAdapter | None:
        """
        Build the calendar adapter matching the credential type.
        :param credential: Credential with a `*_calendar` type.
        :return: CalendarAdapter instance, or None when the provider has no adapter.
        """
        calendar_adapter_cls = self._get_calendar_adapter_cls_for_provider(credential.type)
        if calendar_adapter_cls is None:
            return None
        return calendar_adapter_cls(credentials_dict=credential.key)

    def delete_event(self, credential: Credential, event_uid: str) -> None:
        """
        Delete a calendar event created on behalf of the credential owner.
        :param credential: Credential giving access to the provider calendar.
        :param event_uid: External event identifier stored in the booking reference.
        """
        calendar_adapter = self.get_calendar_adapter_for_credential(credential)
        if calendar_adapter is None:
            logger.warning(
                "No calendar adapter for credential type %s, skipping event %s",
                credential.type,
                event_uid,
            )
            return

        calendar_adapter.delete_event(event_uid)
