from typing import Protocol


class CalendarAdapter(Protocol):
    provider: str

    def __init__(self, credentials_dict: dict):
        ...

    def delete_event(self, event_id: str, calendar_id: str | None = None) -> None:
        """
        Delete an event from the provider calendar.
        :param event_id: External identifier of the event, as stored in the booking reference.
        :param calendar_id: Calendar holding the event. Providers fall back to the account's
            default calendar when omitted.
        """
        ...
