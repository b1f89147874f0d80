from django.db.models import TextChoices


CALENDAR_CREDENTIAL_SUFFIX = "_calendar"

# Calendar used when a booking reference doesn't carry one
DEFAULT_CALENDAR_ID = "primary"


class CalendarProvider(TextChoices):
    GOOGLE = "google_calendar", "Google Calendar"
    MICROSOFT = "office365_calendar", "Microsoft Outlook Calendar"
