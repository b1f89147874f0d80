# Service Layer/Internal Errors
class CalendarIntegrationError(Exception):
    """Base exception for calendar integration errors"""

    default_message = ""

    def __init__(self, message: str | None = None):
        if message is None:
            message = self.default_message
        super().__init__(message)


# Calendar Adapters - External API Errors
class CalendarAdapterError(CalendarIntegrationError):
    """Base class for calendar adapter errors"""

    pass


class GoogleCalendarAdapterError(CalendarAdapterError):
    """Google Calendar specific errors"""

    pass


class MSOutlookAdapterError(CalendarAdapterError):
    """Microsoft Outlook specific errors"""

    pass


class InvalidCredentialsError(CalendarAdapterError):
    """Raised when calendar credentials are invalid or expired"""

    pass


class GoogleCredentialsError(InvalidCredentialsError, GoogleCalendarAdapterError):
    default_message = "Invalid or expired Google credentials provided."


class MSGraphCredentialsError(InvalidCredentialsError, MSOutlookAdapterError):
    default_message = "Microsoft Graph credential is missing an access token."
