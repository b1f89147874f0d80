from django.core.exceptions import ImproperlyConfigured


class DailyAPIKeyNotConfiguredError(ImproperlyConfigured):
    pass


class VideoIntegrationError(Exception):
    """Base exception for video integration errors"""

    default_message = ""

    def __init__(self, message: str | None = None):
        if message is None:
            message = self.default_message
        super().__init__(message)


# Video Adapters - External API Errors
class VideoAdapterError(VideoIntegrationError):
    """Base class for video adapter errors"""

    pass


class ZoomVideoAdapterError(VideoAdapterError):
    pass


class ZoomCredentialsError(ZoomVideoAdapterError):
    default_message = "Zoom credential is missing an access token."


class DailyVideoAdapterError(VideoAdapterError):
    pass
