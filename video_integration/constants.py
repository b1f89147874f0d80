from django.db.models import TextChoices


VIDEO_CREDENTIAL_SUFFIX = "_video"


class VideoProvider(TextChoices):
    ZOOM = "zoom_video", "Zoom"
    DAILY = "daily_video", "Daily"
