from django.apps import AppConfig


class VideoIntegrationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "video_integration"
    verbose_name = "Video Integration"
