from django.contrib import admin

from webhooks.models import WebhookConfiguration, WebhookEvent


@admin.register(WebhookConfiguration)
class WebhookConfigurationAdmin(admin.ModelAdmin):
    list_display = ("id", "trigger", "url", "user", "event_type", "active", "deleted_at")
    list_filter = ("trigger", "active")
    search_fields = ("url", "user__email")


@admin.register(WebhookEvent)
class WebhookEventAdmin(admin.ModelAdmin):
    list_display = ("id", "trigger", "url", "status", "response_status", "created")
    list_filter = ("trigger", "status")
    search_fields = ("url",)
    readonly_fields = ("payload", "response_body", "response_headers")
