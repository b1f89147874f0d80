from django.db.models import TextChoices


class WebhookTrigger(TextChoices):
    BOOKING_CREATED = "BOOKING_CREATED", "Booking Created"
    BOOKING_RESCHEDULED = "BOOKING_RESCHEDULED", "Booking Rescheduled"
    BOOKING_CANCELLED = "BOOKING_CANCELLED", "Booking Cancelled"


class WebhookStatus(TextChoices):
    PENDING = "pending", "Pending"
    SUCCESS = "success", "Success"
    FAILED = "failed", "Failed"
