from django.db.models import TextChoices


class BookingStatus(TextChoices):
    PENDING = "pending", "Pending"
    ACCEPTED = "accepted", "Accepted"
    CANCELLED = "cancelled", "Cancelled"
    REJECTED = "rejected", "Rejected"
