from rest_framework import serializers


class CancelBookingSerializer(serializers.Serializer):
    uid = serializers.CharField(help_text="External identifier of the booking to cancel")
