from collections.abc import Mapping
from typing import Annotated

from django.utils.translation import gettext_lazy as _

from dependency_injector.wiring import Provide, inject
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.exceptions import BookingNotFoundError, BookingPersistenceError
from bookings.serializers import CancelBookingSerializer
from bookings.services import BookingCancellationService


class BookingCancellationFailed(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = _("The booking could not be cancelled. Please try again.")
    default_code = "booking_cancellation_failed"

    def __init__(self):
        super().__init__(detail={"detail": self.default_detail, "code": self.default_code})


class CancelBookingView(APIView):
    """
    Cancel a booking by its `uid`.

    Knowing the booking uid is enough to cancel it, so the endpoint is open to anonymous callers.
    """

    http_method_names = ["post", "delete"]
    authentication_classes = ()
    permission_classes = ()

    @inject
    def __init__(
        self,
        *args,
        booking_cancellation_service: Annotated[
            "BookingCancellationService | None", Provide["booking_cancellation_service"]
        ] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.booking_cancellation_service = booking_cancellation_service

    def _get_uid(self, request) -> str:
        data = request.data if isinstance(request.data, Mapping) else {}
        uid = data.get("uid")
        return uid if isinstance(uid, str) else ""

    def _cancel(self, request):
        if not self.booking_cancellation_service:
            raise ValueError(
                "BookingCancellationService wasn't injected. Please add it to the container."
            )

        try:
            self.booking_cancellation_service.cancel(self._get_uid(request))
        except BookingNotFoundError as e:
            raise NotFound(_("Booking not found.")) from e
        except BookingPersistenceError as e:
            raise BookingCancellationFailed() from e

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        summary="Cancel a booking",
        request=CancelBookingSerializer,
        responses={
            204: OpenApiResponse(description="Booking cancelled"),
            404: OpenApiResponse(description="Booking not found"),
            500: OpenApiResponse(description="The cancelled status could not be saved"),
        },
    )
    def post(self, request, *args, **kwargs):
        return self._cancel(request)

    @extend_schema(
        summary="Cancel a booking",
        request=CancelBookingSerializer,
        responses={
            204: OpenApiResponse(description="Booking cancelled"),
            404: OpenApiResponse(description="Booking not found"),
            500: OpenApiResponse(description="The cancelled status could not be saved"),
        },
    )
    def delete(self, request, *args, **kwargs):
        return self._cancel(request)
