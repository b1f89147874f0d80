class BookingCancellationError(Exception):
    default_message = "Booking cancellation failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class BookingNotFoundError(BookingCancellationError):
    default_message = "Booking not found."


class BookingPersistenceError(BookingCancellationError):
    default_message = "Could not persist the booking cancellation."


class RemoteArtifactDeletionError(BookingCancellationError):
    default_message = "Could not delete a remote artifact of the booking."

    def __init__(self, credential_type: str, reference_uid: str):
        self.credential_type = credential_type
        self.reference_uid = reference_uid
        super().__init__(f"Failed to delete {credential_type} artifact {reference_uid}")
