from .booking_cancellation_service import BookingCancellationService
from .remote_artifact_reconciler import ArtifactDeletionResult, RemoteArtifactReconciler


__all__ = ["ArtifactDeletionResult", "BookingCancellationService", "RemoteArtifactReconciler"]
