import logging

from users.models import Credential
from video_integration.constants import VideoProvider
from video_integration.exceptions import DailyAPIKeyNotConfiguredError
from video_integration.services.protocols.video_adapter import VideoAdapter
from video_integration.services.video_adapters.daily_video_adapter import DailyVideoAdapter
from video_integration.services.video_adapters.zoom_video_adapter import ZoomVideoAdapter


logger = logging.getLogger(__name__)


class VideoService:
    def __init__(self, daily_api_key: str | None = None):
        self.daily_api_key = daily_api_key

    def get_video_adapter_for_credential(self, credential: Credential) -> VideoAdapter | None:
        if credential.type == VideoProvider.ZOOM:
            return ZoomVideoAdapter(credentials_dict=credential.key)

        if credential.type == VideoProvider.DAILY:
            if not self.daily_api_key:
                raise DailyAPIKeyNotConfiguredError(
                    "Daily video integration requires the DAILY_API_KEY setting."
                )
            return DailyVideoAdapter(api_key=self.daily_api_key)

        return None

    def delete_meeting(self, credential: Credential, meeting_uid: str) -> None:
        """
        Delete a video meeting created on behalf of the credential owner.
        :param credential: Credential giving access to the video provider.
        :param meeting_uid: External meeting identifier stored in the booking reference.
        """
        video_adapter = self.get_video_adapter_for_credential(credential)
        if video_adapter is None:
            logger.warning(
                "No video adapter for credential type %s, skipping meeting %s",
                credential.type,
                meeting_uid,
            )
            return

        video_adapter.delete_meeting(meeting_uid)
