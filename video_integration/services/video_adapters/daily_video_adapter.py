import logging

import requests

from video_integration.constants import VideoProvider
from video_integration.exceptions import DailyVideoAdapterError
from video_integration.services.protocols.video_adapter import VideoAdapter


logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 30


class DailyVideoAdapter(VideoAdapter):
    """Daily rooms are owned by the platform account, so the API key comes from settings."""

    provider = VideoProvider.DAILY
    BASE_URL = "https://api.daily.co/v1"

    def __init__(self, api_key: str):
        self.headers = {"Authorization": f"Bearer {api_key}"}

    def delete_meeting(self, meeting_id: str) -> None:
        try:
            response = requests.delete(
                f"{self.BASE_URL}/rooms/{meeting_id}",
                headers=self.headers,
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            raise DailyVideoAdapterError(f"Failed to delete room: {e!s}") from e

        if response.status_code == 404:
            logger.info("Daily room %s was already deleted", meeting_id)
            return
        if not response.ok:
            raise DailyVideoAdapterError(
                f"Failed to delete room: Daily API error {response.status_code} - {response.text}"
            )
