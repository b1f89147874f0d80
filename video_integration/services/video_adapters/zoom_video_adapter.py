import logging
from typing import TypedDict

import requests

from video_integration.constants import VideoProvider
from video_integration.exceptions import ZoomCredentialsError, ZoomVideoAdapterError
from video_integration.services.protocols.video_adapter import VideoAdapter


logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 30


class ZoomCredentialTypedDict(TypedDict):
    access_token: str
    refresh_token: str


class ZoomVideoAdapter(VideoAdapter):
    provider = VideoProvider.ZOOM
    BASE_URL = "https://api.zoom.us/v2"

    def __init__(self, credentials_dict: ZoomCredentialTypedDict):
        access_token = credentials_dict.get("access_token")
        if not access_token:
            raise ZoomCredentialsError()
        self.access_token = access_token

    def delete_meeting(self, meeting_id: str) -> None:
        try:
            response = requests.delete(
                f"{self.BASE_URL}/meetings/{meeting_id}",
                headers={"Authorization": f"Bearer {self.access_token}"},
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            raise ZoomVideoAdapterError(f"Failed to delete meeting: {e!s}") from e

        if response.status_code == 404:
            logger.info("Zoom meeting %s was already deleted", meeting_id)
            return
        if not response.ok:
            raise ZoomVideoAdapterError(
                f"Failed to delete meeting: Zoom API error {response.status_code} - {response.text}"
            )
