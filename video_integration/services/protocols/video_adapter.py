from typing import Protocol


class VideoAdapter(Protocol):
    provider: str

    def delete_meeting(self, meeting_id: str) -> None:
        """
        Delete a meeting (or room) from the video provider.
        :param meeting_id: External meeting identifier stored in the booking reference.
        """
        ...
