"""Video endpoints."""

from typing import TYPE_CHECKING, Optional

from ..envelope import Envelope
from ..responses.video import VideoInfoResponse, VideosResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient


class VideoClient:
    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def get_videos(self) -> Envelope[VideosResponse]:
        return self._client.execute("getVideos", VideosResponse)

    def get_video_info(self, video_id: str) -> Envelope[VideoInfoResponse]:
        return self._client.execute("getVideoInfo", VideoInfoResponse, id=video_id)

    def get_captions(self, video_id: str, format: Optional[str] = None) -> bytes:
        """Download captions ("srt" or "vtt")."""
        return self._client.execute_binary("getCaptions", id=video_id, format=format)

    def get_video_cover_art(
        self, video_id: str, max_width: Optional[int] = None, max_height: Optional[int] = None
    ) -> bytes:
        """Download the thumbnail of a video; served by getCoverArt."""
        return self._client.execute_binary("getCoverArt", id=video_id, size=max_width, height=max_height)

    def get_video_stream_url(
        self,
        video_id: str,
        max_bit_rate: Optional[int] = None,
        format: Optional[str] = None,
        size: Optional[str] = None,
        time_offset: Optional[int] = None,
    ) -> str:
        return self._client.build_url(
            "stream",
            id=video_id,
            maxBitRate=max_bit_rate,
            format=format,
            size=size,
            timeOffset=time_offset,
        )
