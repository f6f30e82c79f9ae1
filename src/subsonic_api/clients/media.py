"""Media retrieval endpoints: streaming, downloads, cover art, avatars and lyrics."""

from typing import TYPE_CHECKING, Optional

from ..envelope import Envelope
from ..responses.browsing import LyricsResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient


class MediaClient:
    """Binary media endpoints.

    Faults on these endpoints arrive as JSON/XML documents instead of media
    and are raised like any other API error.

    Example:
        >>> audio = client.media.stream("12345", max_bit_rate=192, format="mp3")
        >>> with open("track.mp3", "wb") as f:
        ...     f.write(audio)
    """

    def __init__(self, client: "SubsonicClient"):
        self._client = client

    @staticmethod
    def _stream_params(item_id, max_bit_rate, format, time_offset, size, estimate_content_length):
        return {
            "id": item_id,
            "maxBitRate": max_bit_rate,
            "format": format,
            "timeOffset": time_offset,
            "size": size,
            "estimateContentLength": estimate_content_length,
        }

    def stream(
        self,
        item_id: str,
        max_bit_rate: Optional[int] = None,
        format: Optional[str] = None,
        time_offset: Optional[int] = None,
        size: Optional[str] = None,
        estimate_content_length: Optional[bool] = None,
    ) -> bytes:
        """Download a (possibly transcoded) media file.

        Args:
            item_id: Song or video ID
            max_bit_rate: Bitrate limit in kbps (0 for no limit)
            format: Target format, e.g. "mp3" or "raw" for no transcoding
            time_offset: Start offset in seconds (video, or transcoded audio)
            size: Video size as "WIDTHxHEIGHT"
            estimate_content_length: Ask the server to set Content-Length

        Returns:
            Raw media bytes
        """
        params = self._stream_params(item_id, max_bit_rate, format, time_offset, size, estimate_content_length)
        return self._client.execute_binary("stream", **params)

    def get_stream_url(
        self,
        item_id: str,
        max_bit_rate: Optional[int] = None,
        format: Optional[str] = None,
        time_offset: Optional[int] = None,
        size: Optional[str] = None,
        estimate_content_length: Optional[bool] = None,
    ) -> str:
        """Build an authenticated streaming URL without downloading.

        The URL can be handed to a media player or written to an M3U playlist.
        """
        params = self._stream_params(item_id, max_bit_rate, format, time_offset, size, estimate_content_length)
        return self._client.build_url("stream", **params)

    def download(self, item_id: str) -> bytes:
        """Download the original media file, without transcoding."""
        return self._client.execute_binary("download", id=item_id)

    def get_hls_playlist(
        self, item_id: str, bit_rate: Optional[int] = None, audio_track: Optional[str] = None
    ) -> bytes:
        """Get an HTTP Live Streaming (m3u8) playlist."""
        return self._client.execute_binary("hls.m3u8", id=item_id, bitRate=bit_rate, audioTrack=audio_track)

    def get_cover_art(self, cover_art_id: str, size: Optional[int] = None) -> bytes:
        """Download cover art image (JPEG/PNG, scaled to ``size`` pixels if given)."""
        return self._client.execute_binary("getCoverArt", id=cover_art_id, size=size)

    def get_avatar(self, username: str) -> bytes:
        return self._client.execute_binary("getAvatar", username=username)

    def get_lyrics(self, artist: Optional[str] = None, title: Optional[str] = None) -> Envelope[LyricsResponse]:
        return self._client.execute("getLyrics", LyricsResponse, artist=artist, title=title)
