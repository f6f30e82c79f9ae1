"""Jukebox control (playback on the server's audio device)."""

from typing import TYPE_CHECKING, Sequence

from ..envelope import Envelope
from ..responses.jukebox import JukeboxPlaylistResponse, JukeboxStatusResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient


class JukeboxClient:
    """Every action maps to ``jukeboxControl`` with a different ``action``.

    ``get`` answers with the playlist and status; every other action
    answers with the status only.
    """

    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def _control(self, action: str, **params) -> Envelope[JukeboxStatusResponse]:
        return self._client.execute("jukeboxControl", JukeboxStatusResponse, action=action, **params)

    def status(self) -> Envelope[JukeboxStatusResponse]:
        return self._control("status")

    def get(self) -> Envelope[JukeboxPlaylistResponse]:
        """Get the jukebox playlist together with the playback status."""
        return self._client.execute("jukeboxControl", JukeboxPlaylistResponse, action="get")

    def set(self, song_ids: Sequence[str]) -> Envelope[JukeboxStatusResponse]:
        """Replace the jukebox playlist."""
        return self._control("set", id=list(song_ids))

    def add(self, song_ids: Sequence[str]) -> Envelope[JukeboxStatusResponse]:
        return self._control("add", id=list(song_ids))

    def remove(self, index: int) -> Envelope[JukeboxStatusResponse]:
        """Remove the song at the zero-based playlist position ``index``."""
        return self._control("remove", index=index)

    def clear(self) -> Envelope[JukeboxStatusResponse]:
        return self._control("clear")

    def shuffle(self) -> Envelope[JukeboxStatusResponse]:
        return self._control("shuffle")

    def start(self) -> Envelope[JukeboxStatusResponse]:
        return self._control("start")

    def stop(self) -> Envelope[JukeboxStatusResponse]:
        return self._control("stop")

    def skip(self, index: int, offset: int = 0) -> Envelope[JukeboxStatusResponse]:
        """Jump to playlist position ``index``, ``offset`` seconds into the song."""
        return self._control("skip", index=index, offset=offset)

    def set_gain(self, gain: float) -> Envelope[JukeboxStatusResponse]:
        """Set the volume.

        Raises:
            ValueError: If gain is outside 0.0-1.0
        """
        if not 0.0 <= gain <= 1.0:
            raise ValueError("gain must be between 0.0 and 1.0")
        return self._control("setGain", gain=gain)
