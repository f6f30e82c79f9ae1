"""Response shapes for playlists and the saved play queue."""

from datetime import datetime
from typing import List, Optional

from ..schema import boolean, collection, instant, nested, record
from .common import Child


@record
class Playlist:
    """Playlist summary, with its entries when fetched with getPlaylist.

    Attributes:
        public: Whether other users can see the playlist
        allowed_user: Users the playlist is shared with
        entry: Songs in playlist order (empty in getPlaylists results)
    """

    id: str = ""
    name: str = ""
    comment: Optional[str] = None
    owner: Optional[str] = None
    public: bool = boolean()
    song_count: int = 0
    duration: int = 0
    created: Optional[datetime] = instant()
    changed: Optional[datetime] = instant()
    cover_art: Optional[str] = None
    allowed_user: List[str] = collection(str)
    entry: List[Child] = collection(Child)


@record
class Playlists:
    playlist: List[Playlist] = collection(Playlist)


@record
class PlaylistsResponse:
    playlists: Playlists = nested(Playlists)


@record
class PlaylistResponse:
    playlist: Playlist = nested(Playlist)


@record
class PlayQueue:
    """Play queue saved by savePlayQueue.

    Attributes:
        current: ID of the currently playing track
        position: Position in milliseconds within the current track
    """

    current: Optional[str] = None
    position: int = 0
    username: Optional[str] = None
    changed: Optional[datetime] = instant()
    changed_by: Optional[str] = None
    entry: List[Child] = collection(Child)


@record
class PlayQueueResponse:
    play_queue: PlayQueue = nested(PlayQueue)
