"""Media records shared by many endpoints."""

from datetime import datetime
from typing import List, Optional

from ..schema import boolean, collection, instant, record, timestamp


@record
class Child:
    """A song, video or directory entry (``child`` in the Subsonic schema).

    Attributes:
        id: Unique identifier
        parent: Parent directory ID for folder browsing
        is_dir: True for directories, False for media files
        created: Creation time in epoch milliseconds
        starred: When the item was starred, None if not starred
        album_id: Album ID for ID3 browsing
        artist_id: Artist ID for ID3 browsing
        type: "music", "podcast", "audiobook" or "video"
    """

    id: str = ""
    parent: Optional[str] = None
    is_dir: bool = boolean()
    title: str = ""
    album: Optional[str] = None
    artist: Optional[str] = None
    album_artist: Optional[str] = None
    track: Optional[int] = None
    year: Optional[int] = None
    genre: Optional[str] = None
    cover_art: Optional[str] = None
    size: Optional[int] = None
    content_type: Optional[str] = None
    suffix: Optional[str] = None
    transcoded_content_type: Optional[str] = None
    transcoded_suffix: Optional[str] = None
    duration: Optional[int] = None
    bit_rate: Optional[int] = None
    path: Optional[str] = None
    is_video: bool = boolean()
    user_rating: Optional[int] = None
    average_rating: Optional[float] = None
    play_count: Optional[int] = None
    disc_number: Optional[int] = None
    created: Optional[int] = timestamp()
    starred: Optional[datetime] = instant()
    album_id: Optional[str] = None
    artist_id: Optional[str] = None
    type: Optional[str] = None
    bookmark_position: Optional[int] = None
    music_brainz_id: Optional[str] = None


@record
class Album:
    """Album from ID3 browsing, optionally with its songs."""

    id: str = ""
    name: str = ""
    artist: Optional[str] = None
    artist_id: Optional[str] = None
    cover_art: Optional[str] = None
    song_count: int = 0
    duration: int = 0
    play_count: Optional[int] = None
    created: Optional[int] = timestamp()
    starred: Optional[datetime] = instant()
    year: Optional[int] = None
    genre: Optional[str] = None
    user_rating: Optional[int] = None
    music_brainz_id: Optional[str] = None
    song: List[Child] = collection(Child)


@record
class Artist:
    """Artist from ID3 browsing, optionally with its albums."""

    id: str = ""
    name: str = ""
    cover_art: Optional[str] = None
    artist_image_url: Optional[str] = None
    album_count: int = 0
    starred: Optional[datetime] = instant()
    user_rating: Optional[int] = None
    music_brainz_id: Optional[str] = None
    album: List[Album] = collection(Album)


@record
class Genre:
    # JSON carries the name in "value", XML as element text
    value: str = ""
    song_count: int = 0
    album_count: int = 0


@record
class MusicFolder:
    id: str = ""
    name: Optional[str] = None


@record
class Songs:
    """Bare list of songs (randomSongs, songsByGenre, topSongs, similarSongs)."""

    song: List[Child] = collection(Child)
