"""Response shapes for album/song lists, now playing and starred items."""

from typing import List

from ..schema import collection, inline, nested, record
from .common import Album, Artist, Child, Songs


@record
class AlbumList:
    album: List[Child] = collection(Child)


@record
class AlbumListResponse:
    album_list: AlbumList = nested(AlbumList)


@record
class AlbumList2:
    album: List[Album] = collection(Album)


@record
class AlbumList2Response:
    album_list2: AlbumList2 = nested(AlbumList2)


@record
class RandomSongsResponse:
    random_songs: Songs = nested(Songs)


@record
class SongsByGenreResponse:
    songs_by_genre: Songs = nested(Songs)


@record
class NowPlayingEntry:
    """A song somebody is playing right now.

    The wire object is a song with the player fields added, so the song
    itself is decoded from the same object into ``song``.
    """

    song: Child = inline(Child)
    username: str = ""
    minutes_ago: int = 0
    player_id: int = 0
    player_name: str = ""


@record
class NowPlaying:
    entry: List[NowPlayingEntry] = collection(NowPlayingEntry)


@record
class NowPlayingResponse:
    now_playing: NowPlaying = nested(NowPlaying)


@record
class Starred:
    """Starred artists, albums and songs (getStarred / getStarred2)."""

    artist: List[Artist] = collection(Artist)
    album: List[Album] = collection(Album)
    song: List[Child] = collection(Child)


@record
class StarredResponse:
    starred: Starred = nested(Starred)


@record
class Starred2Response:
    starred2: Starred = nested(Starred)
