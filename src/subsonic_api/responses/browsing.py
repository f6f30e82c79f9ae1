"""Response shapes for the browsing endpoints."""

from datetime import datetime
from typing import List, Optional

from ..schema import collection, instant, nested, record, timestamp
from .common import Album, Artist, Child, Genre, MusicFolder, Songs


@record
class MusicFolders:
    music_folder: List[MusicFolder] = collection(MusicFolder)


@record
class MusicFoldersResponse:
    music_folders: MusicFolders = nested(MusicFolders)


@record
class Index:
    """Artists grouped under one index letter."""

    name: str = ""
    artist: List[Artist] = collection(Artist)


@record
class Indexes:
    """Folder-based artist index (getIndexes).

    Attributes:
        last_modified: Epoch milliseconds of the last library change
        ignored_articles: Space separated articles ignored when sorting
        shortcut: Shortcut artists configured on the server
        index: Artists grouped by index letter
        child: Songs found directly in the music folder root
    """

    last_modified: Optional[int] = timestamp()
    ignored_articles: Optional[str] = None
    shortcut: List[Artist] = collection(Artist)
    index: List[Index] = collection(Index)
    child: List[Child] = collection(Child)


@record
class IndexesResponse:
    indexes: Indexes = nested(Indexes)


@record
class Directory:
    """One music directory and its children (getMusicDirectory)."""

    id: str = ""
    parent: Optional[str] = None
    name: str = ""
    starred: Optional[datetime] = instant()
    user_rating: Optional[int] = None
    average_rating: Optional[float] = None
    play_count: Optional[int] = None
    child: List[Child] = collection(Child)


@record
class DirectoryResponse:
    directory: Directory = nested(Directory)


@record
class Genres:
    genre: List[Genre] = collection(Genre)


@record
class GenresResponse:
    genres: Genres = nested(Genres)


@record
class Artists:
    """ID3 artist index (getArtists)."""

    ignored_articles: Optional[str] = None
    index: List[Index] = collection(Index)


@record
class ArtistsResponse:
    artists: Artists = nested(Artists)


@record
class ArtistResponse:
    artist: Artist = nested(Artist)


@record
class AlbumResponse:
    album: Album = nested(Album)


@record
class SongResponse:
    song: Child = nested(Child)


@record
class ArtistInfo:
    """Biography and similar artists (getArtistInfo / getArtistInfo2)."""

    biography: Optional[str] = None
    music_brainz_id: Optional[str] = None
    last_fm_url: Optional[str] = None
    small_image_url: Optional[str] = None
    medium_image_url: Optional[str] = None
    large_image_url: Optional[str] = None
    similar_artist: List[Artist] = collection(Artist)


@record
class ArtistInfoResponse:
    artist_info: ArtistInfo = nested(ArtistInfo)


@record
class ArtistInfo2Response:
    artist_info2: ArtistInfo = nested(ArtistInfo)


@record
class AlbumInfo:
    notes: Optional[str] = None
    music_brainz_id: Optional[str] = None
    last_fm_url: Optional[str] = None
    small_image_url: Optional[str] = None
    medium_image_url: Optional[str] = None
    large_image_url: Optional[str] = None


@record
class AlbumInfoResponse:
    """Returned by both getAlbumInfo and getAlbumInfo2."""

    album_info: AlbumInfo = nested(AlbumInfo)


@record
class TopSongsResponse:
    top_songs: Songs = nested(Songs)


@record
class SimilarSongsResponse:
    similar_songs: Songs = nested(Songs)


@record
class SimilarSongs2Response:
    similar_songs2: Songs = nested(Songs)


@record
class Lyrics:
    artist: Optional[str] = None
    title: Optional[str] = None
    value: str = ""


@record
class LyricsResponse:
    lyrics: Lyrics = nested(Lyrics)
