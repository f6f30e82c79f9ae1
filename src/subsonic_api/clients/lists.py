"""Album and song list endpoints."""

from typing import TYPE_CHECKING, Optional

from ..envelope import Envelope
from ..responses.lists import (
    AlbumList2Response,
    AlbumListResponse,
    NowPlayingResponse,
    RandomSongsResponse,
    SongsByGenreResponse,
    Starred2Response,
    StarredResponse,
)

if TYPE_CHECKING:
    from ..client import SubsonicClient

ALBUM_LIST_TYPES = (
    "random",
    "newest",
    "highest",
    "frequent",
    "recent",
    "alphabeticalByName",
    "alphabeticalByArtist",
    "starred",
    "byYear",
    "byGenre",
)


class ListsClient:
    """Album lists, random songs, now playing and starred items."""

    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def _album_list_params(self, list_type, size, offset, from_year, to_year, genre, music_folder_id):
        if list_type not in ALBUM_LIST_TYPES:
            raise ValueError(f"Invalid album list type: {list_type}. Must be one of {', '.join(ALBUM_LIST_TYPES)}")
        if list_type == "byYear" and (from_year is None or to_year is None):
            raise ValueError("Album list type 'byYear' requires from_year and to_year")
        if list_type == "byGenre" and not genre:
            raise ValueError("Album list type 'byGenre' requires genre")
        return {
            "type": list_type,
            "size": size,
            "offset": offset,
            "fromYear": from_year,
            "toYear": to_year,
            "genre": genre,
            "musicFolderId": music_folder_id,
        }

    def get_album_list(
        self,
        list_type: str = "newest",
        size: Optional[int] = None,
        offset: Optional[int] = None,
        from_year: Optional[int] = None,
        to_year: Optional[int] = None,
        genre: Optional[str] = None,
        music_folder_id: Optional[str] = None,
    ) -> Envelope[AlbumListResponse]:
        """Get a folder-based album list.

        Args:
            list_type: One of ALBUM_LIST_TYPES
            size: Number of albums (server default 10, max 500)
            offset: List offset for paging
            from_year: First year for "byYear"
            to_year: Last year for "byYear"
            genre: Genre for "byGenre"
            music_folder_id: Only return albums in this folder

        Raises:
            ValueError: For an unknown type or missing type-specific arguments
        """
        params = self._album_list_params(list_type, size, offset, from_year, to_year, genre, music_folder_id)
        return self._client.execute("getAlbumList", AlbumListResponse, **params)

    def get_album_list2(
        self,
        list_type: str = "newest",
        size: Optional[int] = None,
        offset: Optional[int] = None,
        from_year: Optional[int] = None,
        to_year: Optional[int] = None,
        genre: Optional[str] = None,
        music_folder_id: Optional[str] = None,
    ) -> Envelope[AlbumList2Response]:
        """ID3 variant of ``get_album_list``."""
        params = self._album_list_params(list_type, size, offset, from_year, to_year, genre, music_folder_id)
        return self._client.execute("getAlbumList2", AlbumList2Response, **params)

    def get_random_songs(
        self,
        size: Optional[int] = None,
        genre: Optional[str] = None,
        from_year: Optional[int] = None,
        to_year: Optional[int] = None,
        music_folder_id: Optional[str] = None,
    ) -> Envelope[RandomSongsResponse]:
        return self._client.execute(
            "getRandomSongs",
            RandomSongsResponse,
            size=size,
            genre=genre,
            fromYear=from_year,
            toYear=to_year,
            musicFolderId=music_folder_id,
        )

    def get_songs_by_genre(
        self,
        genre: str,
        count: Optional[int] = None,
        offset: Optional[int] = None,
        music_folder_id: Optional[str] = None,
    ) -> Envelope[SongsByGenreResponse]:
        return self._client.execute(
            "getSongsByGenre",
            SongsByGenreResponse,
            genre=genre,
            count=count,
            offset=offset,
            musicFolderId=music_folder_id,
        )

    def get_now_playing(self) -> Envelope[NowPlayingResponse]:
        return self._client.execute("getNowPlaying", NowPlayingResponse)

    def get_starred(self, music_folder_id: Optional[str] = None) -> Envelope[StarredResponse]:
        return self._client.execute("getStarred", StarredResponse, musicFolderId=music_folder_id)

    def get_starred2(self, music_folder_id: Optional[str] = None) -> Envelope[Starred2Response]:
        """Get starred artists, albums and songs organized by ID3 tags."""
        return self._client.execute("getStarred2", Starred2Response, musicFolderId=music_folder_id)
