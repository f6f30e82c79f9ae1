"""Search endpoints."""

from typing import TYPE_CHECKING, Optional

from ..envelope import Envelope
from ..responses.search import Search2Response, Search3Response, SearchResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient


class SearchClient:
    """search (deprecated), search2 (folder-based) and search3 (ID3)."""

    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def search(
        self,
        query: Optional[str] = None,
        artist: Optional[str] = None,
        album: Optional[str] = None,
        title: Optional[str] = None,
        count: Optional[int] = None,
        offset: Optional[int] = None,
        newer_than: Optional[int] = None,
    ) -> Envelope[SearchResponse]:
        return self._client.execute(
            "search",
            SearchResponse,
            any=query,
            artist=artist,
            album=album,
            title=title,
            count=count,
            offset=offset,
            newerThan=newer_than,
        )

    def _search_params(self, query, artist_count, artist_offset, album_count, album_offset,
                       song_count, song_offset, music_folder_id):
        return {
            "query": query,
            "artistCount": artist_count,
            "artistOffset": artist_offset,
            "albumCount": album_count,
            "albumOffset": album_offset,
            "songCount": song_count,
            "songOffset": song_offset,
            "musicFolderId": music_folder_id,
        }

    def search2(
        self,
        query: str,
        artist_count: Optional[int] = None,
        artist_offset: Optional[int] = None,
        album_count: Optional[int] = None,
        album_offset: Optional[int] = None,
        song_count: Optional[int] = None,
        song_offset: Optional[int] = None,
        music_folder_id: Optional[str] = None,
    ) -> Envelope[Search2Response]:
        params = self._search_params(query, artist_count, artist_offset, album_count, album_offset,
                                     song_count, song_offset, music_folder_id)
        return self._client.execute("search2", Search2Response, **params)

    def search3(
        self,
        query: str,
        artist_count: Optional[int] = None,
        artist_offset: Optional[int] = None,
        album_count: Optional[int] = None,
        album_offset: Optional[int] = None,
        song_count: Optional[int] = None,
        song_offset: Optional[int] = None,
        music_folder_id: Optional[str] = None,
    ) -> Envelope[Search3Response]:
        """Search artists, albums and songs by ID3 tags.

        An empty query ("") returns everything on servers that support it,
        which makes search3 usable for paging through the whole library.

        Example:
            >>> result = client.search.search3("abba", song_count=50).payload.search_result3
            >>> [song.title for song in result.song]
        """
        params = self._search_params(query, artist_count, artist_offset, album_count, album_offset,
                                     song_count, song_offset, music_folder_id)
        return self._client.execute("search3", Search3Response, **params)
