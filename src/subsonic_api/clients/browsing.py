"""Browsing endpoints: folders, indexes, artists, albums, songs and info."""

from typing import TYPE_CHECKING, Optional

from ..envelope import Envelope
from ..responses.browsing import (
    AlbumInfoResponse,
    AlbumResponse,
    ArtistInfo2Response,
    ArtistInfoResponse,
    ArtistResponse,
    ArtistsResponse,
    DirectoryResponse,
    GenresResponse,
    IndexesResponse,
    MusicFoldersResponse,
    SimilarSongs2Response,
    SimilarSongsResponse,
    SongResponse,
    TopSongsResponse,
)

if TYPE_CHECKING:
    from ..client import SubsonicClient


class BrowsingClient:
    """Folder-based and ID3-based library browsing.

    Example:
        >>> artists = client.browsing.get_artists().payload.artists
        >>> for index in artists.index:
        ...     print(index.name, [artist.name for artist in index.artist])
    """

    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def get_music_folders(self) -> Envelope[MusicFoldersResponse]:
        return self._client.execute("getMusicFolders", MusicFoldersResponse)

    def get_indexes(
        self, music_folder_id: Optional[str] = None, if_modified_since: Optional[int] = None
    ) -> Envelope[IndexesResponse]:
        """Get the folder-based artist index.

        Args:
            music_folder_id: Only return artists in this music folder
            if_modified_since: Epoch milliseconds; the index is only
                returned if the library changed since then
        """
        return self._client.execute(
            "getIndexes",
            IndexesResponse,
            musicFolderId=music_folder_id,
            ifModifiedSince=if_modified_since,
        )

    def get_music_directory(self, directory_id: str) -> Envelope[DirectoryResponse]:
        return self._client.execute("getMusicDirectory", DirectoryResponse, id=directory_id)

    def get_genres(self) -> Envelope[GenresResponse]:
        return self._client.execute("getGenres", GenresResponse)

    def get_artists(self, music_folder_id: Optional[str] = None) -> Envelope[ArtistsResponse]:
        """Get all artists using ID3 tags, grouped by index letter."""
        return self._client.execute("getArtists", ArtistsResponse, musicFolderId=music_folder_id)

    def get_artist(self, artist_id: str) -> Envelope[ArtistResponse]:
        """Get an artist and its albums."""
        return self._client.execute("getArtist", ArtistResponse, id=artist_id)

    def get_album(self, album_id: str) -> Envelope[AlbumResponse]:
        """Get an album and its songs."""
        return self._client.execute("getAlbum", AlbumResponse, id=album_id)

    def get_song(self, song_id: str) -> Envelope[SongResponse]:
        return self._client.execute("getSong", SongResponse, id=song_id)

    def get_artist_info(
        self, artist_id: str, count: Optional[int] = None, include_not_present: Optional[bool] = None
    ) -> Envelope[ArtistInfoResponse]:
        """Get artist biography and similar artists (folder-based).

        Args:
            artist_id: Artist, album or song ID
            count: Maximum number of similar artists
            include_not_present: Include similar artists missing from the library
        """
        return self._client.execute(
            "getArtistInfo",
            ArtistInfoResponse,
            id=artist_id,
            count=count,
            includeNotPresent=include_not_present,
        )

    def get_artist_info2(
        self, artist_id: str, count: Optional[int] = None, include_not_present: Optional[bool] = None
    ) -> Envelope[ArtistInfo2Response]:
        """ID3 variant of ``get_artist_info``."""
        return self._client.execute(
            "getArtistInfo2",
            ArtistInfo2Response,
            id=artist_id,
            count=count,
            includeNotPresent=include_not_present,
        )

    def get_album_info(self, album_id: str) -> Envelope[AlbumInfoResponse]:
        return self._client.execute("getAlbumInfo", AlbumInfoResponse, id=album_id)

    def get_album_info2(self, album_id: str) -> Envelope[AlbumInfoResponse]:
        return self._client.execute("getAlbumInfo2", AlbumInfoResponse, id=album_id)

    def get_top_songs(self, artist: str, count: Optional[int] = None) -> Envelope[TopSongsResponse]:
        """Get the top songs of an artist (by artist name, from last.fm)."""
        return self._client.execute("getTopSongs", TopSongsResponse, artist=artist, count=count)

    def get_similar_songs(self, item_id: str, count: Optional[int] = None) -> Envelope[SimilarSongsResponse]:
        return self._client.execute("getSimilarSongs", SimilarSongsResponse, id=item_id, count=count)

    def get_similar_songs2(self, artist_id: str, count: Optional[int] = None) -> Envelope[SimilarSongs2Response]:
        return self._client.execute("getSimilarSongs2", SimilarSongs2Response, id=artist_id, count=count)
