"""Playlist and play queue endpoints."""

from typing import TYPE_CHECKING, Optional, Sequence

from ..envelope import Envelope
from ..responses.playlists import PlaylistResponse, PlaylistsResponse, PlayQueueResponse
from ..responses.system import EmptyResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient


class PlaylistClient:
    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def get_playlists(self, username: Optional[str] = None) -> Envelope[PlaylistsResponse]:
        """Get playlists visible to the current user (or to ``username`` for admins)."""
        return self._client.execute("getPlaylists", PlaylistsResponse, username=username)

    def get_playlist(self, playlist_id: str) -> Envelope[PlaylistResponse]:
        return self._client.execute("getPlaylist", PlaylistResponse, id=playlist_id)

    def create_playlist(
        self,
        name: Optional[str] = None,
        song_ids: Optional[Sequence[str]] = None,
        playlist_id: Optional[str] = None,
    ) -> Envelope[PlaylistResponse]:
        """Create a playlist, or replace the songs of ``playlist_id``.

        Raises:
            ValueError: If neither name nor playlist_id is given
        """
        if not name and not playlist_id:
            raise ValueError("Either name or playlist_id is required")
        return self._client.execute(
            "createPlaylist",
            PlaylistResponse,
            name=name,
            playlistId=playlist_id,
            songId=list(song_ids) if song_ids else None,
        )

    def update_playlist(
        self,
        playlist_id: str,
        name: Optional[str] = None,
        comment: Optional[str] = None,
        public: Optional[bool] = None,
        song_ids_to_add: Optional[Sequence[str]] = None,
        song_indexes_to_remove: Optional[Sequence[int]] = None,
    ) -> Envelope[EmptyResponse]:
        """Update playlist metadata and contents.

        Args:
            playlist_id: Playlist to update
            name: New name
            comment: New comment
            public: New visibility
            song_ids_to_add: Songs appended to the playlist
            song_indexes_to_remove: Zero-based positions to remove
        """
        return self._client.execute(
            "updatePlaylist",
            EmptyResponse,
            playlistId=playlist_id,
            name=name,
            comment=comment,
            public=public,
            songIdToAdd=list(song_ids_to_add) if song_ids_to_add else None,
            songIndexToRemove=list(song_indexes_to_remove) if song_indexes_to_remove else None,
        )

    def delete_playlist(self, playlist_id: str) -> Envelope[EmptyResponse]:
        return self._client.execute("deletePlaylist", EmptyResponse, id=playlist_id)

    def get_play_queue(self) -> Envelope[PlayQueueResponse]:
        return self._client.execute("getPlayQueue", PlayQueueResponse)

    def save_play_queue(
        self,
        song_ids: Sequence[str],
        current: Optional[str] = None,
        position: Optional[int] = None,
    ) -> Envelope[EmptyResponse]:
        """Save the play queue.

        Args:
            song_ids: Songs in queue order
            current: ID of the currently playing song
            position: Position in milliseconds within the current song
        """
        return self._client.execute(
            "savePlayQueue",
            EmptyResponse,
            id=list(song_ids),
            current=current,
            position=position,
        )
