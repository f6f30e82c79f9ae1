"""Annotation endpoints: star, unstar, rating and scrobbling."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional, Sequence, Union

from ..envelope import Envelope
from ..responses.system import EmptyResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient

_IdList = Optional[Union[str, Sequence[str]]]


def _ids(value: _IdList):
    if value is None or isinstance(value, str):
        return value
    return list(value)


class AnnotationClient:
    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def star(
        self,
        item_id: _IdList = None,
        album_id: _IdList = None,
        artist_id: _IdList = None,
    ) -> Envelope[EmptyResponse]:
        """Star songs, folders, albums or artists.

        Args:
            item_id: Song or folder ID(s)
            album_id: Album ID(s), ID3 browsing
            artist_id: Artist ID(s), ID3 browsing

        Raises:
            ValueError: If no ID is given
        """
        if item_id is None and album_id is None and artist_id is None:
            raise ValueError("At least one of item_id, album_id or artist_id is required")
        return self._client.execute(
            "star", EmptyResponse, id=_ids(item_id), albumId=_ids(album_id), artistId=_ids(artist_id)
        )

    def unstar(
        self,
        item_id: _IdList = None,
        album_id: _IdList = None,
        artist_id: _IdList = None,
    ) -> Envelope[EmptyResponse]:
        """Remove the star from songs, folders, albums or artists."""
        if item_id is None and album_id is None and artist_id is None:
            raise ValueError("At least one of item_id, album_id or artist_id is required")
        return self._client.execute(
            "unstar", EmptyResponse, id=_ids(item_id), albumId=_ids(album_id), artistId=_ids(artist_id)
        )

    def set_rating(self, item_id: str, rating: int) -> Envelope[EmptyResponse]:
        """Rate an item from 1 to 5 stars; 0 removes the rating.

        Raises:
            ValueError: If rating is outside 0-5
        """
        if not 0 <= rating <= 5:
            raise ValueError("rating must be between 0 and 5")
        return self._client.execute("setRating", EmptyResponse, id=item_id, rating=rating)

    def scrobble(
        self,
        item_id: Union[str, Sequence[str]],
        time: Optional[Union[datetime, int, Sequence[Union[datetime, int]]]] = None,
        submission: bool = True,
    ) -> Envelope[EmptyResponse]:
        """Register playback of one or more songs.

        Args:
            item_id: Song ID(s)
            time: When each song was played (datetime or epoch milliseconds)
            submission: True for a scrobble, False for a "now playing" notification
        """
        if time is not None and not isinstance(time, (datetime, int)):
            time = list(time)
        return self._client.execute(
            "scrobble", EmptyResponse, id=_ids(item_id), time=time, submission=submission
        )
