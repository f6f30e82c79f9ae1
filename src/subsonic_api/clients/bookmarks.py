"""Bookmark endpoints."""

from typing import TYPE_CHECKING, Optional

from ..envelope import Envelope
from ..responses.bookmarks import BookmarksResponse
from ..responses.system import EmptyResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient


class BookmarkClient:
    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def get_bookmarks(self) -> Envelope[BookmarksResponse]:
        return self._client.execute("getBookmarks", BookmarksResponse)

    def create_bookmark(
        self, item_id: str, position: int, comment: Optional[str] = None
    ) -> Envelope[EmptyResponse]:
        """Create or update a bookmark.

        Args:
            item_id: Media file ID
            position: Position in milliseconds
            comment: Optional user comment
        """
        return self._client.execute(
            "createBookmark", EmptyResponse, id=item_id, position=position, comment=comment
        )

    def delete_bookmark(self, item_id: str) -> Envelope[EmptyResponse]:
        return self._client.execute("deleteBookmark", EmptyResponse, id=item_id)
