"""Response shapes for bookmarks."""

from datetime import datetime
from typing import List, Optional

from ..schema import collection, instant, nested, record
from .common import Child


@record
class Bookmark:
    """Saved playback position within a media file."""

    position: int = 0
    username: Optional[str] = None
    comment: Optional[str] = None
    created: Optional[datetime] = instant()
    changed: Optional[datetime] = instant()
    entry: Child = nested(Child)


@record
class Bookmarks:
    bookmark: List[Bookmark] = collection(Bookmark)


@record
class BookmarksResponse:
    bookmarks: Bookmarks = nested(Bookmarks)
