"""Feature clients grouping the Subsonic endpoints by area."""

from .annotation import AnnotationClient
from .bookmarks import BookmarkClient
from .browsing import BrowsingClient
from .chat import ChatClient
from .jukebox import JukeboxClient
from .lists import ListsClient
from .media import MediaClient
from .playlists import PlaylistClient
from .podcasts import PodcastClient
from .radio import RadioClient
from .search import SearchClient
from .system import SystemClient
from .users import UserClient
from .video import VideoClient

__all__ = [
    "AnnotationClient",
    "BookmarkClient",
    "BrowsingClient",
    "ChatClient",
    "JukeboxClient",
    "ListsClient",
    "MediaClient",
    "PlaylistClient",
    "PodcastClient",
    "RadioClient",
    "SearchClient",
    "SystemClient",
    "UserClient",
    "VideoClient",
]
