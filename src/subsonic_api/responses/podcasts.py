"""Response shapes for podcasts."""

from datetime import datetime
from typing import List, Optional

from ..schema import collection, inline, instant, nested, record
from .common import Child


@record
class PodcastEpisode:
    """Podcast episode.

    The episode object carries all media fields of a song; they are decoded
    into ``media``.

    Attributes:
        stream_id: ID to pass to stream/download once the episode is downloaded
        status: "new", "downloading", "completed", "error", "deleted" or "skipped"
    """

    media: Child = inline(Child)
    stream_id: Optional[str] = None
    channel_id: Optional[str] = None
    description: Optional[str] = None
    publish_date: Optional[datetime] = instant()
    status: Optional[str] = None


@record
class PodcastChannel:
    id: str = ""
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    cover_art: Optional[str] = None
    original_image_url: Optional[str] = None
    status: Optional[str] = None
    error_message: Optional[str] = None
    episode: List[PodcastEpisode] = collection(PodcastEpisode)


@record
class Podcasts:
    channel: List[PodcastChannel] = collection(PodcastChannel)


@record
class PodcastsResponse:
    podcasts: Podcasts = nested(Podcasts)


@record
class NewestPodcasts:
    episode: List[PodcastEpisode] = collection(PodcastEpisode)


@record
class NewestPodcastsResponse:
    newest_podcasts: NewestPodcasts = nested(NewestPodcasts)
