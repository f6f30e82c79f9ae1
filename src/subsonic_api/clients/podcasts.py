"""Podcast endpoints."""

from typing import TYPE_CHECKING, Optional

from ..envelope import Envelope
from ..responses.podcasts import NewestPodcastsResponse, PodcastsResponse
from ..responses.system import EmptyResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient


class PodcastClient:
    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def get_podcasts(
        self, include_episodes: Optional[bool] = None, channel_id: Optional[str] = None
    ) -> Envelope[PodcastsResponse]:
        """Get podcast channels, optionally only one and without episodes."""
        return self._client.execute(
            "getPodcasts", PodcastsResponse, includeEpisodes=include_episodes, id=channel_id
        )

    def get_newest_podcasts(self, count: Optional[int] = None) -> Envelope[NewestPodcastsResponse]:
        return self._client.execute("getNewestPodcasts", NewestPodcastsResponse, count=count)

    def refresh_podcasts(self) -> Envelope[EmptyResponse]:
        return self._client.execute("refreshPodcasts", EmptyResponse)

    def create_podcast_channel(self, url: str) -> Envelope[EmptyResponse]:
        return self._client.execute("createPodcastChannel", EmptyResponse, url=url)

    def delete_podcast_channel(self, channel_id: str) -> Envelope[EmptyResponse]:
        return self._client.execute("deletePodcastChannel", EmptyResponse, id=channel_id)

    def delete_podcast_episode(self, episode_id: str) -> Envelope[EmptyResponse]:
        return self._client.execute("deletePodcastEpisode", EmptyResponse, id=episode_id)

    def download_podcast_episode(self, episode_id: str) -> Envelope[EmptyResponse]:
        """Ask the server to start downloading an episode."""
        return self._client.execute("downloadPodcastEpisode", EmptyResponse, id=episode_id)
