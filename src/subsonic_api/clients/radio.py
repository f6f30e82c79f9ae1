"""Internet radio station endpoints."""

from typing import TYPE_CHECKING, Optional

from ..envelope import Envelope
from ..responses.radio import InternetRadioStationsResponse
from ..responses.system import EmptyResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient


class RadioClient:
    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def get_internet_radio_stations(self) -> Envelope[InternetRadioStationsResponse]:
        return self._client.execute("getInternetRadioStations", InternetRadioStationsResponse)

    def create_internet_radio_station(
        self, stream_url: str, name: str, home_page_url: Optional[str] = None
    ) -> Envelope[EmptyResponse]:
        return self._client.execute(
            "createInternetRadioStation",
            EmptyResponse,
            streamUrl=stream_url,
            name=name,
            homepageUrl=home_page_url,
        )

    def update_internet_radio_station(
        self, station_id: str, stream_url: str, name: str, home_page_url: Optional[str] = None
    ) -> Envelope[EmptyResponse]:
        return self._client.execute(
            "updateInternetRadioStation",
            EmptyResponse,
            id=station_id,
            streamUrl=stream_url,
            name=name,
            homepageUrl=home_page_url,
        )

    def delete_internet_radio_station(self, station_id: str) -> Envelope[EmptyResponse]:
        return self._client.execute("deleteInternetRadioStation", EmptyResponse, id=station_id)
