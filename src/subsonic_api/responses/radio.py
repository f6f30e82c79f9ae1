"""Response shapes for internet radio stations."""

from typing import List, Optional

from ..schema import collection, nested, record


@record
class InternetRadioStation:
    id: str = ""
    name: str = ""
    stream_url: str = ""
    home_page_url: Optional[str] = None


@record
class InternetRadioStations:
    internet_radio_station: List[InternetRadioStation] = collection(InternetRadioStation)


@record
class InternetRadioStationsResponse:
    internet_radio_stations: InternetRadioStations = nested(InternetRadioStations)
