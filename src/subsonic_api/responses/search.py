"""Response shapes for search, search2 and search3."""

from typing import List

from ..schema import collection, nested, record
from .common import Album, Artist, Child


@record
class SearchResult:
    """Result of the deprecated ``search`` endpoint."""

    offset: int = 0
    total_hits: int = 0
    match: List[Child] = collection(Child)


@record
class SearchResponse:
    search_result: SearchResult = nested(SearchResult)


@record
class SearchResult2:
    artist: List[Artist] = collection(Artist)
    album: List[Child] = collection(Child)
    song: List[Child] = collection(Child)


@record
class Search2Response:
    search_result2: SearchResult2 = nested(SearchResult2)


@record
class SearchResult3:
    artist: List[Artist] = collection(Artist)
    album: List[Album] = collection(Album)
    song: List[Child] = collection(Child)


@record
class Search3Response:
    search_result3: SearchResult3 = nested(SearchResult3)
