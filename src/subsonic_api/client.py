"""HTTP client for the Subsonic REST API."""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import httpx

from .auth import AuthenticationProvider, provider_for
from .clients import (
    AnnotationClient,
    BookmarkClient,
    BrowsingClient,
    ChatClient,
    JukeboxClient,
    ListsClient,
    MediaClient,
    PlaylistClient,
    PodcastClient,
    RadioClient,
    SearchClient,
    SystemClient,
    UserClient,
    VideoClient,
)
from .documents import ResponseFormat
from .envelope import Envelope, parse_response, parse_response_async
from .exceptions import ApiError, DecodeError, VersionError
from .models import SubsonicConfig
from .normalizers import datetime_to_epoch_ms
from .responses import EmptyResponse
from .versioning import SUPPORTED_API_VERSION, is_api_version_supported

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DOCUMENT_CONTENT_TYPES = ("application/json", "text/json", "application/xml", "text/xml")


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(datetime_to_epoch_ms(value))
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class SubsonicClient:
    """Synchronous and asynchronous client for the Subsonic REST API.

    Every call is one GET to ``{url}/rest/{endpoint}``; the body is decoded
    into an ``Envelope`` carrying the typed payload, and server faults are
    raised as ``AuthenticationError``/``VersionError``/``ApiError``.
    Endpoints are grouped into feature clients (``client.browsing``,
    ``client.playlists``, ...).

    Attributes:
        config: SubsonicConfig with server connection details
        client: httpx.Client for synchronous requests
        auth_provider: Provider adding authentication parameters

    Example:
        >>> config = SubsonicConfig(
        ...     url="https://music.example.com",
        ...     username="john",
        ...     password="secret"
        ... )
        >>> with SubsonicClient(config) as client:
        ...     album = client.browsing.get_album("al-1").payload.album
        ...     print(f"{album.name}: {len(album.song)} songs")
    """

    def __init__(
        self,
        config: SubsonicConfig,
        auth_provider: Optional[AuthenticationProvider] = None,
        http_client: Optional[httpx.Client] = None,
        async_http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize Subsonic API client.

        Args:
            config: SubsonicConfig with server URL and credentials
            auth_provider: Authentication provider (default: chosen from
                config.auth_method)
            http_client: Optional preconfigured httpx.Client
            async_http_client: Optional preconfigured httpx.AsyncClient

        Raises:
            VersionError: If config.api_version is newer than the supported version
        """
        if not is_api_version_supported(config.api_version):
            raise VersionError.unsupported(config.api_version, SUPPORTED_API_VERSION)

        self.config = config
        self._base_url = config.url.rstrip("/")
        self.response_format = ResponseFormat.parse(config.response_format)
        self.auth_provider = auth_provider or provider_for(config)

        self._owns_client = http_client is None
        self.client = http_client or httpx.Client(
            timeout=httpx.Timeout(config.timeout),
            follow_redirects=True,
        )
        self._owns_async_client = async_http_client is None
        self._async_client = async_http_client

        self.browsing = BrowsingClient(self)
        self.lists = ListsClient(self)
        self.search = SearchClient(self)
        self.playlists = PlaylistClient(self)
        self.annotation = AnnotationClient(self)
        self.bookmarks = BookmarkClient(self)
        self.media = MediaClient(self)
        self.jukebox = JukeboxClient(self)
        self.podcasts = PodcastClient(self)
        self.radio = RadioClient(self)
        self.chat = ChatClient(self)
        self.system = SystemClient(self)
        self.users = UserClient(self)
        self.video = VideoClient(self)

        logger.info(f"Initialized Subsonic client for {self._base_url}")

    def _build_url(self, endpoint: str) -> str:
        """Build full URL for API endpoint.

        Args:
            endpoint: API endpoint path (e.g., "ping", "getSong")

        Returns:
            Full URL with /rest/ prefix
        """
        return f"{self._base_url}/rest/{endpoint}"

    def build_params(self, **kwargs) -> Dict[str, Union[str, List[str]]]:
        """Build query parameters with authentication and API version.

        ``None`` values are dropped, booleans become "true"/"false",
        datetimes become epoch milliseconds and lists or tuples become
        repeated parameters.

        Args:
            **kwargs: Endpoint-specific parameters (wire names)

        Returns:
            Complete parameter dictionary for API request
        """
        params: Dict[str, Union[str, List[str]]] = {
            "v": self.config.api_version,
            "c": self.config.client_name,
            "f": self.response_format.value,
        }
        self.auth_provider.apply(params, self.config)

        for key, value in kwargs.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple, set, frozenset)):
                params[key] = [_param_value(item) for item in value if item is not None]
            else:
                params[key] = _param_value(value)

        return params

    def build_url(self, endpoint: str, **kwargs) -> str:
        """Build an authenticated URL, e.g. for media players or M3U playlists.

        Example:
            >>> client.build_url("stream", id="12345")
            'https://music.example.com/rest/stream?v=1.16.1&c=subsonic-api&f=json&u=john&t=...&s=...&id=12345'
        """
        return str(httpx.URL(self._build_url(endpoint), params=self.build_params(**kwargs)))

    def _format_of(self, response: httpx.Response) -> ResponseFormat:
        content_type = response.headers.get("content-type", "").lower()
        if "xml" in content_type:
            return ResponseFormat.XML
        if "json" in content_type:
            return ResponseFormat.JSON
        return self.response_format

    @staticmethod
    def _is_document(response: httpx.Response) -> bool:
        content_type = response.headers.get("content-type", "").lower()
        return content_type.startswith(_DOCUMENT_CONTENT_TYPES)

    def _handle_response(self, response: httpx.Response, shape: Type[T]) -> Envelope[T]:
        """Decode a Subsonic response.

        Raises:
            httpx.HTTPStatusError: For a non-2xx response without a Subsonic body
            AuthenticationError: For authentication failures (40-44)
            VersionError: For version incompatibility (20, 30, 50)
            ApiError: For any other server fault
            DecodeError: If the body cannot be decoded
        """
        try:
            return parse_response(response.content, shape, self._format_of(response))
        except DecodeError:
            if not response.is_success:
                response.raise_for_status()
            raise
        except ApiError as e:
            logger.error(f"Subsonic API error {e.code}: {e.message}")
            raise

    def execute(self, endpoint: str, shape: Type[T] = EmptyResponse, **params) -> Envelope[T]:
        """Call an endpoint and decode its response into ``shape``.

        Args:
            endpoint: API endpoint name (e.g., "getAlbum")
            shape: Response record class
            **params: Endpoint parameters (wire names)

        Returns:
            Envelope with the decoded payload

        Raises:
            AuthenticationError: If credentials are invalid
            VersionError: If API version incompatible
            ApiError: For any other server fault
            DecodeError: If the response cannot be decoded
            httpx.HTTPError: For network/HTTP errors
        """
        url = self._build_url(endpoint)
        logger.debug(f"Calling {endpoint}")
        response = self.client.get(url, params=self.build_params(**params))
        return self._handle_response(response, shape)

    def execute_binary(self, endpoint: str, **params) -> bytes:
        """Call an endpoint that returns media (stream, download, getCoverArt, ...).

        Servers report faults on these endpoints as a JSON/XML document
        instead of media; such a document is decoded and its fault raised.

        Returns:
            Raw response bytes
        """
        url = self._build_url(endpoint)
        logger.debug(f"Fetching binary content from {endpoint}")
        response = self.client.get(url, params=self.build_params(**params))

        if self._is_document(response):
            self._handle_response(response, EmptyResponse)
        else:
            response.raise_for_status()

        logger.debug(f"Downloaded {len(response.content)} bytes from {endpoint}")
        return response.content

    def _get_async_client(self) -> httpx.AsyncClient:
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=True,
            )
        return self._async_client

    async def execute_async(self, endpoint: str, shape: Type[T] = EmptyResponse, **params) -> Envelope[T]:
        """Async variant of ``execute``; the body is decoded as it streams in."""
        url = self._build_url(endpoint)
        logger.debug(f"Calling {endpoint} (async)")
        client = self._get_async_client()

        async with client.stream("GET", url, params=self.build_params(**params)) as response:
            try:
                return await parse_response_async(
                    response.aiter_bytes(), shape, self._format_of(response)
                )
            except DecodeError:
                if not response.is_success:
                    response.raise_for_status()
                raise
            except ApiError as e:
                logger.error(f"Subsonic API error {e.code}: {e.message}")
                raise

    def close(self):
        """Close the HTTP client and release resources.

        An httpx.AsyncClient created by ``execute_async`` can only be closed
        from ``aclose()``; if one is still open a warning is logged.
        """
        if self._owns_client:
            self.client.close()
        if self._owns_async_client and self._async_client is not None:
            logger.warning("Async HTTP client is still open; use aclose() or 'async with' to close it")
        logger.info("Closed Subsonic client")

    async def aclose(self):
        """Close both the async and the sync HTTP clients."""
        if self._async_client is not None and self._owns_async_client:
            await self._async_client.aclose()
            self._async_client = None
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - automatically close client."""
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
