"""System endpoints: ping, license, scanning and OpenSubsonic extensions."""

import logging
from typing import TYPE_CHECKING

from ..envelope import Envelope
from ..responses.system import (
    EmptyResponse,
    LicenseResponse,
    OpenSubsonicExtensionsResponse,
    ScanStatusResponse,
)

if TYPE_CHECKING:
    from ..client import SubsonicClient

logger = logging.getLogger(__name__)


class SystemClient:
    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def ping(self) -> Envelope[EmptyResponse]:
        """Test server connectivity and authentication.

        Returns:
            Envelope whose header tells the server version and whether it
            is an OpenSubsonic server

        Raises:
            AuthenticationError: If credentials are invalid
            VersionError: If API version incompatible
            httpx.HTTPError: For network/HTTP errors

        Example:
            >>> envelope = client.system.ping()
            >>> envelope.open_subsonic, envelope.type, envelope.server_version
            (True, 'navidrome', '0.53.3')
        """
        envelope = self._client.execute("ping", EmptyResponse)
        if envelope.open_subsonic:
            logger.info(f"OpenSubsonic server detected: {envelope.type} {envelope.server_version}")
        logger.info("Subsonic ping successful")
        return envelope

    def get_license(self) -> Envelope[LicenseResponse]:
        return self._client.execute("getLicense", LicenseResponse)

    def get_scan_status(self) -> Envelope[ScanStatusResponse]:
        return self._client.execute("getScanStatus", ScanStatusResponse)

    def start_scan(self) -> Envelope[ScanStatusResponse]:
        """Start a media library scan; returns the initial scan status."""
        return self._client.execute("startScan", ScanStatusResponse)

    def get_open_subsonic_extensions(self) -> Envelope[OpenSubsonicExtensionsResponse]:
        """List the OpenSubsonic extensions the server supports."""
        return self._client.execute("getOpenSubsonicExtensions", OpenSubsonicExtensionsResponse)
