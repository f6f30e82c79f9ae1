"""Response shapes for system endpoints."""

from datetime import datetime
from typing import List, Optional

from ..schema import boolean, collection, instant, nested, record


@record
class EmptyResponse:
    """Payload of endpoints that only report success (ping, star, scrobble, ...)."""


@record
class License:
    valid: bool = boolean()
    email: Optional[str] = None
    license_expires: Optional[datetime] = instant()
    trial_expires: Optional[datetime] = instant()


@record
class LicenseResponse:
    license: License = nested(License)


@record
class ScanStatus:
    """Media library scan progress.

    Attributes:
        scanning: Whether a scan is running
        count: Number of items scanned so far
        folder_count: Number of folders scanned (OpenSubsonic)
        last_scan: When the last scan finished (OpenSubsonic)
    """

    scanning: bool = boolean()
    count: Optional[int] = None
    folder_count: Optional[int] = None
    last_scan: Optional[datetime] = instant()


@record
class ScanStatusResponse:
    scan_status: ScanStatus = nested(ScanStatus)


@record
class OpenSubsonicExtension:
    name: str = ""
    versions: List[int] = collection(int)


@record
class OpenSubsonicExtensionsResponse:
    open_subsonic_extensions: List[OpenSubsonicExtension] = collection(OpenSubsonicExtension)
