"""Subsonic API version support."""

from typing import Tuple

SUPPORTED_API_VERSION = "1.16.1"


def parse_api_version(version: str) -> Tuple[int, int, int]:
    """Parse ``major.minor[.patch]`` into a comparable tuple.

    Args:
        version: Version string such as "1.16.1" or "1.15"

    Returns:
        (major, minor, patch); a missing patch is 0

    Raises:
        ValueError: If the string has fewer than two or more than three
            parts, or a part is not a non-negative integer
    """
    parts = str(version).strip().split(".")
    if not 2 <= len(parts) <= 3 or not all(part.isascii() and part.isdigit() for part in parts):
        raise ValueError(f"Invalid Subsonic API version: {version!r}")
    numbers = [int(part) for part in parts] + [0] * (3 - len(parts))
    return numbers[0], numbers[1], numbers[2]


def is_api_version_supported(version: str, supported: str = SUPPORTED_API_VERSION) -> bool:
    """Check whether ``version`` is not newer than ``supported``.

    Raises:
        ValueError: If either version string is invalid
    """
    return parse_api_version(version) <= parse_api_version(supported)
