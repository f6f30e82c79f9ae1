"""Subsonic API authentication.

Authentication only ever adds query parameters to a request. Three
mechanisms are supported:

- Token (API 1.13.0+): ``u``, ``t`` = MD5(password + salt), ``s``
- Legacy password: ``u``, ``p`` (plain, or ``enc:`` + hex encoded)
- API key (OpenSubsonic): ``apiKey``

Example:
    >>> from subsonic_api.models import SubsonicConfig
    >>> from subsonic_api.auth import provider_for
    >>>
    >>> config = SubsonicConfig(
    ...     url="https://music.example.com",
    ...     username="admin",
    ...     password="sesame"
    ... )
    >>> params = {}
    >>> provider_for(config).apply(params, config)
    >>> sorted(params)
    ['s', 't', 'u']

Security Notes:
    - MD5 is used per Subsonic API (obfuscation, not cryptographic security)
    - A fresh salt is generated for every request
"""

import hashlib
import secrets
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .models import SubsonicAuthToken, SubsonicConfig


def generate_token(config: SubsonicConfig, salt: Optional[str] = None) -> SubsonicAuthToken:
    """Generate Subsonic authentication token using MD5 salt+hash method.

    Args:
        config: Subsonic configuration containing username and password
        salt: Optional pre-generated salt. If None, a random 16 hex
              character salt is generated. Primarily for testing.

    Returns:
        SubsonicAuthToken with token (32 lowercase hex chars), salt and username

    Raises:
        ValueError: If the configuration has no password

    Example:
        >>> token = generate_token(config, salt="c19b2d")
        >>> token.token
        '26719a1196d2a940705a59634eb18eab'
    """
    if not config.password:
        raise ValueError("Token authentication requires a password")

    if salt is None:
        salt = secrets.token_hex(8)

    token = hashlib.md5(f"{config.password}{salt}".encode("utf-8")).hexdigest()
    return SubsonicAuthToken.now(token=token, salt=salt, username=config.username)


class AuthenticationProvider(ABC):
    """Adds authentication parameters to a request."""

    @abstractmethod
    def apply(self, params: Dict[str, str], config: SubsonicConfig) -> None:
        """Add authentication parameters to ``params`` in place."""


class TokenAuthenticationProvider(AuthenticationProvider):
    """Salted MD5 token authentication (the default)."""

    def apply(self, params: Dict[str, str], config: SubsonicConfig) -> None:
        params.update(generate_token(config).to_auth_params())


class LegacyAuthenticationProvider(AuthenticationProvider):
    """Password authentication for servers older than API 1.13.0.

    Args:
        hex_encode: Send the password as ``enc:<hex>`` instead of clear text
    """

    def __init__(self, hex_encode: bool = False):
        self.hex_encode = hex_encode

    def apply(self, params: Dict[str, str], config: SubsonicConfig) -> None:
        if not config.password:
            raise ValueError("Legacy authentication requires a password")
        password = config.password
        if self.hex_encode:
            password = "enc:" + password.encode("utf-8").hex()
        params["u"] = config.username
        params["p"] = password


class ApiKeyAuthenticationProvider(AuthenticationProvider):
    """OpenSubsonic API key authentication.

    The ``u`` parameter must not be sent together with ``apiKey``
    (servers answer with error 43).
    """

    def apply(self, params: Dict[str, str], config: SubsonicConfig) -> None:
        if not config.api_key:
            raise ValueError("API key authentication requires api_key")
        params["apiKey"] = config.api_key


def provider_for(config: SubsonicConfig) -> AuthenticationProvider:
    """Pick the provider matching ``config.auth_method``."""
    if config.auth_method == "api_key":
        return ApiKeyAuthenticationProvider()
    if config.auth_method == "legacy":
        return LegacyAuthenticationProvider()
    if config.auth_method == "legacy_hex":
        return LegacyAuthenticationProvider(hex_encode=True)
    return TokenAuthenticationProvider()
