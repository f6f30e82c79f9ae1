"""Connection configuration and authentication data for the Subsonic client."""

import os
import warnings
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional

from .documents import ResponseFormat
from .versioning import SUPPORTED_API_VERSION, parse_api_version

AUTH_METHODS = ("token", "legacy", "legacy_hex", "api_key")


@dataclass
class SubsonicConfig:
    """Configuration for connecting to a Subsonic-compatible server.

    Attributes:
        url: Base server URL (e.g., "https://music.example.com")
        username: Subsonic username
        password: Subsonic password (hashed before transmission with token auth)
        api_key: Optional API key for OpenSubsonic servers (alternative to password)
        client_name: Client identifier for API requests
        api_version: Subsonic API version sent with every request
        response_format: "json" or "xml"
        auth_method: "token", "legacy", "legacy_hex" or "api_key"; defaults
            to "api_key" when only an API key is given, else "token"
        timeout: Request timeout in seconds
    """

    url: str
    username: str
    password: Optional[str] = None
    api_key: Optional[str] = None
    client_name: str = "subsonic-api"
    api_version: str = SUPPORTED_API_VERSION
    response_format: str = "json"
    auth_method: Optional[str] = None
    timeout: float = 30.0

    def __post_init__(self):
        """Validate configuration on initialization."""
        if not self.url or not self.url.startswith(("http://", "https://")):
            raise ValueError("url must be a valid HTTP/HTTPS URL")
        if not self.username:
            raise ValueError("username is required")

        # Either password or API key must be provided
        if not self.password and not self.api_key:
            raise ValueError("Either password or api_key must be provided")

        parse_api_version(self.api_version)
        self.response_format = ResponseFormat.parse(self.response_format).value

        if self.auth_method is None:
            self.auth_method = "api_key" if self.api_key and not self.password else "token"
        if self.auth_method not in AUTH_METHODS:
            raise ValueError(
                f"Invalid auth_method: {self.auth_method}. Must be one of {', '.join(AUTH_METHODS)}"
            )
        if self.auth_method == "api_key" and not self.api_key:
            raise ValueError("auth_method 'api_key' requires api_key")
        if self.auth_method != "api_key" and not self.password:
            raise ValueError(f"auth_method '{self.auth_method}' requires password")

        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

        # Warn about insecure HTTP connections
        if not self.url.startswith("https://"):
            warnings.warn(
                "Using HTTP instead of HTTPS for Subsonic connection. "
                "Credentials will be transmitted insecurely.",
                UserWarning,
                stacklevel=2,
            )

    @classmethod
    def from_environment(cls) -> "SubsonicConfig":
        """Load configuration from environment variables (NO .env files).

        Returns:
            SubsonicConfig: Loaded configuration object

        Raises:
            EnvironmentError: If required environment variables are missing
            ValueError: If a variable has an invalid value
        """
        required = {
            "SUBSONIC_URL": os.getenv("SUBSONIC_URL"),
            "SUBSONIC_USER": os.getenv("SUBSONIC_USER"),
        }
        password = os.getenv("SUBSONIC_PASSWORD")
        api_key = os.getenv("SUBSONIC_API_KEY")

        missing = [var for var, value in required.items() if not value]
        if not password and not api_key:
            missing.append("SUBSONIC_PASSWORD (or SUBSONIC_API_KEY)")

        if missing:
            raise EnvironmentError(
                f"Required environment variables missing: {', '.join(missing)}\n"
                f"These variables must be set in your shell environment (NOT in .env files).\n"
                f"Example: export SUBSONIC_URL='https://your-server.com'"
            )

        timeout = os.getenv("SUBSONIC_TIMEOUT", "30")
        try:
            timeout_seconds = float(timeout)
        except ValueError:
            raise ValueError(f"SUBSONIC_TIMEOUT must be a number, got {timeout!r}") from None

        return cls(
            url=required["SUBSONIC_URL"],
            username=required["SUBSONIC_USER"],
            password=password or None,
            api_key=api_key or None,
            client_name=os.getenv("SUBSONIC_CLIENT_NAME", "subsonic-api"),
            api_version=os.getenv("SUBSONIC_API_VERSION", SUPPORTED_API_VERSION),
            response_format=os.getenv("SUBSONIC_RESPONSE_FORMAT", "json"),
            auth_method=os.getenv("SUBSONIC_AUTH_METHOD") or None,
            timeout=timeout_seconds,
        )


@dataclass
class SubsonicAuthToken:
    """Authentication token for Subsonic API using MD5 salt+hash method.

    Attributes:
        token: MD5(password + salt)
        salt: Random salt string
        username: Username for this token
        created_at: Token creation timestamp
    """

    token: str
    salt: str
    username: str
    created_at: datetime

    def to_auth_params(self) -> Dict[str, str]:
        """Convert to authentication query parameters.

        Returns:
            Dict with u (username), t (token), s (salt)
        """
        return {"u": self.username, "t": self.token, "s": self.salt}

    @classmethod
    def now(cls, token: str, salt: str, username: str) -> "SubsonicAuthToken":
        return cls(token=token, salt=salt, username=username, created_at=datetime.now(timezone.utc))
