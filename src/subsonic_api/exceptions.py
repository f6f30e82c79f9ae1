"""Exception classes for the Subsonic API client.

Two families live here:

- ``ApiError`` and its subclasses are faults reported by the server inside a
  ``status="failed"`` envelope.
- ``DecodeError`` and its subclasses are raised while turning response bytes
  into typed records.

Both derive from ``SubsonicError`` so callers can catch everything the
library raises with one clause, while still telling the categories apart by
class and by ``code``.
"""

from enum import IntEnum
from typing import Any, Optional


class ErrorCode(IntEnum):
    """Error codes defined by the Subsonic and OpenSubsonic APIs."""

    GENERIC = 0
    MISSING_PARAMETER = 10
    CLIENT_MUST_UPGRADE = 20
    SERVER_MUST_UPGRADE = 30
    WRONG_CREDENTIALS = 40
    TOKEN_AUTH_NOT_SUPPORTED = 41
    AUTH_MECHANISM_NOT_SUPPORTED = 42
    CONFLICTING_AUTH_MECHANISMS = 43
    INVALID_API_KEY = 44
    NOT_AUTHORIZED = 50
    TRIAL_EXPIRED = 60
    NOT_FOUND = 70


class SubsonicError(Exception):
    """Base exception for everything raised by this library."""


# ============================================================================
# Server-reported faults
# ============================================================================


class ApiError(SubsonicError):
    """Fault reported by the server.

    Attributes:
        code: Subsonic error code (0, 10, 20, 30, 40-44, 50, 60, 70)
        message: Error message from server
    """

    def __init__(self, code: int, message: str):
        """Initialize API error.

        Args:
            code: Numeric Subsonic error code
            message: Human-readable error message
        """
        self.code = int(code)
        self.message = message
        super().__init__(f"Subsonic Error {self.code}: {message}")


class AuthenticationError(ApiError):
    """Credentials were rejected (error codes 40-44).

    Raised for a wrong username/password, an unsupported or conflicting
    authentication mechanism, or an invalid API key.
    """

    pass


class VersionError(ApiError):
    """Protocol version incompatibility (error codes 20, 30, 50).

    When raised during connection setup, ``requested_version`` and
    ``supported_version`` are set; faults decoded from a server response
    only carry the server's message.
    """

    def __init__(
        self,
        code: int,
        message: str,
        requested_version: Optional[str] = None,
        supported_version: Optional[str] = None,
    ):
        super().__init__(code, message)
        self.requested_version = requested_version
        self.supported_version = supported_version

    @classmethod
    def unsupported(cls, requested: str, supported: str) -> "VersionError":
        """Build the error raised when a client asks for a newer API version."""
        return cls(
            ErrorCode.CLIENT_MUST_UPGRADE,
            f"Subsonic API version '{requested}' is not supported. "
            f"Maximum supported version is '{supported}'.",
            requested_version=requested,
            supported_version=supported,
        )


_AUTHENTICATION_CODES = frozenset(
    {
        ErrorCode.WRONG_CREDENTIALS,
        ErrorCode.TOKEN_AUTH_NOT_SUPPORTED,
        ErrorCode.AUTH_MECHANISM_NOT_SUPPORTED,
        ErrorCode.CONFLICTING_AUTH_MECHANISMS,
        ErrorCode.INVALID_API_KEY,
    }
)

# Servers answer 50 when the requested protocol version is refused.
_VERSION_CODES = frozenset(
    {
        ErrorCode.CLIENT_MUST_UPGRADE,
        ErrorCode.SERVER_MUST_UPGRADE,
        ErrorCode.NOT_AUTHORIZED,
    }
)


def classify_fault(code: int, message: str) -> ApiError:
    """Map a server fault to its exception category.

    Args:
        code: Error code from the ``error`` object of a failed envelope
        message: Error message from the same object

    Returns:
        AuthenticationError, VersionError or ApiError instance (not raised)

    Example:
        >>> raise classify_fault(40, "Wrong username or password")
        Traceback (most recent call last):
        ...
        subsonic_api.exceptions.AuthenticationError: Subsonic Error 40: Wrong username or password
    """
    if code in _AUTHENTICATION_CODES:
        return AuthenticationError(code, message)
    if code in _VERSION_CODES:
        return VersionError(code, message)
    return ApiError(code, message)


# ============================================================================
# Decoding failures
# ============================================================================


class DecodeError(SubsonicError):
    """Base class for failures while decoding a response."""


class TransportDecodeError(DecodeError):
    """Response bytes are not a well-formed JSON or XML document."""


class ResponseReadError(TransportDecodeError):
    """The response stream failed before the document was complete."""


class InvalidEnvelope(DecodeError):
    """Well-formed document without a usable ``subsonic-response`` wrapper."""


class MalformedField(DecodeError):
    """A field's wire value cannot be decoded into its declared type.

    Attributes:
        field: Dotted path of the field (e.g. ``starred.album[0].created``)
        raw_value: The offending wire value
    """

    def __init__(self, field: str, raw_value: Any, reason: str = "unexpected value"):
        self.field = field
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"{field or '<root>'}: {reason} ({raw_value!r})")


class MalformedScalar(MalformedField):
    """Boolean, timestamp or plain scalar in none of the accepted encodings."""


class MalformedCollection(MalformedField):
    """List field that is neither an array, a single element nor null.

    Attributes:
        raw_kind: JSON kind of the offending value ("string", "number", ...)
    """

    def __init__(self, field: str, raw_value: Any, raw_kind: str):
        self.raw_kind = raw_kind
        super().__init__(field, raw_value, f"cannot read {raw_kind} as a list")


class PayloadDecodeError(DecodeError):
    """A response payload failed to decode into its target shape.

    Attributes:
        response_type: Name of the target shape (e.g. ``StarredResponse``)
        field_path: Path of the field that failed
        cause: The underlying MalformedField
    """

    def __init__(self, response_type: str, field_path: str, cause: Exception):
        self.response_type = response_type
        self.field_path = field_path
        self.cause = cause
        super().__init__(f"Failed to decode {response_type} at {field_path or '<root>'}: {cause}")
