"""Subsonic API client with typed, normalized response decoding."""

__version__ = "1.0.0"

from .auth import (
    ApiKeyAuthenticationProvider,
    AuthenticationProvider,
    LegacyAuthenticationProvider,
    TokenAuthenticationProvider,
    generate_token,
    provider_for,
)
from .client import SubsonicClient
from .codec import decode, encode
from .documents import ResponseFormat, load_document
from .envelope import (
    Envelope,
    ResponseStatus,
    dump_envelope,
    encode_envelope,
    parse_response,
    parse_response_async,
    parse_response_stream,
    unwrap,
)
from .exceptions import (
    ApiError,
    AuthenticationError,
    DecodeError,
    ErrorCode,
    InvalidEnvelope,
    MalformedCollection,
    MalformedField,
    MalformedScalar,
    PayloadDecodeError,
    ResponseReadError,
    SubsonicError,
    TransportDecodeError,
    VersionError,
    classify_fault,
)
from .models import SubsonicAuthToken, SubsonicConfig
from .schema import boolean, collection, inline, instant, nested, record, timestamp
from .versioning import SUPPORTED_API_VERSION, is_api_version_supported, parse_api_version

__all__ = [
    # Client
    "SubsonicClient",
    # Configuration
    "SubsonicConfig",
    "SubsonicAuthToken",
    "SUPPORTED_API_VERSION",
    "is_api_version_supported",
    "parse_api_version",
    # Authentication
    "AuthenticationProvider",
    "TokenAuthenticationProvider",
    "LegacyAuthenticationProvider",
    "ApiKeyAuthenticationProvider",
    "provider_for",
    "generate_token",
    # Decoding
    "Envelope",
    "ResponseStatus",
    "ResponseFormat",
    "parse_response",
    "parse_response_stream",
    "parse_response_async",
    "unwrap",
    "load_document",
    "decode",
    "encode",
    "encode_envelope",
    "dump_envelope",
    # Record declarations
    "record",
    "boolean",
    "timestamp",
    "instant",
    "collection",
    "nested",
    "inline",
    # Exceptions
    "SubsonicError",
    "ApiError",
    "AuthenticationError",
    "VersionError",
    "ErrorCode",
    "classify_fault",
    "DecodeError",
    "TransportDecodeError",
    "ResponseReadError",
    "InvalidEnvelope",
    "MalformedField",
    "MalformedScalar",
    "MalformedCollection",
    "PayloadDecodeError",
]
