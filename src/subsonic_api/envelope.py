"""Subsonic response envelope handling.

Every response is wrapped in ``subsonic-response``. The header (status,
version, error) is decoded first and on its own, so a failed response is
classified and raised without ever touching the payload. Only an ``ok``
envelope has its body decoded into the requested shape.

Example:
    >>> envelope = parse_response(b'{"subsonic-response": {"status": "ok", '
    ...                           b'"version": "1.16.1"}}', EmptyResponse)
    >>> envelope.status == "ok"
    True
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, AsyncIterable, Dict, Generic, Iterable, Optional, Type, TypeVar, Union

import httpx

from .codec import decode, decode_record, encode
from .documents import ENVELOPE_KEY, DocumentReader, ResponseFormat, load_document
from .exceptions import (
    ErrorCode,
    InvalidEnvelope,
    MalformedField,
    ResponseReadError,
    classify_fault,
)
from .schema import boolean, nested, record

T = TypeVar("T")

DEFAULT_CHUNK_SIZE = 64 * 1024

# Closed or detached file objects raise ValueError from read()
_READ_ERRORS = (OSError, ValueError, httpx.HTTPError, httpx.StreamError)


class ResponseStatus(str, Enum):
    """Value of the envelope ``status`` attribute."""

    OK = "ok"
    FAILED = "failed"


@record
class Fault:
    """The ``error`` object of a failed envelope."""

    code: int = 0
    message: str = ""


@record
class EnvelopeHeader:
    """Envelope attributes shared by every response, independent of payload."""

    status: str = ""
    version: str = ""
    type: Optional[str] = None
    server_version: Optional[str] = None
    open_subsonic: bool = boolean()
    error: Optional[Fault] = nested(Fault, optional=True)


@dataclass
class Envelope(Generic[T]):
    """Successful response: header fields plus the typed payload.

    Attributes:
        status: Always ``ResponseStatus.OK`` for a returned envelope
        version: API version the server speaks
        payload: Decoded response record
        type: Server implementation name (OpenSubsonic)
        server_version: Server implementation version (OpenSubsonic)
        open_subsonic: Whether the server supports OpenSubsonic extensions
    """

    status: ResponseStatus
    version: str
    payload: T
    type: Optional[str] = None
    server_version: Optional[str] = None
    open_subsonic: bool = False

    @property
    def ok(self) -> bool:
        return self.status is ResponseStatus.OK


def _decode_header(body: Mapping) -> EnvelopeHeader:
    try:
        return decode_record(body, EnvelopeHeader, ENVELOPE_KEY)
    except MalformedField as e:
        raise InvalidEnvelope(f"Invalid envelope header: {e}") from e


def unwrap(document: Any, shape: Type[T]) -> Envelope[T]:
    """Unwrap an already parsed document.

    Args:
        document: Generic document from ``load_document``
        shape: ``@record`` class of the payload

    Returns:
        Envelope carrying the decoded payload

    Raises:
        InvalidEnvelope: If ``subsonic-response`` or its status is missing
        AuthenticationError: For fault codes 40-44
        VersionError: For fault codes 20, 30 and 50
        ApiError: For any other fault
        PayloadDecodeError: If the payload does not fit ``shape``
    """
    if not isinstance(document, Mapping):
        raise InvalidEnvelope("Response document is not an object")

    body = document.get(ENVELOPE_KEY)
    if not isinstance(body, Mapping):
        raise InvalidEnvelope(f"Response has no '{ENVELOPE_KEY}' object")

    header = _decode_header(body)
    if not header.status:
        raise InvalidEnvelope("Envelope has no status")
    try:
        status = ResponseStatus(header.status.strip().lower())
    except ValueError:
        raise InvalidEnvelope(f"Unknown envelope status: {header.status!r}") from None

    if status is ResponseStatus.FAILED:
        if header.error is None:
            raise classify_fault(ErrorCode.GENERIC, "Unknown error")
        raise classify_fault(header.error.code, header.error.message)

    return Envelope(
        status=status,
        version=header.version,
        payload=decode(body, shape),
        type=header.type,
        server_version=header.server_version,
        open_subsonic=header.open_subsonic,
    )


def parse_response(
    content: Union[bytes, str],
    shape: Type[T],
    fmt: Union[str, ResponseFormat] = ResponseFormat.JSON,
) -> Envelope[T]:
    """Parse a complete response body.

    Raises:
        TransportDecodeError: If the body is not well-formed JSON/XML
        (plus everything ``unwrap`` raises)
    """
    return unwrap(load_document(content, fmt), shape)


def _iter_chunks(stream: Any, chunk_size: int) -> Iterable[bytes]:
    """Yield the chunks of a file-like object or an iterable.

    Only the reads are guarded, so errors raised while decoding a chunk
    are never mistaken for read failures.
    """
    read = getattr(stream, "read", None)
    try:
        chunks = None if read is not None else iter(stream)
    except _READ_ERRORS as e:
        raise ResponseReadError(f"Failed to read response stream: {e}") from e

    while True:
        try:
            chunk = read(chunk_size) if chunks is None else next(chunks, None)
        except _READ_ERRORS as e:
            raise ResponseReadError(f"Failed to read response stream: {e}") from e
        if chunk is None or (chunks is None and not chunk):
            return
        yield chunk


def parse_response_stream(
    stream: Union[Iterable[bytes], Any],
    shape: Type[T],
    fmt: Union[str, ResponseFormat] = ResponseFormat.JSON,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Envelope[T]:
    """Parse a response from a binary file-like object or an iterable of chunks.

    Raises:
        ResponseReadError: If reading the stream fails, including reads
            from a closed file
        TransportDecodeError: If the body is not well-formed JSON/XML
    """
    reader = DocumentReader(fmt)
    for chunk in _iter_chunks(stream, chunk_size):
        reader.feed(chunk)
    return unwrap(reader.close(), shape)


async def parse_response_async(
    chunks: AsyncIterable[bytes],
    shape: Type[T],
    fmt: Union[str, ResponseFormat] = ResponseFormat.JSON,
) -> Envelope[T]:
    """Parse a response from an async iterable of byte chunks.

    Only reading the chunks is awaited; decoding runs synchronously once
    the body is complete.

    Example:
        >>> async with client.stream("GET", url) as response:
        ...     envelope = await parse_response_async(response.aiter_bytes(), AlbumResponse)
    """
    reader = DocumentReader(fmt)
    iterator = chunks.__aiter__()
    while True:
        try:
            chunk = await iterator.__anext__()
        except StopAsyncIteration:
            break
        except _READ_ERRORS as e:
            raise ResponseReadError(f"Failed to read response stream: {e}") from e
        reader.feed(chunk)
    return unwrap(reader.close(), shape)


# ============================================================================
# Encoding
# ============================================================================


def encode_envelope(envelope: Envelope) -> Dict[str, Any]:
    """Canonical JSON-ready form of an envelope."""
    body: Dict[str, Any] = {"status": envelope.status.value, "version": envelope.version}
    if envelope.type is not None:
        body["type"] = envelope.type
    if envelope.server_version is not None:
        body["serverVersion"] = envelope.server_version
    if envelope.open_subsonic:
        body["openSubsonic"] = True

    payload = encode(envelope.payload)
    if isinstance(payload, Mapping):
        body.update(payload)

    return {ENVELOPE_KEY: body}


def dump_envelope(envelope: Envelope, indent: Optional[int] = 2) -> str:
    """Serialize an envelope to canonical JSON text."""
    return json.dumps(encode_envelope(envelope), indent=indent, ensure_ascii=False)
