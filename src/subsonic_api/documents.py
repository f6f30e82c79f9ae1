"""JSON and XML response documents.

Both formats are parsed into the same generic document model (dicts, lists,
strings and numbers) so one decoder handles either. XML is converted with
the rules Subsonic servers follow when they render the same data as JSON:

- attributes become keys (values stay strings, normalizers convert them)
- a child element that occurs once becomes an object, a repeated child
  becomes a list
- text content next to attributes or children is stored under ``value``
- an element with only text becomes that string
"""

import json
from enum import Enum
from typing import Any, Dict, List, Union
from xml.etree import ElementTree

from .exceptions import TransportDecodeError

ENVELOPE_KEY = "subsonic-response"
SUBSONIC_NAMESPACE = "http://subsonic.org/restapi"


class ResponseFormat(str, Enum):
    """Wire formats selectable with the ``f`` request parameter."""

    JSON = "json"
    XML = "xml"

    @classmethod
    def parse(cls, value: Union[str, "ResponseFormat"]) -> "ResponseFormat":
        """Accept a format name in any case.

        Raises:
            ValueError: For anything other than json/xml
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported response format: {value!r} (expected json or xml)")


def _split_tag(tag: str):
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


def element_to_dict(element: ElementTree.Element) -> Any:
    """Convert an XML element into the generic document model."""
    result: Dict[str, Any] = {}

    for name, value in element.attrib.items():
        result[_split_tag(name)[1]] = value

    children: Dict[str, List[Any]] = {}
    for child in element:
        children.setdefault(_split_tag(child.tag)[1], []).append(element_to_dict(child))
    for name, items in children.items():
        result[name] = items[0] if len(items) == 1 else items

    text = (element.text or "").strip()
    if text:
        if not result:
            return text
        result["value"] = text

    return result


def _root_to_document(root: ElementTree.Element) -> Dict[str, Any]:
    namespace, local = _split_tag(root.tag)
    # Roots outside the Subsonic namespace keep their qualified tag
    key = local if namespace in ("", SUBSONIC_NAMESPACE) else root.tag
    try:
        return {key: element_to_dict(root)}
    except RecursionError as e:
        raise TransportDecodeError("Malformed XML response: nested too deeply") from e


def load_document(content: Union[bytes, str], fmt: Union[str, ResponseFormat] = ResponseFormat.JSON) -> Any:
    """Parse a complete response body.

    Args:
        content: Response body as bytes or text
        fmt: ``json`` or ``xml``

    Returns:
        Generic document; XML roots are returned as ``{root_tag: {...}}`` so
        both formats expose the envelope under ``subsonic-response``

    Raises:
        TransportDecodeError: If the body is not well-formed JSON/XML
    """
    fmt = ResponseFormat.parse(fmt)

    if fmt is ResponseFormat.JSON:
        try:
            return json.loads(content)
        except (ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized integers
            raise TransportDecodeError(f"Malformed JSON response: {e}") from e

    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        raise TransportDecodeError(f"Malformed XML response: {e}") from e
    return _root_to_document(root)


class DocumentReader:
    """Incremental parser for responses that arrive in chunks.

    Example:
        >>> reader = DocumentReader("json")
        >>> for chunk in (b'{"subsonic-response": ', b'{"status": "ok"}}'):
        ...     reader.feed(chunk)
        >>> reader.close()
        {'subsonic-response': {'status': 'ok'}}
    """

    def __init__(self, fmt: Union[str, ResponseFormat] = ResponseFormat.JSON):
        self.format = ResponseFormat.parse(fmt)
        self._buffer = bytearray()
        self._parser = ElementTree.XMLParser() if self.format is ResponseFormat.XML else None

    def feed(self, chunk: Union[bytes, str]) -> None:
        """Add the next chunk of the body."""
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        if self._parser is None:
            self._buffer.extend(chunk)
            return
        try:
            self._parser.feed(chunk)
        except ElementTree.ParseError as e:
            raise TransportDecodeError(f"Malformed XML response: {e}") from e

    def close(self) -> Any:
        """Finish parsing and return the document.

        Raises:
            TransportDecodeError: If the accumulated body is malformed
        """
        if self._parser is None:
            return load_document(bytes(self._buffer), ResponseFormat.JSON)
        try:
            root = self._parser.close()
        except ElementTree.ParseError as e:
            raise TransportDecodeError(f"Malformed XML response: {e}") from e
        return _root_to_document(root)
