"""Normalizers for ambiguous Subsonic wire values.

Different servers (and different versions of the same server) disagree on
how a value is written: booleans arrive as ``true``, ``"true"``, ``1`` or
``"yes"``; timestamps as epoch milliseconds, numeric strings or ISO-8601
strings; one-element lists collapse to a bare object. Every function here
accepts all known spellings and returns one canonical Python value, or
raises ``MalformedScalar``/``MalformedCollection`` for anything else.

All functions are pure. ``field`` arguments only feed error messages.

Example:
    >>> normalize_boolean("Yes")
    True
    >>> normalize_timestamp("2021-01-01T00:00:00.000Z")
    1609459200000
    >>> normalize_collection({"id": "x"}, lambda item, path: item["id"], "song")
    ['x']
"""

import re
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from dateutil.parser import isoparse

from .exceptions import MalformedCollection, MalformedScalar

R = TypeVar("R")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def json_kind(value: Any) -> str:
    """Return the JSON kind name of a decoded wire value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def normalize_boolean(value: Any, field: str = "") -> bool:
    """Normalize a wire boolean.

    Args:
        value: ``True``/``False``, an integer, or one of the strings
            true/false, 1/0, yes/no (any case)
        field: Field path for error reporting

    Returns:
        The boolean value

    Raises:
        MalformedScalar: For any other string or value kind
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_STRINGS:
            return True
        if token in _FALSE_STRINGS:
            return False
    raise MalformedScalar(field, value, "not a boolean")


def datetime_to_epoch_ms(value: datetime) -> int:
    """Convert a datetime to epoch milliseconds (naive values are UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // _ONE_MILLISECOND


def epoch_ms_to_datetime(value: Optional[int]) -> Optional[datetime]:
    """Convert epoch milliseconds to an aware UTC datetime.

    ``None`` and ``0`` both mean "no value" on the wire and give ``None``.
    """
    if not value:
        return None
    return EPOCH + timedelta(milliseconds=value)


def _parse_integer(text: str, field: str = "") -> Optional[int]:
    token = text.strip()
    if not _INTEGER_PATTERN.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError as e:
        # int() refuses strings longer than sys.get_int_max_str_digits()
        raise MalformedScalar(field, text, "integer too large") from e


def normalize_timestamp(value: Any, field: str = "") -> Optional[int]:
    """Normalize a wire timestamp to epoch milliseconds.

    Accepts epoch milliseconds as a number or a numeric string, or an
    ISO-8601 date/time string. ISO values without an offset are taken as UTC.

    Args:
        value: Wire value (int, str or None)
        field: Field path for error reporting

    Returns:
        Epoch milliseconds, or None when the value is null or empty

    Raises:
        MalformedScalar: If the value matches none of the encodings
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise MalformedScalar(field, value, "not a timestamp")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        if not value.strip():
            return None
        millis = _parse_integer(value, field)
        if millis is not None:
            return millis
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError) as e:
            raise MalformedScalar(field, value, "not a timestamp") from e
        return datetime_to_epoch_ms(parsed)
    raise MalformedScalar(field, value, "not a timestamp")


def normalize_instant(value: Any, field: str = "") -> Optional[datetime]:
    """Normalize a wire timestamp to a UTC datetime (zero means absent).

    Raises:
        MalformedScalar: If the value is not a timestamp or lies outside
            the range a ``datetime`` can represent
    """
    millis = normalize_timestamp(value, field)
    try:
        return epoch_ms_to_datetime(millis)
    except (OverflowError, ValueError) as e:
        raise MalformedScalar(field, value, "timestamp out of range") from e


def coerce_scalar(value: Any, target: type, field: str = "") -> Any:
    """Coerce a plain wire value to ``str``, ``int`` or ``float``.

    XML attributes are always strings and some servers send numeric IDs,
    so strings and numbers are converted in both directions. Booleans,
    objects and arrays are never accepted for plain fields.

    Raises:
        MalformedScalar: If the value cannot represent ``target``
    """
    if isinstance(value, bool) or isinstance(value, (Mapping, list)):
        raise MalformedScalar(field, value, f"expected {target.__name__}")

    if target is str:
        if isinstance(value, str):
            return value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    if target is int:
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            number = _parse_integer(value, field)
            if number is not None:
                return number
        raise MalformedScalar(field, value, "expected int")

    if target is float:
        try:
            return float(value)
        except (ValueError, OverflowError) as e:
            raise MalformedScalar(field, value, "expected float") from e

    raise TypeError(f"Unsupported scalar type: {target!r}")


def normalize_collection(
    value: Any,
    decode_item: Callable[[Any, str], Optional[R]],
    field: str = "",
    single: Tuple[type, ...] = (Mapping,),
) -> List[R]:
    """Normalize a wire collection to a list.

    Args:
        value: ``None``, an array, or a single bare element
        decode_item: Decodes one element; called with the element and its
            path (``field[index]``)
        field: Field path for error reporting
        single: Value kinds accepted as a bare single element

    Returns:
        Decoded elements in wire order. Null elements are dropped.

    Raises:
        MalformedCollection: For any other value kind
    """
    if value is None:
        return []

    if isinstance(value, list):
        items = []
        for index, element in enumerate(value):
            if element is None:
                continue
            item = decode_item(element, f"{field}[{index}]")
            if item is not None:
                items.append(item)
        return items

    if isinstance(value, single) and not isinstance(value, bool):
        item = decode_item(value, f"{field}[0]")
        return [] if item is None else [item]

    raise MalformedCollection(field, value, json_kind(value))
