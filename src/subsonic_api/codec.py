"""Generic decoder and encoder for ``@record`` shapes.

``decode(document, Shape)`` walks the field table of ``Shape`` and runs the
declared normalizer for every wire key it recognises. ``encode(record)``
produces the canonical wire form of a decoded record.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Dict, List, Type, TypeVar

from .exceptions import MalformedField, PayloadDecodeError
from .normalizers import (
    coerce_scalar,
    datetime_to_epoch_ms,
    normalize_boolean,
    normalize_collection,
    normalize_instant,
    normalize_timestamp,
)
from .schema import FieldKind, FieldSpec, field_table, is_record, match_key

T = TypeVar("T")

_SCALAR_SINGLES = (str, int, float)


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def decode(document: Any, shape: Type[T]) -> T:
    """Decode a wire object into a fresh ``shape`` instance.

    Args:
        document: Decoded JSON/XML object (a mapping)
        shape: ``@record`` class to decode into

    Returns:
        New instance of ``shape``

    Raises:
        PayloadDecodeError: If any field cannot be normalized; ``cause``
            holds the underlying MalformedScalar/MalformedCollection
        TypeError: If ``shape`` is not a ``@record``
    """
    field_table(shape)
    try:
        return decode_record(document, shape, "")
    except MalformedField as e:
        raise PayloadDecodeError(shape.__name__, e.field, e) from e


def decode_record(data: Any, shape: Type[T], path: str) -> T:
    """Decode one wire object; failures raise ``MalformedField`` subclasses."""
    table = field_table(shape)

    if isinstance(data, str) and "value" in table.by_key:
        # XML elements carrying only text (<genre>Rock</genre>)
        data = {"value": data}
    if not isinstance(data, Mapping):
        raise MalformedField(path, data, "expected an object")

    values: Dict[str, Any] = {}
    for key, raw in data.items():
        spec = table.by_key.get(match_key(key))
        if spec is None:
            continue
        if raw is None and spec.kind is not FieldKind.COLLECTION:
            continue
        values[spec.name] = _decode_field(spec, raw, _join(path, spec.wire_name))

    for spec in table.inline:
        values[spec.name] = decode_record(data, spec.item_type, path)

    return shape(**values)


def _decode_field(spec: FieldSpec, raw: Any, path: str) -> Any:
    kind = spec.kind

    if kind is FieldKind.SCALAR:
        return coerce_scalar(raw, spec.item_type, path)
    if kind is FieldKind.BOOLEAN:
        return normalize_boolean(raw, path)
    if kind is FieldKind.TIMESTAMP:
        return normalize_timestamp(raw, path)
    if kind is FieldKind.INSTANT:
        return normalize_instant(raw, path)
    if kind is FieldKind.RECORD:
        return decode_record(raw, spec.item_type, path)
    if kind is FieldKind.COLLECTION:
        return _decode_collection(spec, raw, path)

    raise TypeError(f"Unexpected field kind {kind!r} for {path}")


def _decode_collection(spec: FieldSpec, raw: Any, path: str) -> List[Any]:
    item_type = spec.item_type

    if is_record(item_type):
        return normalize_collection(
            raw,
            lambda item, item_path: decode_record(item, item_type, item_path),
            path,
        )

    return normalize_collection(
        raw,
        lambda item, item_path: coerce_scalar(item, item_type, item_path),
        path,
        single=_SCALAR_SINGLES,
    )


# ============================================================================
# Encoding
# ============================================================================


def encode(value: Any) -> Any:
    """Encode a record (or a list of records) into its canonical wire form.

    Collections are always arrays, instants become epoch milliseconds and
    ``None`` fields are omitted.
    """
    if is_record(value) and not isinstance(value, type):
        return _encode_record(value)
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    if isinstance(value, datetime):
        return datetime_to_epoch_ms(value)
    return value


def _encode_record(obj: Any) -> Dict[str, Any]:
    result: Dict[str, Any] = {}

    for spec in field_table(type(obj)).specs:
        value = getattr(obj, spec.name)
        if value is None:
            continue

        if spec.kind is FieldKind.INLINE:
            for key, item in _encode_record(value).items():
                result.setdefault(key, item)
            continue

        if spec.kind is FieldKind.COLLECTION:
            result[spec.wire_name] = [encode(item) for item in value]
        else:
            result[spec.wire_name] = encode(value)

    return result
