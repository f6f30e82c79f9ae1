"""Declarative field metadata for Subsonic response records.

A response shape is a dataclass decorated with ``@record``. Plain ``str``,
``int`` and ``float`` fields are declared as ordinary annotated fields;
fields that need a normalizer are declared with one of the helpers below:

    @record
    class Playlist:
        id: str = ""
        public: bool = boolean()
        created: Optional[datetime] = instant()
        entry: List[Child] = collection(Child)

``@record`` turns the declarations into a read-only field table once, when
the class is created. Decoding only reads that table.
"""

import dataclasses
import re
import typing
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

T = TypeVar("T")

_METADATA_KEY = "subsonic"
_TABLE_ATTR = "__subsonic_fields__"
_SCALAR_TYPES = (str, int, float)
_NON_ALNUM = re.compile(r"[^0-9a-z]")


class FieldKind(Enum):
    """Which normalizer a field goes through."""

    SCALAR = "scalar"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    INSTANT = "instant"
    COLLECTION = "collection"
    RECORD = "record"
    INLINE = "inline"


@dataclasses.dataclass(frozen=True)
class _Declaration:
    kind: FieldKind
    item_type: Optional[type] = None
    wire: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class FieldSpec:
    """One entry of a record's field table.

    Attributes:
        name: Python attribute name
        wire_name: Key used on the wire (and when encoding)
        kind: Normalizer to apply
        item_type: Scalar type for SCALAR fields, element type for
            COLLECTION fields, record type for RECORD/INLINE fields
    """

    name: str
    wire_name: str
    kind: FieldKind
    item_type: Optional[type] = None


def match_key(name: str) -> str:
    """Reduce a field or wire name to its convention-free matching key.

    ``albumId``, ``album_id`` and ``ALBUM-ID`` all give ``albumid``.
    """
    return _NON_ALNUM.sub("", name.lower())


def camel_case(name: str) -> str:
    """Convert a snake_case attribute name to the camelCase wire name."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


# ============================================================================
# Field declarations
# ============================================================================


def _field(declaration: _Declaration, **kwargs: Any) -> Any:
    return dataclasses.field(metadata={_METADATA_KEY: declaration}, **kwargs)


def scalar(default: Any = None, wire: Optional[str] = None) -> Any:
    """Plain field with an explicit wire name."""
    return _field(_Declaration(FieldKind.SCALAR, wire=wire), default=default)


def boolean(default: bool = False, wire: Optional[str] = None) -> Any:
    """Boolean accepting true/false literals, 0/1 and yes/no strings."""
    return _field(_Declaration(FieldKind.BOOLEAN, wire=wire), default=default)


def timestamp(wire: Optional[str] = None) -> Any:
    """Epoch-millisecond ``Optional[int]`` accepting numbers, numeric and ISO strings."""
    return _field(_Declaration(FieldKind.TIMESTAMP, wire=wire), default=None)


def instant(wire: Optional[str] = None) -> Any:
    """Like ``timestamp()`` but decoded to an aware UTC ``datetime``."""
    return _field(_Declaration(FieldKind.INSTANT, wire=wire), default=None)


def collection(item_type: type, wire: Optional[str] = None) -> Any:
    """List of records or scalars; a bare element or null is accepted."""
    return _field(
        _Declaration(FieldKind.COLLECTION, item_type=item_type, wire=wire),
        default_factory=list,
    )


def nested(record_type: type, wire: Optional[str] = None, optional: bool = False) -> Any:
    """Nested record, defaulting to an empty instance (or None if optional)."""
    declaration = _Declaration(FieldKind.RECORD, item_type=record_type, wire=wire)
    if optional:
        return _field(declaration, default=None)
    return _field(declaration, default_factory=record_type)


def inline(record_type: type) -> Any:
    """Record decoded from the same wire object as its parent."""
    return _field(
        _Declaration(FieldKind.INLINE, item_type=record_type),
        default_factory=record_type,
    )


# ============================================================================
# Field tables
# ============================================================================


def _unwrap_optional(hint: Any) -> Any:
    if typing.get_origin(hint) is typing.Union:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _build_spec(field: dataclasses.Field, hint: Any, owner: type) -> FieldSpec:
    declaration = field.metadata.get(_METADATA_KEY)

    if declaration is None or (
        declaration.kind is FieldKind.SCALAR and declaration.item_type is None
    ):
        scalar_type = _unwrap_optional(hint)
        if scalar_type not in _SCALAR_TYPES:
            raise TypeError(
                f"{owner.__name__}.{field.name}: {hint!r} needs a field declaration "
                "(boolean(), timestamp(), instant(), collection(), nested() or inline())"
            )
        wire = declaration.wire if declaration else None
        return FieldSpec(field.name, wire or camel_case(field.name), FieldKind.SCALAR, scalar_type)

    if declaration.kind in (FieldKind.RECORD, FieldKind.INLINE) and not is_record(
        declaration.item_type
    ):
        raise TypeError(f"{owner.__name__}.{field.name}: {declaration.item_type!r} is not a @record")

    if declaration.kind is FieldKind.COLLECTION and not (
        is_record(declaration.item_type) or declaration.item_type in _SCALAR_TYPES
    ):
        raise TypeError(
            f"{owner.__name__}.{field.name}: collection items must be a @record or str/int/float"
        )

    return FieldSpec(
        field.name,
        declaration.wire or camel_case(field.name),
        declaration.kind,
        declaration.item_type,
    )


def record(cls: Type[T]) -> Type[T]:
    """Class decorator: make ``cls`` a dataclass and attach its field table.

    Every field must have a default, since absent wire fields keep it.

    Raises:
        TypeError: For a field without a default or an undeclared
            non-scalar annotation
    """
    cls = dataclasses.dataclass(cls)
    hints = typing.get_type_hints(cls)

    specs = []
    for field in dataclasses.fields(cls):
        if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
            raise TypeError(f"{cls.__name__}.{field.name} must have a default")
        specs.append(_build_spec(field, hints[field.name], cls))

    setattr(cls, _TABLE_ATTR, _FieldTable(specs))
    return cls


class _FieldTable:
    """Immutable field lookup for one record type."""

    __slots__ = ("specs", "by_key", "inline")

    def __init__(self, specs):
        self.specs: Tuple[FieldSpec, ...] = tuple(specs)
        self.by_key: Mapping[str, FieldSpec] = MappingProxyType(
            {
                match_key(spec.wire_name): spec
                for spec in self.specs
                if spec.kind is not FieldKind.INLINE
            }
        )
        self.inline: Tuple[FieldSpec, ...] = tuple(
            spec for spec in self.specs if spec.kind is FieldKind.INLINE
        )


def is_record(obj: Any) -> bool:
    """True for classes (or instances of classes) decorated with ``@record``."""
    return isinstance(getattr(obj, _TABLE_ATTR, None), _FieldTable)


def field_table(shape: type) -> _FieldTable:
    """Return the field table of a ``@record`` class."""
    table = getattr(shape, _TABLE_ATTR, None)
    if not isinstance(table, _FieldTable):
        raise TypeError(f"{shape!r} is not a @record")
    return table


def field_specs(shape: type) -> Tuple[FieldSpec, ...]:
    """Return the field specs of a ``@record`` class in declaration order."""
    return field_table(shape).specs


def wire_names(shape: type) -> Dict[str, str]:
    """Map attribute names to wire names (handy for building requests)."""
    return {spec.name: spec.wire_name for spec in field_specs(shape)}
