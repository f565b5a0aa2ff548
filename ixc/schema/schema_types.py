"""Schema type descriptions: structs, enums, one-ofs, messages and state objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

from .field import Field, Kind


def _freeze(obj: object, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


@dataclass(frozen=True)
class StructType:
    """The schema of a struct. A sealed struct cannot gain new fields."""

    name: str
    fields: Tuple[Field, ...] = ()
    sealed: bool = False

    def __post_init__(self) -> None:
        _freeze(self, "fields")


@dataclass(frozen=True)
class EnumValueDefinition:
    """A named value of an enum."""

    name: str = ""
    value: int = 0


@dataclass(frozen=True)
class EnumType:
    """The schema of an enum."""

    name: str
    values: Tuple[EnumValueDefinition, ...] = ()
    numeric_kind: Kind = Kind.INT32
    sealed: bool = False

    def __post_init__(self) -> None:
        _freeze(self, "values")


@dataclass(frozen=True)
class OneOfCase:
    """One case of a one-of type."""

    name: str
    discriminant: int
    kind: Kind
    referenced_type: str = ""


@dataclass(frozen=True)
class OneOfType:
    """The schema of a one-of type."""

    name: str
    cases: Tuple[OneOfCase, ...] = ()
    discriminant_kind: Kind = Kind.INT32
    sealed: bool = False

    def __post_init__(self) -> None:
        _freeze(self, "cases")


@dataclass(frozen=True)
class MessageDescriptor:
    """The types a message uses for its request, response, error and events."""

    request_type: str
    response_type: str
    error_type: str
    events: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "events")


@dataclass(frozen=True)
class StateObjectType:
    """An object stored in key-value state."""

    name: str
    key_fields: Tuple[Field, ...] = ()
    value_fields: Tuple[Field, ...] = ()
    retain_deletions: bool = False

    def __post_init__(self) -> None:
        _freeze(self, "key_fields", "value_fields")


SchemaType = Union[StructType, EnumType, OneOfType, StateObjectType]

_SCHEMA_TYPES = (StructType, EnumType, OneOfType, StateObjectType)


@dataclass(frozen=True)
class Schema:
    """A set of types and message descriptors."""

    types: Tuple[SchemaType, ...] = field(default_factory=tuple)
    messages: Tuple[MessageDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze(self, "types", "messages")


def schema_type_name(schema_type: SchemaType) -> str:
    """The name of a schema type."""
    if not isinstance(schema_type, _SCHEMA_TYPES):
        raise TypeError(f"not a schema type: {type(schema_type).__name__}")
    return schema_type.name


def sort_schema_types(schema_types: Iterable[SchemaType]) -> List[SchemaType]:
    """Schema types ordered by name."""
    return sorted(schema_types, key=schema_type_name)


def unnamed_struct_type(fields: Iterable[Field]) -> StructType:
    """An unnamed, unsealed struct type over the given fields."""
    return StructType(name="", fields=tuple(fields), sealed=False)