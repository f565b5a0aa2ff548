"""Type-level descriptions of schema values and their conversion to fields."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from .field import Field, Kind
from .schema_types import EnumType, StructType

_MAX_FIELD_TYPES = 4


@dataclass(frozen=True)
class ValueType:
    """The schema type of a value.

    ``size_limit`` is the byte width of N-byte integers, ``element`` the
    element type of a list and ``referenced`` the struct class or enum type
    that a struct or enum value refers to.
    """

    kind: Kind
    nullable: bool = False
    size_limit: Optional[int] = None
    element: Optional[ValueType] = None
    referenced: Any = None

    @property
    def element_kind(self) -> Optional[Kind]:
        """The kind of the list elements, or None for non-list types."""
        return None if self.element is None else self.element.kind

    def is_list_element(self) -> bool:
        """True if values of this type may be elements of a list.

        Single bytes are excluded (a list of them is a byte string) and lists
        cannot nest.
        """
        return self.kind not in (Kind.UINT8, Kind.LIST)


def uint_n(size: int) -> ValueType:
    """An unsigned integer of ``size`` bytes."""
    if size <= 0:
        raise ValueError(f"integer size must be positive: {size}")
    return ValueType(Kind.UINT_N, size_limit=size)


def int_n(size: int) -> ValueType:
    """A signed integer of ``size`` bytes."""
    if size <= 0:
        raise ValueError(f"integer size must be positive: {size}")
    return ValueType(Kind.INT_N, size_limit=size)


def optional(value_type: ValueType) -> ValueType:
    """A nullable variant of ``value_type``."""
    if value_type.nullable:
        raise TypeError("an optional type cannot be made optional again")
    return replace(value_type, nullable=True)


def list_of(element_type: ValueType) -> ValueType:
    """A list of ``element_type`` values."""
    if not element_type.is_list_element():
        raise TypeError(f"{element_type.kind.name} cannot be a list element")
    return ValueType(
        Kind.LIST, element=element_type, referenced=element_type.referenced
    )


def struct_of(struct_class: type) -> ValueType:
    """A struct value of ``struct_class``.

    The class must carry a ``STRUCT_TYPE`` class attribute, be constructible
    without arguments and implement ``encode_field`` and ``decode_field``.
    """
    if not isinstance(getattr(struct_class, "STRUCT_TYPE", None), StructType):
        raise TypeError(f"{struct_class!r} has no STRUCT_TYPE")
    return ValueType(Kind.STRUCT, referenced=struct_class)


def enum_of(enum_type: EnumType) -> ValueType:
    """An enum value described by ``enum_type``."""
    if not isinstance(enum_type, EnumType):
        raise TypeError(f"expected EnumType, got {type(enum_type).__name__}")
    return ValueType(Kind.ENUM, referenced=enum_type)


def to_field(value_type: ValueType) -> Field:
    """An unnamed field for a value type."""
    return Field(
        name="",
        kind=value_type.kind,
        nullable=value_type.nullable,
        element_kind=None,
        referenced_type="",
    )


def fields_of(*args: ValueType) -> Tuple[Field, ...]:
    """Unnamed fields for up to four value types."""
    if len(args) > _MAX_FIELD_TYPES:
        raise TypeError(f"at most {_MAX_FIELD_TYPES} field types allowed, got {len(args)}")
    return tuple(to_field(value_type) for value_type in args)


U8 = ValueType(Kind.UINT8)
U16 = ValueType(Kind.UINT16)
U32 = ValueType(Kind.UINT32)
U64 = ValueType(Kind.UINT64)
U128 = uint_n(16)
I8 = ValueType(Kind.INT8)
I16 = ValueType(Kind.INT16)
I32 = ValueType(Kind.INT32)
I64 = ValueType(Kind.INT64)
I128 = int_n(16)
BOOL = ValueType(Kind.BOOL)
STR = ValueType(Kind.STRING)
BYTES = ValueType(Kind.BYTES)
ACCOUNT_ID = ValueType(Kind.ACCOUNT_ID)
TIME = ValueType(Kind.TIME)
DURATION = ValueType(Kind.DURATION)