"""Encoding of state object values: a single value or a tuple of up to four."""

from __future__ import annotations

from typing import Any, Sequence, Tuple, Union

from .binary_decoder import BinaryDecoder
from .binary_encoder import BinaryEncoder, SizeCounter
from .buffer import ReverseWriter
from .coding import Encoder
from .schema_types import StructType, unnamed_struct_type
from .types import ValueType, fields_of
from .value import decode_one, encode_typed

_MAX_PARTS = 4

ValueTypes = Union[ValueType, Sequence[ValueType]]


def _normalize(value_types: ValueTypes) -> Tuple[Tuple[ValueType, ...], bool]:
    if isinstance(value_types, ValueType):
        return (value_types,), True
    types = tuple(value_types)
    if len(types) > _MAX_PARTS:
        raise TypeError(f"at most {_MAX_PARTS} value fields allowed, got {len(types)}")
    for value_type in types:
        if not isinstance(value_type, ValueType):
            raise TypeError(f"expected ValueType, got {type(value_type).__name__}")
    return types, False


def _parts(value: Any, types: Tuple[ValueType, ...], single: bool) -> Tuple[Any, ...]:
    if single:
        return (value,)
    if not isinstance(value, (tuple, list)) or len(value) != len(types):
        raise TypeError(f"expected a tuple of {len(types)} values, got {value!r}")
    return tuple(value)


def _encode_reverse(
    types: Tuple[ValueType, ...], parts: Tuple[Any, ...], encoder: Encoder
) -> None:
    for value_type, part in reversed(tuple(zip(types, parts))):
        encode_typed(value_type, part, encoder)


def encode_object_value(value: Any, value_types: ValueTypes) -> bytes:
    """Encode an object value.

    ``value_types`` is a single value type, in which case ``value`` is the
    value itself, or a sequence of up to four, in which case ``value`` is a
    tuple of the same length. Each part is encoded at the top level.
    """
    types, single = _normalize(value_types)
    parts = _parts(value, types, single)
    counter = SizeCounter()
    _encode_reverse(types, parts, BinaryEncoder(counter))
    writer = ReverseWriter(counter.size)
    _encode_reverse(types, parts, BinaryEncoder(writer))
    return writer.finish()


def decode_object_value(data: bytes, value_types: ValueTypes) -> Any:
    """Decode an object value encoded by :func:`encode_object_value`."""
    types, single = _normalize(value_types)
    decoder = BinaryDecoder(data)
    values = tuple(decode_one(decoder, value_type) for value_type in types)
    return values[0] if single else values


def pseudo_type(value_types: ValueTypes) -> StructType:
    """The unnamed struct type describing an object value's fields."""
    types, _ = _normalize(value_types)
    return unnamed_struct_type(fields_of(*types))