"""Encoding of state object keys: no key, a single field, or a tuple of up to four.

A single field key is encoded in the terminal position. In a tuple key every
field but the last is self-delimiting and the last is terminal, except in a
one-element tuple, whose only field is self-delimiting.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Union

from .buffer import Reader, ReverseWriter
from .key_field import decode_key_field, encode_key_field, key_field_size
from .types import ValueType

_MAX_PARTS = 4

KeyTypes = Union[None, ValueType, Sequence[ValueType]]


def _normalize(key_types: KeyTypes) -> Tuple[Tuple[ValueType, ...], bool]:
    if key_types is None:
        return (), False
    if isinstance(key_types, ValueType):
        return (key_types,), True
    types = tuple(key_types)
    if len(types) > _MAX_PARTS:
        raise TypeError(f"at most {_MAX_PARTS} key fields allowed, got {len(types)}")
    for key_type in types:
        if not isinstance(key_type, ValueType):
            raise TypeError(f"expected ValueType, got {type(key_type).__name__}")
    return types, False


def _terminal_flags(count: int, single: bool) -> List[bool]:
    if single:
        return [True]
    if count <= 1:
        return [False] * count
    return [False] * (count - 1) + [True]


def _parts(key: Any, types: Tuple[ValueType, ...], single: bool) -> Tuple[Any, ...]:
    if single:
        return (key,)
    if not types:
        if key not in (None, ()):
            raise TypeError(f"a key without fields takes no value, got {key!r}")
        return ()
    if not isinstance(key, (tuple, list)) or len(key) != len(types):
        raise TypeError(f"expected a tuple of {len(types)} key values, got {key!r}")
    return tuple(key)


def encode_object_key(prefix: bytes, key: Any, key_types: KeyTypes) -> bytes:
    """Encode ``key`` behind ``prefix``."""
    types, single = _normalize(key_types)
    parts = _parts(key, types, single)
    flags = _terminal_flags(len(types), single)
    prefix = bytes(prefix)
    size = len(prefix) + sum(
        key_field_size(key_type, part, terminal)
        for key_type, part, terminal in zip(types, parts, flags)
    )
    writer = ReverseWriter(size)
    for key_type, part, terminal in reversed(tuple(zip(types, parts, flags))):
        encode_key_field(key_type, part, writer, terminal)
    writer.write(prefix)
    return writer.finish()


def decode_object_key(data: bytes, key_types: KeyTypes) -> Any:
    """Decode a key whose prefix has already been stripped."""
    types, single = _normalize(key_types)
    if not types:
        return ()
    reader = Reader(data)
    flags = _terminal_flags(len(types), single)
    values = tuple(
        decode_key_field(key_type, reader, terminal)
        for key_type, terminal in zip(types, flags)
    )
    reader.is_done()
    return values[0] if single else values


def _optional_types(key_types: Optional[KeyTypes]) -> KeyTypes:
    return key_types