"""Encoder for the native binary format."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from ..account_id import AccountID
from ..simple_time import Duration, Time
from .buffer import ReverseWriter
from .coding import Encoder, StructEncodeVisitor
from .schema_types import StructType
from .types import ValueType
from .value import encode_typed


class _Writer(Protocol):
    def write(self, data: bytes) -> None: ...

    @property
    def pos(self) -> int: ...


class SizeCounter:
    """A writer that only counts the bytes written to it.

    Its position moves downwards as bytes are written, like a reverse writer,
    so length prefixes computed from positions come out the same.
    """

    __slots__ = ("size",)

    def __init__(self) -> None:
        self.size = 0

    def write(self, data: bytes) -> None:
        """Count ``data``."""
        self.size += len(data)

    @property
    def pos(self) -> int:
        """The negated number of bytes counted so far."""
        return -self.size


def _int_bytes(x: int, size: int, signed: bool) -> bytes:
    try:
        return int(x).to_bytes(size, "little", signed=signed)
    except OverflowError:
        kind = "signed" if signed else "unsigned"
        raise ValueError(f"{x} does not fit in a {kind} {size}-byte integer") from None


class BinaryEncoder(Encoder):
    """Writes values in the native binary format into a reverse writer.

    Values are written last part first. A top-level encoder writes strings,
    bytes and optional values without any framing. A nested encoder, used for
    struct fields and list elements, adds a 32-bit length prefix to strings,
    bytes, structs and lists and a presence flag to optional values.
    """

    def __init__(self, writer: _Writer, nested: bool = False) -> None:
        self._writer = writer
        self._nested = nested

    def _write(self, data: bytes) -> None:
        self._writer.write(data)

    def _top_level(self) -> BinaryEncoder:
        return BinaryEncoder(self._writer)

    def _inner(self) -> BinaryEncoder:
        return BinaryEncoder(self._writer, nested=True)

    def encode_bool(self, x: bool) -> None:
        self.encode_u8(1 if x else 0)

    def encode_u8(self, x: int) -> None:
        self._write(_int_bytes(x, 1, False))

    def encode_u16(self, x: int) -> None:
        self._write(_int_bytes(x, 2, False))

    def encode_u32(self, x: int) -> None:
        self._write(_int_bytes(x, 4, False))

    def encode_u64(self, x: int) -> None:
        self._write(_int_bytes(x, 8, False))

    def encode_u128(self, x: int) -> None:
        self._write(_int_bytes(x, 16, False))

    def encode_i8(self, x: int) -> None:
        self._write(_int_bytes(x, 1, True))

    def encode_i16(self, x: int) -> None:
        self._write(_int_bytes(x, 2, True))

    def encode_i32(self, x: int) -> None:
        self._write(_int_bytes(x, 4, True))

    def encode_i64(self, x: int) -> None:
        self._write(_int_bytes(x, 8, True))

    def encode_i128(self, x: int) -> None:
        self._write(_int_bytes(x, 16, True))

    def encode_str(self, x: str) -> None:
        self.encode_bytes(x.encode("utf-8"))

    def encode_bytes(self, x: bytes) -> None:
        self._write(bytes(x))
        if self._nested:
            self.encode_u32(len(x))

    def encode_list(self, visitor: Any) -> None:
        if self._nested:
            end = self._writer.pos
            self._top_level().encode_list(visitor)
            self.encode_u32(end - self._writer.pos)
            return
        count = visitor.encode_reverse(self._inner())
        self.encode_u32(count)

    def encode_struct(self, visitor: StructEncodeVisitor, struct_type: StructType) -> None:
        if self._nested:
            end = self._writer.pos
            self._top_level().encode_struct(visitor, struct_type)
            self.encode_u32(end - self._writer.pos)
            return
        inner = self._inner()
        for index in reversed(range(len(struct_type.fields))):
            visitor.encode_field(index, inner)

    def encode_option(self, visitor: Optional[Any]) -> None:
        if not self._nested:
            if visitor is not None:
                visitor.encode(self)
            return
        if visitor is not None:
            visitor.encode(self)
            self.encode_bool(True)
        else:
            self.encode_bool(False)

    def encode_account_id(self, x: AccountID) -> None:
        self.encode_u128(int(x))

    def encode_time(self, x: Time) -> None:
        self.encode_i128(x.unix_nanos)

    def encode_duration(self, x: Duration) -> None:
        self.encode_i128(x.nanos)


def encoded_size(value: Any, value_type: ValueType) -> int:
    """The number of bytes ``value`` takes in the native binary format."""
    counter = SizeCounter()
    encode_typed(value_type, value, BinaryEncoder(counter))
    return counter.size


def encode_value(value: Any, value_type: ValueType) -> bytes:
    """Encode ``value`` of ``value_type`` in the native binary format."""
    writer = ReverseWriter(encoded_size(value, value_type))
    encode_typed(value_type, value, BinaryEncoder(writer))
    return writer.finish()