"""Decoder for the native binary format."""

from __future__ import annotations

from typing import Any, Union

from ..account_id import AccountID
from ..simple_time import Duration, Time
from .buffer import Reader
from .coding import DecodeError, DecodeErrorKind, Decoder, StructDecodeVisitor
from .schema_types import StructType
from .types import ValueType
from .value import decode_typed


class BinaryDecoder(Decoder):
    """Reads values in the native binary format.

    A top-level decoder treats strings, bytes and optional values as taking
    the rest of the input. A nested decoder, used for struct fields and list
    elements, reads them with a 32-bit length prefix or presence flag.
    """

    def __init__(self, buf: Union[bytes, Reader], nested: bool = False) -> None:
        self._reader = buf if isinstance(buf, Reader) else Reader(buf)
        self._nested = nested

    def read_bytes(self, size: int) -> bytes:
        """Read ``size`` bytes, or raise an out-of-data error."""
        return self._reader.read_bytes(size)

    def _unsigned(self, size: int) -> int:
        return int.from_bytes(self.read_bytes(size), "little")

    def _signed(self, size: int) -> int:
        return int.from_bytes(self.read_bytes(size), "little", signed=True)

    def _rest(self) -> bytes:
        return self.read_bytes(len(self._reader))

    def _prefixed(self) -> bytes:
        return self.read_bytes(self.decode_u32())

    def decode_bool(self) -> bool:
        return self.read_bytes(1)[0] != 0

    def decode_u8(self) -> int:
        return self._unsigned(1)

    def decode_u16(self) -> int:
        return self._unsigned(2)

    def decode_u32(self) -> int:
        return self._unsigned(4)

    def decode_u64(self) -> int:
        return self._unsigned(8)

    def decode_u128(self) -> int:
        return self._unsigned(16)

    def decode_i8(self) -> int:
        return self._signed(1)

    def decode_i16(self) -> int:
        return self._signed(2)

    def decode_i32(self) -> int:
        return self._signed(4)

    def decode_i64(self) -> int:
        return self._signed(8)

    def decode_i128(self) -> int:
        return self._signed(16)

    def decode_str(self) -> str:
        data = self._prefixed() if self._nested else self._rest()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            raise DecodeError(DecodeErrorKind.INVALID_DATA) from None

    def decode_bytes(self) -> bytes:
        return self._prefixed() if self._nested else self._rest()

    def decode_struct(self, visitor: StructDecodeVisitor, struct_type: StructType) -> None:
        if self._nested:
            BinaryDecoder(self._prefixed()).decode_struct(visitor, struct_type)
            return
        inner = BinaryDecoder(self._reader.remaining, nested=True)
        for index, _ in enumerate(struct_type.fields):
            visitor.decode_field(index, inner)

    def decode_list(self, visitor: Any) -> None:
        if self._nested:
            BinaryDecoder(self._prefixed()).decode_list(visitor)
            return
        size = self.decode_u32()
        visitor.init(size)
        inner = BinaryDecoder(self._reader.remaining, nested=True)
        for _ in range(size):
            visitor.next(inner)

    def decode_option(self, visitor: Any) -> bool:
        if self._nested:
            if not self.decode_bool():
                return False
            visitor.decode(self)
            return True
        if not len(self._reader):
            return False
        visitor.decode(BinaryDecoder(self._reader.remaining))
        return True

    def decode_account_id(self) -> AccountID:
        return AccountID(self.decode_u128())

    def decode_time(self) -> Time:
        return Time.from_unix_nanos(self.decode_i128())

    def decode_duration(self) -> Duration:
        return Duration.from_nanos(self.decode_i128())


def decode_value(data: bytes, value_type: ValueType) -> Any:
    """Decode a value of ``value_type`` from native binary data."""
    return decode_typed(value_type, BinaryDecoder(data))