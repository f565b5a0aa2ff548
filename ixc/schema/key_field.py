"""Order-preserving encoding of single state object key fields.

Integers are written big-endian, signed integers with their sign bit
flipped, so that byte order matches numeric order. A non-terminal string is
followed by a zero byte and non-terminal bytes carry a 32-bit big-endian
length prefix; in the terminal position both take the rest of the key.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from ..account_id import AccountID
from ..simple_time import Duration, Time
from .buffer import Reader, ReverseWriter
from .coding import DecodeError, DecodeErrorKind
from .field import Kind
from .types import ValueType

_UNSIGNED_WIDTHS = {Kind.UINT8: 1, Kind.UINT16: 2, Kind.UINT32: 4, Kind.UINT64: 8}
_SIGNED_WIDTHS = {Kind.INT8: 1, Kind.INT16: 2, Kind.INT32: 4, Kind.INT64: 8}
_WIDE = 16
_LENGTH_SIZE = 4
_TERMINATOR = b"\x00"


def _check_type(key_type: ValueType) -> None:
    if not isinstance(key_type, ValueType):
        raise TypeError(f"expected ValueType, got {type(key_type).__name__}")
    if key_type.nullable:
        raise TypeError("optional values cannot be key fields")


def _int_layout(key_type: ValueType) -> Optional[Tuple[int, bool]]:
    kind = key_type.kind
    if kind in _UNSIGNED_WIDTHS:
        return _UNSIGNED_WIDTHS[kind], False
    if kind in _SIGNED_WIDTHS:
        return _SIGNED_WIDTHS[kind], True
    if kind is Kind.UINT_N:
        return key_type.size_limit, False
    if kind is Kind.INT_N:
        return key_type.size_limit, True
    if kind is Kind.BOOL:
        return 1, False
    if kind in (Kind.TIME, Kind.DURATION):
        return _WIDE, True
    if kind is Kind.ACCOUNT_ID:
        return _WIDE, False
    return None


def _require(value: Any, expected: type, kind: Kind) -> None:
    if not isinstance(value, expected):
        raise TypeError(f"{kind.name} key must be {expected.__name__}, got {type(value).__name__}")


def _as_int(key_type: ValueType, value: Any) -> int:
    kind = key_type.kind
    if kind is Kind.TIME:
        _require(value, Time, kind)
        return value.unix_nanos
    if kind is Kind.DURATION:
        _require(value, Duration, kind)
        return value.nanos
    if kind is Kind.ACCOUNT_ID:
        _require(value, AccountID, kind)
        return value.value
    if kind is Kind.BOOL:
        _require(value, bool, kind)
        return int(value)
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{kind.name} key must be int, got {value!r}")
    return value


def _from_int(key_type: ValueType, raw: int) -> Any:
    kind = key_type.kind
    if kind is Kind.TIME:
        return Time.from_unix_nanos(raw)
    if kind is Kind.DURATION:
        return Duration.from_nanos(raw)
    if kind is Kind.ACCOUNT_ID:
        return AccountID(raw)
    if kind is Kind.BOOL:
        return raw != 0
    return raw


def _segment(key_type: ValueType, value: Any, terminal: bool) -> bytes:
    _check_type(key_type)
    layout = _int_layout(key_type)
    if layout is not None:
        width, signed = layout
        number = _as_int(key_type, value)
        bits = 8 * width
        if signed:
            half = 1 << (bits - 1)
            if not -half <= number < half:
                raise ValueError(f"{number} out of range for {key_type.kind.name}")
            number += half
        elif not 0 <= number < (1 << bits):
            raise ValueError(f"{number} out of range for {key_type.kind.name}")
        return number.to_bytes(width, "big")
    kind = key_type.kind
    if kind is Kind.STRING:
        _require(value, str, kind)
        data = value.encode("utf-8")
        if terminal:
            return data
        if _TERMINATOR in data:
            raise ValueError("a non-terminal string key cannot contain a zero byte")
        return data + _TERMINATOR
    if kind is Kind.BYTES:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"BYTES key must be bytes, got {type(value).__name__}")
        data = bytes(value)
        if terminal:
            return data
        return len(data).to_bytes(_LENGTH_SIZE, "big") + data
    raise TypeError(f"{kind.name} values cannot be key fields")


def encode_key_field(
    key_type: ValueType, value: Any, writer: ReverseWriter, terminal: bool = False
) -> None:
    """Write one key segment in front of what ``writer`` already holds."""
    writer.write(_segment(key_type, value, terminal))


def key_field_size(key_type: ValueType, value: Any, terminal: bool = False) -> int:
    """The number of bytes the key segment for ``value`` takes."""
    return len(_segment(key_type, value, terminal))


def _decode_utf8(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise DecodeError(DecodeErrorKind.INVALID_UTF8) from None


def decode_key_field(key_type: ValueType, reader: Reader, terminal: bool = False) -> Any:
    """Read one key segment from ``reader``."""
    _check_type(key_type)
    layout = _int_layout(key_type)
    if layout is not None:
        width, signed = layout
        raw = int.from_bytes(reader.read_bytes(width), "big")
        if signed:
            raw -= 1 << (8 * width - 1)
        return _from_int(key_type, raw)
    kind = key_type.kind
    if kind is Kind.STRING:
        if terminal:
            return _decode_utf8(reader.read_bytes(len(reader)))
        end = reader.remaining.find(_TERMINATOR)
        if end < 0:
            raise DecodeError(DecodeErrorKind.OUT_OF_DATA)
        text = _decode_utf8(reader.read_bytes(end))
        reader.read_bytes(len(_TERMINATOR))
        return text
    if kind is Kind.BYTES:
        if terminal:
            return reader.read_bytes(len(reader))
        size = int.from_bytes(reader.read_bytes(_LENGTH_SIZE), "big")
        return reader.read_bytes(size)
    raise TypeError(f"{kind.name} values cannot be key fields")