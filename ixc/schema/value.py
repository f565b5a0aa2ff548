"""Encoding and decoding of typed values through the encoder and decoder interfaces."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, List, Optional

from ..account_id import AccountID
from ..code import ErrorCode
from ..message import Param
from ..simple_time import Duration, Time
from .coding import DecodeError, DecodeErrorKind, Decoder, Encoder
from .field import Kind
from .types import ValueType

_MISSING = object()

_SCALAR_NAMES = {
    Kind.UINT8: "u8",
    Kind.UINT16: "u16",
    Kind.UINT32: "u32",
    Kind.UINT64: "u64",
    Kind.INT8: "i8",
    Kind.INT16: "i16",
    Kind.INT32: "i32",
    Kind.INT64: "i64",
    Kind.BOOL: "bool",
    Kind.STRING: "str",
    Kind.BYTES: "bytes",
    Kind.ACCOUNT_ID: "account_id",
    Kind.TIME: "time",
    Kind.DURATION: "duration",
}

_UNSIGNED_WIDTHS = {Kind.UINT8: 1, Kind.UINT16: 2, Kind.UINT32: 4, Kind.UINT64: 8}
_SIGNED_WIDTHS = {Kind.INT8: 1, Kind.INT16: 2, Kind.INT32: 4, Kind.INT64: 8}
_WIDE_INTEGER_SIZE = 16


def _int_bounds(value_type: ValueType) -> Optional[tuple]:
    kind = value_type.kind
    if kind in _UNSIGNED_WIDTHS:
        return 0, (1 << (8 * _UNSIGNED_WIDTHS[kind])) - 1
    if kind in _SIGNED_WIDTHS:
        half = 1 << (8 * _SIGNED_WIDTHS[kind] - 1)
        return -half, half - 1
    if kind is Kind.UINT_N:
        return 0, (1 << (8 * value_type.size_limit)) - 1
    if kind is Kind.INT_N:
        half = 1 << (8 * value_type.size_limit - 1)
        return -half, half - 1
    if kind is Kind.ENUM:
        return -(1 << 31), (1 << 31) - 1
    return None


def _scalar_name(value_type: ValueType) -> str:
    kind = value_type.kind
    if kind in (Kind.UINT_N, Kind.INT_N):
        if value_type.size_limit != _WIDE_INTEGER_SIZE:
            raise TypeError(f"unsupported integer size: {value_type.size_limit}")
        return "u128" if kind is Kind.UINT_N else "i128"
    try:
        return _SCALAR_NAMES[kind]
    except KeyError:
        raise TypeError(f"unsupported value kind: {kind.name}") from None


def _expect(value: Any, expected: type, value_type: ValueType) -> None:
    if not isinstance(value, expected):
        raise TypeError(
            f"{value_type.kind.name} value must be {expected.__name__}, "
            f"got {type(value).__name__}"
        )


def _check_scalar(value_type: ValueType, value: Any) -> Any:
    bounds = _int_bounds(value_type)
    if bounds is not None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{value_type.kind.name} value must be int, got {value!r}")
        low, high = bounds
        if not low <= value <= high:
            raise ValueError(f"{value} out of range for {value_type.kind.name}")
        return int(value)
    kind = value_type.kind
    if kind is Kind.BOOL:
        _expect(value, bool, value_type)
    elif kind is Kind.STRING:
        _expect(value, str, value_type)
    elif kind is Kind.BYTES:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"BYTES value must be bytes, got {type(value).__name__}")
        return bytes(value)
    elif kind is Kind.ACCOUNT_ID:
        _expect(value, AccountID, value_type)
    elif kind is Kind.TIME:
        _expect(value, Time, value_type)
    elif kind is Kind.DURATION:
        _expect(value, Duration, value_type)
    return value


@dataclass
class TypedValue:
    """A value together with its schema type, usable as an option visitor."""

    value_type: ValueType
    value: Any = field(default=_MISSING)

    def __post_init__(self) -> None:
        if self.value is _MISSING:
            self.value = default_value(self.value_type)

    def encode(self, encoder: Encoder) -> None:
        """Encode the held value."""
        encode_typed(self.value_type, self.value, encoder)

    def decode(self, decoder: Decoder) -> None:
        """Replace the held value with one decoded from ``decoder``."""
        self.value = decode_typed(self.value_type, decoder)


class ListEncoder:
    """Encodes the elements of a list."""

    def __init__(self, element_type: ValueType, items: Iterable[Any]) -> None:
        self.element_type = element_type
        self.items = tuple(items)

    def size_hint(self) -> Optional[int]:
        """The number of elements."""
        return len(self.items)

    def encode(self, encoder: Encoder) -> int:
        """Encode the elements in order and return how many there were."""
        for item in self.items:
            encode_typed(self.element_type, item, encoder)
        return len(self.items)

    def encode_reverse(self, encoder: Encoder) -> int:
        """Encode the elements last to first and return how many there were."""
        for item in reversed(self.items):
            encode_typed(self.element_type, item, encoder)
        return len(self.items)


class ListBuilder:
    """Collects decoded list elements."""

    def __init__(self, element_type: ValueType) -> None:
        self.element_type = element_type
        self.items: List[Any] = []

    def init(self, length: int) -> None:
        """Announce the list length when the encoding records it."""
        if length < 0:
            raise DecodeError(DecodeErrorKind.INVALID_DATA)

    def next(self, decoder: Decoder) -> None:
        """Decode the next element."""
        self.items.append(decode_typed(self.element_type, decoder))


def default_value(value_type: ValueType) -> Any:
    """The default value of a type."""
    if value_type.nullable:
        return None
    kind = value_type.kind
    if _int_bounds(value_type) is not None:
        return 0
    if kind is Kind.BOOL:
        return False
    if kind is Kind.STRING:
        return ""
    if kind is Kind.BYTES:
        return b""
    if kind is Kind.ACCOUNT_ID:
        return AccountID.EMPTY
    if kind is Kind.TIME:
        return Time()
    if kind is Kind.DURATION:
        return Duration()
    if kind is Kind.LIST:
        return []
    if kind is Kind.STRUCT:
        return value_type.referenced()
    raise TypeError(f"unsupported value kind: {kind.name}")


def encode_typed(value_type: ValueType, value: Any, encoder: Encoder) -> None:
    """Encode ``value`` of ``value_type`` with ``encoder``."""
    if value_type.nullable:
        inner = replace(value_type, nullable=False)
        encoder.encode_option(None if value is None else TypedValue(inner, value))
        return
    kind = value_type.kind
    if kind is Kind.LIST:
        if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, (list, tuple)):
            raise TypeError(f"LIST value must be a list, got {type(value).__name__}")
        encoder.encode_list(ListEncoder(value_type.element, value))
    elif kind is Kind.STRUCT:
        struct_class = value_type.referenced
        _expect(value, struct_class, value_type)
        encoder.encode_struct(value, struct_class.STRUCT_TYPE)
    elif kind is Kind.ENUM:
        encoder.encode_enum(_check_scalar(value_type, int(value)), value_type.referenced)
    else:
        name = _scalar_name(value_type)
        getattr(encoder, "encode_" + name)(_check_scalar(value_type, value))


def decode_typed(value_type: ValueType, decoder: Decoder) -> Any:
    """Decode a value of ``value_type`` from ``decoder``."""
    if value_type.nullable:
        visitor = TypedValue(replace(value_type, nullable=False))
        return visitor.value if decoder.decode_option(visitor) else None
    kind = value_type.kind
    if kind is Kind.LIST:
        builder = ListBuilder(value_type.element)
        decoder.decode_list(builder)
        return builder.items
    if kind is Kind.STRUCT:
        struct_class = value_type.referenced
        obj = struct_class()
        decoder.decode_struct(obj, struct_class.STRUCT_TYPE)
        return obj
    if kind is Kind.ENUM:
        return decoder.decode_enum(value_type.referenced)
    return getattr(decoder, "decode_" + _scalar_name(value_type))()


def decode_one(decoder: Decoder, value_type: ValueType) -> Any:
    """Decode a single value."""
    return decode_typed(value_type, decoder)


def decode_optional_value(codec: Any, value_type: Optional[ValueType], param: Param) -> Any:
    """Decode a parameter that may carry nothing.

    A ``value_type`` of None means no value is expected and None is returned.
    Otherwise the parameter must carry bytes, which ``codec`` decodes.
    """
    if value_type is None:
        return None
    try:
        data = param.expect_bytes()
    except ErrorCode:
        raise DecodeError(DecodeErrorKind.INVALID_DATA) from None
    return codec.decode_value(data, value_type)


def encode_optional_value(codec: Any, value_type: Optional[ValueType], value: Any) -> Any:
    """Encode a value that may be absent; None as ``value_type`` gives None."""
    if value_type is None:
        return None
    return codec.encode_value(value, value_type)