"""Encoder and decoder interfaces and their error types."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any

from ..account_id import AccountID
from ..code import ErrorCode, SystemCode
from ..simple_time import Duration, Time
from .schema_types import EnumType, StructType


class DecodeErrorKind(enum.Enum):
    """Why decoding failed."""

    OUT_OF_DATA = "out of data"
    INVALID_DATA = "invalid data"
    UNKNOWN_FIELD_NUMBER = "unknown field number"
    INVALID_UTF8 = "invalid UTF-8"


class EncodeErrorKind(enum.Enum):
    """Why encoding failed."""

    UNKNOWN_ERROR = "unknown error"
    OUT_OF_SPACE = "out of space"


class DecodeError(Exception):
    """A decoding error."""

    Kind = DecodeErrorKind

    def __init__(self, kind: DecodeErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def to_error_code(self) -> ErrorCode:
        """The message API error for this failure."""
        return ErrorCode(SystemCode.ENCODING_ERROR)


class EncodeError(Exception):
    """An encoding error."""

    Kind = EncodeErrorKind

    def __init__(self, kind: EncodeErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def to_error_code(self) -> ErrorCode:
        """The message API error for this failure."""
        return ErrorCode(SystemCode.ENCODING_ERROR)


class StructEncodeVisitor(ABC):
    """Encodes the fields of a struct by index."""

    @abstractmethod
    def encode_field(self, index: int, encoder: Encoder) -> None:
        """Encode the field at ``index``."""


class StructDecodeVisitor(ABC):
    """Decodes the fields of a struct by index."""

    @abstractmethod
    def decode_field(self, index: int, decoder: Decoder) -> None:
        """Decode the field at ``index``."""


class Encoder(ABC):
    """The interface encoders implement."""

    @abstractmethod
    def encode_bool(self, x: bool) -> None: ...

    @abstractmethod
    def encode_u8(self, x: int) -> None: ...

    @abstractmethod
    def encode_u16(self, x: int) -> None: ...

    @abstractmethod
    def encode_u32(self, x: int) -> None: ...

    @abstractmethod
    def encode_u64(self, x: int) -> None: ...

    @abstractmethod
    def encode_u128(self, x: int) -> None: ...

    @abstractmethod
    def encode_i8(self, x: int) -> None: ...

    @abstractmethod
    def encode_i16(self, x: int) -> None: ...

    @abstractmethod
    def encode_i32(self, x: int) -> None: ...

    @abstractmethod
    def encode_i64(self, x: int) -> None: ...

    @abstractmethod
    def encode_i128(self, x: int) -> None: ...

    @abstractmethod
    def encode_str(self, x: str) -> None: ...

    @abstractmethod
    def encode_bytes(self, x: bytes) -> None: ...

    @abstractmethod
    def encode_list(self, visitor: Any) -> None:
        """Encode a list through a list encode visitor."""

    @abstractmethod
    def encode_struct(self, visitor: StructEncodeVisitor, struct_type: StructType) -> None: ...

    @abstractmethod
    def encode_option(self, visitor: Any) -> None:
        """Encode an optional value; ``visitor`` is None when absent."""

    @abstractmethod
    def encode_account_id(self, x: AccountID) -> None: ...

    def encode_enum(self, x: int, enum_type: EnumType) -> None:
        """Encode an enum value, as a signed 32-bit integer by default."""
        self.encode_i32(x)

    @abstractmethod
    def encode_time(self, x: Time) -> None: ...

    @abstractmethod
    def encode_duration(self, x: Duration) -> None: ...


class Decoder(ABC):
    """The interface decoders implement."""

    @abstractmethod
    def decode_bool(self) -> bool: ...

    @abstractmethod
    def decode_u8(self) -> int: ...

    @abstractmethod
    def decode_u16(self) -> int: ...

    @abstractmethod
    def decode_u32(self) -> int: ...

    @abstractmethod
    def decode_u64(self) -> int: ...

    @abstractmethod
    def decode_u128(self) -> int: ...

    @abstractmethod
    def decode_i8(self) -> int: ...

    @abstractmethod
    def decode_i16(self) -> int: ...

    @abstractmethod
    def decode_i32(self) -> int: ...

    @abstractmethod
    def decode_i64(self) -> int: ...

    @abstractmethod
    def decode_i128(self) -> int: ...

    @abstractmethod
    def decode_str(self) -> str: ...

    @abstractmethod
    def decode_bytes(self) -> bytes: ...

    @abstractmethod
    def decode_struct(self, visitor: StructDecodeVisitor, struct_type: StructType) -> None: ...

    @abstractmethod
    def decode_list(self, visitor: Any) -> None:
        """Decode a list through a list decode visitor."""

    @abstractmethod
    def decode_option(self, visitor: Any) -> bool:
        """Decode an optional value; the visitor is called only if present.

        Returns True if the value was present.
        """

    @abstractmethod
    def decode_account_id(self) -> AccountID: ...

    def decode_enum(self, enum_type: EnumType) -> int:
        """Decode an enum value, as a signed 32-bit integer by default."""
        return self.decode_i32()

    @abstractmethod
    def decode_time(self) -> Time: ...

    @abstractmethod
    def decode_duration(self) -> Duration: ...