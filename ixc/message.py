"""Message, request and response types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Tuple

from .account_id import AccountID
from .code import ErrorCode, SystemCode

_U64_MAX = (1 << 64) - 1
_U128_MAX = (1 << 128) - 1
_MAX_INPUTS = 3
_MAX_OUTPUTS = 2


class ParamKind(enum.Enum):
    """What a parameter carries."""

    EMPTY = "empty"
    BYTES = "bytes"
    STRING = "string"
    U128 = "u128"
    ACCOUNT_ID = "account_id"


def _encoding_error() -> ErrorCode:
    return ErrorCode(SystemCode.ENCODING_ERROR)


@dataclass(frozen=True)
class Param:
    """A message input or output parameter."""

    kind: ParamKind = ParamKind.EMPTY
    value: Any = None

    @classmethod
    def empty(cls) -> Param:
        return cls()

    @classmethod
    def of_bytes(cls, data: bytes) -> Param:
        return cls(ParamKind.BYTES, bytes(data))

    @classmethod
    def of_string(cls, text: str) -> Param:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        return cls(ParamKind.STRING, text)

    @classmethod
    def of_u128(cls, value: int) -> Param:
        if not 0 <= value <= _U128_MAX:
            raise ValueError(f"value out of 128-bit range: {value}")
        return cls(ParamKind.U128, value)

    @classmethod
    def of_account_id(cls, account_id: AccountID) -> Param:
        if not isinstance(account_id, AccountID):
            raise TypeError(f"expected AccountID, got {type(account_id).__name__}")
        return cls(ParamKind.ACCOUNT_ID, account_id)

    @classmethod
    def from_value(cls, value: Any) -> Param:
        """Wrap a plain value in the matching parameter kind."""
        if isinstance(value, Param):
            return value
        if value is None:
            return cls.empty()
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.of_bytes(value)
        if isinstance(value, str):
            return cls.of_string(value)
        if isinstance(value, AccountID):
            return cls.of_account_id(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.of_u128(value)
        raise TypeError(f"cannot make a parameter from {type(value).__name__}")

    def is_empty(self) -> bool:
        return self.kind is ParamKind.EMPTY

    def expect_bytes(self) -> bytes:
        """The bytes carried, or an encoding error."""
        if self.kind is not ParamKind.BYTES:
            raise _encoding_error()
        return self.value

    def expect_string(self) -> str:
        """The string carried, or an encoding error."""
        if self.kind is not ParamKind.STRING:
            raise _encoding_error()
        return self.value

    def expect_u128(self) -> int:
        """The integer carried, or an encoding error."""
        if self.kind is not ParamKind.U128:
            raise _encoding_error()
        return self.value

    def expect_account_id(self) -> AccountID:
        """The account ID carried, or an encoding error."""
        if self.kind is not ParamKind.ACCOUNT_ID:
            raise _encoding_error()
        return self.value


def _pad(args: tuple, size: int, what: str) -> Tuple[Param, ...]:
    if len(args) > size:
        raise TypeError(f"at most {size} {what} allowed, got {len(args)}")
    params = [Param.from_value(arg) for arg in args]
    params.extend(Param.empty() for _ in range(size - len(params)))
    return tuple(params)


@dataclass(frozen=True, init=False)
class Request:
    """A message selector with up to three inputs."""

    message_selector: int
    inputs: Tuple[Param, Param, Param]

    def __init__(self, message_selector: int, *args: Any) -> None:
        if not 0 <= message_selector <= _U64_MAX:
            raise ValueError(f"message selector out of 64-bit range: {message_selector}")
        object.__setattr__(self, "message_selector", message_selector)
        object.__setattr__(self, "inputs", _pad(args, _MAX_INPUTS, "inputs"))

    @property
    def in1(self) -> Param:
        return self.inputs[0]

    @property
    def in2(self) -> Param:
        return self.inputs[1]

    @property
    def in3(self) -> Param:
        return self.inputs[2]


@dataclass(frozen=True, init=False)
class Response:
    """A message response with up to two outputs."""

    outputs: Tuple[Param, Param]

    def __init__(self, *args: Any) -> None:
        object.__setattr__(self, "outputs", _pad(args, _MAX_OUTPUTS, "outputs"))

    @property
    def out1(self) -> Param:
        return self.outputs[0]

    @property
    def out2(self) -> Param:
        return self.outputs[1]


@dataclass(frozen=True)
class Message:
    """A request addressed to a target account."""

    target_account: AccountID
    request: Request