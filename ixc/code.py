"""Error and success codes returned by the message API."""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional


class SystemCode(enum.IntEnum):
    """A known system error code."""

    FATAL_EXECUTION_ERROR = 1
    ACCOUNT_NOT_FOUND = 2
    HANDLER_NOT_FOUND = 3
    UNAUTHORIZED_CALLER_ACCESS = 4
    INVALID_HANDLER = 5
    VOLATILE_ACCESS_ERROR = 6
    CALL_STACK_OVERFLOW = 7
    OTHER = 128
    MESSAGE_NOT_HANDLED = 129
    ENCODING_ERROR = 130
    OUT_OF_GAS = 131

    def valid_handler_code(self) -> bool:
        """True if a handler may return this code directly, False if it is system-reserved."""
        return self.value >= 128


class _Kind(enum.Enum):
    SYSTEM = "system"
    HANDLER = "handler"
    UNKNOWN = "unknown"


_HANDLER_OFFSET = 256
_U16_MAX = 0xFFFF


def _handler_int(code: Any) -> int:
    value = code.value if isinstance(code, enum.Enum) else code
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 0xFF:
        raise ValueError(f"handler code must fit in a byte: {code!r}")
    return value


class ErrorCode(Exception):
    """An error raised through the message API.

    It is either a known system code, a handler-defined code or an unknown
    16-bit code. Two error codes are equal when their 16-bit values are equal.
    """

    def __init__(self, code: Any) -> None:
        if isinstance(code, SystemCode):
            kind = _Kind.SYSTEM
        elif isinstance(code, enum.Enum):
            _handler_int(code)
            kind = _Kind.HANDLER
        elif isinstance(code, int) and not isinstance(code, bool):
            if not 0 <= code <= _U16_MAX:
                raise ValueError(f"error code out of 16-bit range: {code}")
            kind = _Kind.UNKNOWN
        else:
            raise TypeError(f"unsupported error code: {code!r}")
        self._setup(kind, code)

    def _setup(self, kind: _Kind, code: Any) -> None:
        self._kind = kind
        self._code = code
        Exception.__init__(self, self._describe())

    @classmethod
    def _make(cls, kind: _Kind, code: Any) -> ErrorCode:
        obj = cls.__new__(cls)
        obj._setup(kind, code)
        return obj

    @classmethod
    def from_u16(
        cls, value: int, handler_codes: Optional[Callable[[int], Any]] = None
    ) -> ErrorCode:
        """Decode a 16-bit code.

        Values below 256 are system codes, values from 256 to 511 are handler
        codes converted with ``handler_codes`` (plain integers if it is None),
        and anything that cannot be recognised is an unknown code.
        """
        if not 0 <= value <= _U16_MAX:
            raise ValueError(f"error code out of 16-bit range: {value}")
        if value < _HANDLER_OFFSET:
            try:
                return cls._make(_Kind.SYSTEM, SystemCode(value))
            except ValueError:
                return cls._make(_Kind.UNKNOWN, value)
        if value < 2 * _HANDLER_OFFSET:
            raw = value - _HANDLER_OFFSET
            if handler_codes is None:
                return cls._make(_Kind.HANDLER, raw)
            try:
                return cls._make(_Kind.HANDLER, handler_codes(raw))
            except ValueError:
                return cls._make(_Kind.UNKNOWN, value)
        return cls._make(_Kind.UNKNOWN, value)

    @property
    def system_code(self) -> Optional[SystemCode]:
        """The system code, or None if this is not a system code."""
        return self._code if self._kind is _Kind.SYSTEM else None

    @property
    def handler_code(self) -> Any:
        """The handler code, or None if this is not a handler code."""
        return self._code if self._kind is _Kind.HANDLER else None

    def __int__(self) -> int:
        if self._kind is _Kind.SYSTEM:
            return int(self._code)
        if self._kind is _Kind.HANDLER:
            return _handler_int(self._code) + _HANDLER_OFFSET
        return self._code

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorCode):
            return int(self) == int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(int(self))

    def _describe(self) -> str:
        if self._kind is _Kind.SYSTEM:
            return f"system error: {self._code.name}"
        if self._kind is _Kind.HANDLER:
            name = self._code.name if isinstance(self._code, enum.Enum) else self._code
            return f"handler error: {name}"
        return f"unknown error code {self._code}"

    def __repr__(self) -> str:
        return f"ErrorCode({self._describe()!r})"