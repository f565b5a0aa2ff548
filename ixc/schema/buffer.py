"""Byte buffers for encoding in reverse and for reading input."""

from __future__ import annotations

from .coding import DecodeError, DecodeErrorKind, EncodeError, EncodeErrorKind


class ReverseWriter:
    """A fixed-size buffer filled from the end towards the start."""

    __slots__ = ("_buf", "_pos")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"buffer size must not be negative: {size}")
        self._buf = bytearray(size)
        self._pos = size

    def write(self, data: bytes) -> None:
        """Place ``data`` just before everything written so far."""
        size = len(data)
        if self._pos < size:
            raise EncodeError(EncodeErrorKind.OUT_OF_SPACE)
        self._pos -= size
        self._buf[self._pos:self._pos + size] = data

    @property
    def pos(self) -> int:
        """The offset of the first written byte."""
        return self._pos

    def finish(self) -> bytes:
        """The bytes written so far."""
        return bytes(self._buf[self._pos:])


class Reader:
    """Reads consecutive slices from a byte string."""

    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    def read_bytes(self, size: int) -> bytes:
        """Read ``size`` bytes, or raise an out-of-data error."""
        if size < 0 or len(self._data) - self._offset < size:
            raise DecodeError(DecodeErrorKind.OUT_OF_DATA)
        start = self._offset
        self._offset += size
        return self._data[start:self._offset]

    def is_done(self) -> None:
        """Raise an invalid-data error if anything is left unread."""
        if self._offset != len(self._data):
            raise DecodeError(DecodeErrorKind.INVALID_DATA)

    @property
    def remaining(self) -> bytes:
        """The unread bytes."""
        return self._data[self._offset:]

    def __len__(self) -> int:
        return len(self._data) - self._offset