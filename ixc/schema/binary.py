"""The codec interface and the native binary codec."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .binary_decoder import decode_value as _decode_binary
from .binary_encoder import encode_value as _encode_binary
from .types import ValueType


class Codec(ABC):
    """An encoding protocol for schema values."""

    @abstractmethod
    def encode_value(self, value: Any, value_type: ValueType) -> bytes:
        """Encode ``value`` of ``value_type``."""

    @abstractmethod
    def decode_value(self, data: bytes, value_type: ValueType) -> Any:
        """Decode a value of ``value_type`` from ``data``."""


class NativeBinaryCodec(Codec):
    """Encodes and decodes values in the native binary format."""

    def encode_value(self, value: Any, value_type: ValueType) -> bytes:
        return _encode_binary(value, value_type)

    def decode_value(self, data: bytes, value_type: ValueType) -> Any:
        return _decode_binary(bytes(data), value_type)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NativeBinaryCodec)

    def __hash__(self) -> int:
        return hash(NativeBinaryCodec)

    def __repr__(self) -> str:
        return "NativeBinaryCodec()"


def decode_value(codec: Codec, data: bytes, value_type: ValueType) -> Any:
    """Decode a value of ``value_type`` from ``data`` with ``codec``."""
    return codec.decode_value(data, value_type)