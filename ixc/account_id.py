"""Account identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_SIZE = 16
_MAX = (1 << 128) - 1


@dataclass(frozen=True, order=True)
class AccountID:
    """A unique unsigned 128-bit account identifier.

    The value zero is reserved for the null account, meaning the account is
    not valid or does not exist.
    """

    value: int = 0

    EMPTY: ClassVar[AccountID]

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"account id must be an integer: {self.value!r}")
        if not 0 <= self.value <= _MAX:
            raise ValueError(f"account id out of 128-bit range: {self.value}")

    def is_empty(self) -> bool:
        """True for the null account."""
        return self.value == 0

    def to_bytes(self) -> bytes:
        """The identifier as 16 little-endian bytes."""
        return self.value.to_bytes(_SIZE, "little")

    @classmethod
    def from_bytes(cls, data: bytes) -> AccountID:
        """Build an identifier from 16 little-endian bytes."""
        if len(data) != _SIZE:
            raise ValueError(f"account id needs {_SIZE} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little"))

    def __int__(self) -> int:
        return self.value


AccountID.EMPTY = AccountID(0)

ROOT_ACCOUNT = AccountID(1)
"""The root system account."""