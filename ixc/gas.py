"""Gas metering."""

from __future__ import annotations

from typing import Optional

from .code import ErrorCode, SystemCode

_U64_MAX = (1 << 64) - 1


class Gas:
    """A gas meter. A limit of zero means metering without a limit."""

    __slots__ = ("_limit", "_consumed")

    def __init__(self, limit: int = 0) -> None:
        if not 0 <= limit <= _U64_MAX:
            raise ValueError(f"gas limit out of range: {limit}")
        self._limit = limit
        self._consumed = 0

    @classmethod
    def limited(cls, limit: int) -> Gas:
        """A meter with the given limit; zero means unlimited."""
        return cls(limit)

    @classmethod
    def unlimited(cls) -> Gas:
        """A meter that only records consumption."""
        return cls(0)

    @property
    def limit(self) -> Optional[int]:
        """The gas limit, or None when unlimited."""
        return self._limit or None

    @property
    def left(self) -> Optional[int]:
        """The gas remaining, or None when unlimited."""
        if not self._limit:
            return None
        return max(self._limit - self._consumed, 0)

    def consume(self, amount: int) -> None:
        """Record consumed gas; raise an out-of-gas error once over the limit."""
        if amount < 0:
            raise ValueError(f"gas amount must not be negative: {amount}")
        self._consumed = min(self._consumed + amount, _U64_MAX)
        if self._limit and self._consumed > self._limit:
            raise ErrorCode(SystemCode.OUT_OF_GAS)

    @property
    def consumed(self) -> int:
        """The total gas consumed so far."""
        return self._consumed

    def __repr__(self) -> str:
        return f"Gas(limit={self._limit}, consumed={self._consumed})"