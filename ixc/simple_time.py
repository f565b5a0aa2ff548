"""Simple high-precision time values: nanoseconds since the Unix epoch and nanosecond durations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, order=True)
class Duration:
    """A signed number of nanoseconds. The default is zero."""

    nanos: int = 0

    SECOND: ClassVar[Duration]
    MINUTE: ClassVar[Duration]
    HOUR: ClassVar[Duration]
    DAY: ClassVar[Duration]
    WEEK: ClassVar[Duration]

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        """Create a duration from a number of nanoseconds."""
        return cls(nanos)

    @classmethod
    def from_secs(cls, secs: int) -> Duration:
        """Create a duration from a number of whole seconds."""
        return cls(secs * _NANOS_PER_SECOND)

    def times(self, factor: int) -> Duration:
        """Multiply the duration by an integer scalar."""
        return Duration(self.nanos * factor)

    def __neg__(self) -> Duration:
        return Duration(-self.nanos)

    def __mul__(self, factor: object) -> Duration:
        if isinstance(factor, int) and not isinstance(factor, bool):
            return self.times(factor)
        return NotImplemented

    def __rmul__(self, factor: object) -> Duration:
        return self.__mul__(factor)


Duration.SECOND = Duration(_NANOS_PER_SECOND)
Duration.MINUTE = Duration.SECOND.times(60)
Duration.HOUR = Duration.MINUTE.times(60)
Duration.DAY = Duration.HOUR.times(24)
Duration.WEEK = Duration.DAY.times(7)


@dataclass(frozen=True, order=True)
class Time:
    """A point in time as nanoseconds since the Unix epoch. The default is the epoch."""

    unix_nanos: int = 0

    @classmethod
    def from_unix_nanos(cls, nanos: int) -> Time:
        """Create a time from nanoseconds since the Unix epoch."""
        return cls(nanos)

    @classmethod
    def from_unix_secs(cls, secs: int) -> Time:
        """Create a time from seconds since the Unix epoch."""
        return cls(secs * _NANOS_PER_SECOND)

    def add(self, duration: Duration) -> Time:
        """Return this time moved forward by a duration."""
        return Time(self.unix_nanos + duration.nanos)

    def sub(self, duration: Duration) -> Time:
        """Return this time moved backward by a duration."""
        return Time(self.unix_nanos - duration.nanos)

    def since(self, other: Time) -> Duration:
        """Return the duration elapsed since another time."""
        return Duration(self.unix_nanos - other.unix_nanos)

    def until(self, other: Time) -> Duration:
        """Return the duration from this time until another time."""
        return Duration(other.unix_nanos - self.unix_nanos)

    def __add__(self, other: object) -> Time:
        if isinstance(other, Duration):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Duration):
            return self.sub(other)
        if isinstance(other, Time):
            return self.since(other)
        return NotImplemented