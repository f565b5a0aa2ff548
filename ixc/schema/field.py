"""Field kinds and field definitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional


class Kind(enum.IntEnum):
    """The basic type of a field."""

    STRING = 1
    BYTES = 2
    INT8 = 3
    UINT8 = 4
    INT16 = 5
    UINT16 = 6
    INT32 = 7
    UINT32 = 8
    INT64 = 9
    UINT64 = 10
    INT_N = 11
    UINT_N = 12
    DECIMAL = 13
    BOOL = 14
    TIME = 15
    DURATION = 16
    FLOAT32 = 17
    FLOAT64 = 18
    ACCOUNT_ID = 19
    ENUM = 20
    JSON = 21
    STRUCT = 22
    LIST = 23


@dataclass(frozen=True)
class Field:
    """A field in a type.

    ``element_kind`` is set for list fields and ``referenced_type`` names the
    type that a struct or enum field refers to.
    """

    name: str
    kind: Kind
    nullable: bool = False
    element_kind: Optional[Kind] = None
    referenced_type: str = ""

    def with_name(self, name: str) -> Field:
        """A copy of the field with the given name."""
        return replace(self, name=name)