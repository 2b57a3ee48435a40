"""Value kinds and locations inside a JSON-like value tree."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

PathComponent = Union[str, int]


class ValueKind(Enum):
    """The kind of a value, without the value itself."""

    NULL = "Null"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    NEGATIVE_INTEGER = "NegativeInteger"
    FLOAT = "Float"
    STRING = "String"
    SEQUENCE = "Sequence"
    MAP = "Map"

    def __str__(self) -> str:
        return self.value


def kind_of(value: Any) -> ValueKind:
    """Return the kind of a JSON-like Python value.

    ``None`` is null, ``bool`` a boolean, non-negative ``int`` an integer,
    negative ``int`` a negative integer, ``float`` a float, ``str`` a string,
    ``list``/``tuple`` a sequence and any mapping a map.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER if value >= 0 else ValueKind.NEGATIVE_INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAP
    raise TypeError(f"unsupported value of type {type(value).__name__!r}")


@dataclass(frozen=True)
class ValuePointer:
    """An immutable location within a value: the keys and indices leading to it.

    The default pointer is the origin. Extending a pointer returns a new one.
    """

    path: tuple[PathComponent, ...] = ()

    def push_key(self, key: str) -> ValuePointer:
        """Return a pointer to the subvalue at ``key``."""
        if not isinstance(key, str):
            raise TypeError("a key must be a string")
        return ValuePointer(self.path + (key,))

    def push_index(self, index: int) -> ValuePointer:
        """Return a pointer to the subvalue at ``index``."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("an index must be an integer")
        if index < 0:
            raise ValueError("an index cannot be negative")
        return ValuePointer(self.path + (index,))

    def is_origin(self) -> bool:
        """Return True if the pointer is at the origin."""
        return not self.path

    def last_field(self) -> Optional[str]:
        """Return the last key on the path, if there is one."""
        return next((c for c in reversed(self.path) if isinstance(c, str)), None)

    def first_field(self) -> Optional[str]:
        """Return the first key on the path, if there is one."""
        return next((c for c in self.path if isinstance(c, str)), None)