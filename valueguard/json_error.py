"""Human-readable error messages for JSON payloads."""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from .core import (
    Break,
    DeserializeError,
    ErrorKind,
    Flow,
    IncorrectValueKind,
    MissingField,
    Unexpected,
    UnknownKey,
    UnknownValue,
)
from .value import ValueKind, ValuePointer, kind_of

_ORDER = {kind: rank for rank, kind in enumerate(ValueKind)}

_SINGLE_DESCRIPTION = {
    ValueKind.NULL: "null",
    ValueKind.BOOLEAN: "a boolean",
    ValueKind.INTEGER: "a positive integer",
    ValueKind.NEGATIVE_INTEGER: "a negative integer",
    ValueKind.FLOAT: "a number",
    ValueKind.STRING: "a string",
    ValueKind.SEQUENCE: "an array",
    ValueKind.MAP: "an object",
}

_NUMERIC = (ValueKind.INTEGER, ValueKind.NEGATIVE_INTEGER)


def location_json_description(location: ValuePointer, article: str) -> str:
    """Describe ``location`` as e.g. `` at `.key1[8].key2` ``.

    The origin is described by the empty string, without the article.
    """
    if location.is_origin():
        return ""
    path = "".join(
        f".{component}" if isinstance(component, str) else f"[{component}]"
        for component in location.path
    )
    return f"{article} `{path}`"


def _kind_parts(kinds: list[ValueKind]) -> list[str]:
    parts: list[str] = []
    rest = kinds
    while rest:
        if len(rest) >= 2 and rest[0] in _NUMERIC and rest[1] is ValueKind.FLOAT:
            parts.append("a number")
            rest = rest[2:]
        elif (
            len(rest) >= 3
            and rest[0] is ValueKind.INTEGER
            and rest[1] is ValueKind.NEGATIVE_INTEGER
            and rest[2] is ValueKind.FLOAT
        ):
            parts.append("a number")
            rest = rest[3:]
        elif (
            len(rest) >= 2
            and rest[0] is ValueKind.INTEGER
            and rest[1] is ValueKind.NEGATIVE_INTEGER
        ):
            parts.append("an integer")
            rest = rest[2:]
        else:
            parts.append(_SINGLE_DESCRIPTION[rest[0]])
            rest = rest[1:]
    return parts


def value_kinds_description_json(kinds: Iterable[ValueKind]) -> str:
    """Describe a list of accepted value kinds, e.g. ``null, a boolean, or a number``."""
    ordered = sorted(set(kinds), key=_ORDER.__getitem__)
    if not ordered:
        return "a different value"
    parts = _kind_parts(ordered)
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return f"{parts[0]} or {parts[1]}"
    return ", ".join(parts[:-1]) + f", or {parts[-1]}"


def _to_json(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _to_json(item) for key, item in value.items()}
    return value


def value_description_with_kind_json(value: Any) -> str:
    """Return the compact JSON text of ``value`` preceded by a description of its kind."""
    value = _to_json(value)
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return "null"
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return f"{value_kinds_description_json([kind])}: `{text}`"


def _quoted_list(items: Iterable[str]) -> str:
    return ", ".join(f"`{item}`" for item in items)


def _json_message(kind: ErrorKind, location: ValuePointer) -> str:
    if isinstance(kind, IncorrectValueKind):
        expected = value_kinds_description_json(kind.accepted)
        received = value_description_with_kind_json(kind.actual)
        where = location_json_description(location, " at")
        return f"Invalid value type{where}: expected {expected}, but found {received}"
    if isinstance(kind, MissingField):
        where = location_json_description(location, " inside")
        return f"Missing field `{kind.field}`{where}"
    if isinstance(kind, UnknownKey):
        where = location_json_description(location, " inside")
        return f"Unknown field `{kind.key}`{where}: expected one of {_quoted_list(kind.accepted)}"
    if isinstance(kind, UnknownValue):
        where = location_json_description(location, " at")
        return f"Unknown value `{kind.value}`{where}: expected one of {_quoted_list(kind.accepted)}"
    if isinstance(kind, Unexpected):
        where = location_json_description(location, " at")
        return f"Invalid value{where}: {kind.msg}"
    raise TypeError(f"unknown error kind {kind!r}")


class JsonError(DeserializeError):
    """A deserialization error whose message describes a JSON payload."""

    @classmethod
    def error(
        cls,
        current: Optional[DeserializeError],
        kind: ErrorKind,
        location: ValuePointer,
    ) -> Flow:
        """Build the message for ``kind`` and stop at the first error."""
        return Break(cls(_json_message(kind, location), kind=kind, location=location))

    @classmethod
    def merge(
        cls,
        current: Optional[DeserializeError],
        other: BaseException,
        location: ValuePointer,
    ) -> Flow:
        """Stop with ``other`` if it is a JsonError, else wrap it as an unexpected value."""
        if isinstance(other, JsonError):
            return Break(other)
        return cls.error(current, Unexpected(str(other)), location)