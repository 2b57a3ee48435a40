"""Human-readable error messages for query parameters."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from decimal import Decimal
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
from .value import ValueKind, ValuePointer


def value_kinds_description_query_param(kinds: Iterable[ValueKind]) -> str:
    """Describe accepted kinds; query parameters are always strings."""
    return "a string"


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-"):
        text += "0"
    return text


def value_description_with_kind_query_param(value: Any) -> str:
    """Describe the value received for a query parameter."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"a boolean: `{'true' if value else 'false'}`"
    if isinstance(value, int):
        return f"an integer: `{value}`"
    if isinstance(value, float):
        return f"a number: `{_format_float(value)}`"
    if isinstance(value, str):
        return f"a string: `{value}`"
    if isinstance(value, (list, tuple)):
        return "multiple values"
    if isinstance(value, Mapping):
        return "multiple parameters"
    raise TypeError(f"unsupported value of type {type(value).__name__!r}")


def location_query_param_description(location: ValuePointer, article: str) -> str:
    """Describe ``location`` as e.g. `` at `key5[2]` ``.

    The origin is described by the empty string, without the article.
    """
    if location.is_origin():
        return ""
    pieces = []
    for position, component in enumerate(location.path):
        if isinstance(component, str):
            pieces.append(component if position == 0 else f".{component}")
        else:
            pieces.append(f"[{component}]")
    return f"{article} `{''.join(pieces)}`"


def _quoted_list(items: Iterable[str]) -> str:
    return ", ".join(f"`{item}`" for item in items)


def _query_message(kind: ErrorKind, location: ValuePointer) -> str:
    if isinstance(kind, IncorrectValueKind):
        expected = value_kinds_description_query_param(kind.accepted)
        received = value_description_with_kind_query_param(kind.actual)
        where = location_query_param_description(location, " for parameter")
        return f"Invalid value type{where}: expected {expected}, but found {received}"
    if isinstance(kind, MissingField):
        where = location_query_param_description(location, " inside")
        return f"Missing parameter `{kind.field}`{where}"
    if isinstance(kind, UnknownKey):
        where = location_query_param_description(location, " inside")
        return (
            f"Unknown parameter `{kind.key}`{where}: expected one of "
            f"{_quoted_list(kind.accepted)}"
        )
    if isinstance(kind, UnknownValue):
        where = location_query_param_description(location, " for parameter")
        return (
            f"Unknown value `{kind.value}`{where}: expected one of "
            f"{_quoted_list(kind.accepted)}"
        )
    if isinstance(kind, Unexpected):
        where = location_query_param_description(location, " in parameter")
        return f"Invalid value{where}: {kind.msg}"
    raise TypeError(f"unknown error kind {kind!r}")


class QueryParamError(DeserializeError):
    """A deserialization error whose message describes query parameters."""

    @classmethod
    def error(
        cls,
        current: Optional[DeserializeError],
        kind: ErrorKind,
        location: ValuePointer,
    ) -> Flow:
        """Build the message for ``kind`` and stop at the first error."""
        return Break(cls(_query_message(kind, location), kind=kind, location=location))

    @classmethod
    def merge(
        cls,
        current: Optional[DeserializeError],
        other: BaseException,
        location: ValuePointer,
    ) -> Flow:
        """Stop with ``other`` if it is a QueryParamError, else wrap it as an unexpected value."""
        if isinstance(other, QueryParamError):
            return Break(other)
        return cls.error(current, Unexpected(str(other)), location)