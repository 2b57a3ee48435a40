"""Deserializers for arbitrary JSON values and comma-separated strings."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from .collections import Deserializer, _ErrorGatherer
from .core import DeserializeError, IncorrectValueKind, Unexpected, fail
from .value import ValueKind, ValuePointer, kind_of

_ORIGIN = ValuePointer()


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "inf" if value > 0 else "-inf"


def json_value(
    value: Any,
    location: ValuePointer = _ORIGIN,
    error: type[DeserializeError] = DeserializeError,
) -> Any:
    """Accept any value and return it as plain JSON data.

    Sequences become lists and maps become dicts. A float that JSON cannot
    represent (NaN or infinite) is rejected.
    """
    kind = kind_of(value)
    if kind is ValueKind.FLOAT:
        if not math.isfinite(value):
            raise fail(
                error,
                Unexpected(f"the float {_float_text(value)} is not representable in JSON"),
                location,
            )
        return float(value)
    if kind is ValueKind.SEQUENCE:
        gatherer = _ErrorGatherer(error)
        items = []
        for index, element in enumerate(value):
            element_location = location.push_index(index)
            try:
                items.append(json_value(element, element_location, error))
            except DeserializeError as exc:
                gatherer.add(exc, element_location)
        gatherer.raise_if_any()
        return items
    if kind is ValueKind.MAP:
        gatherer = _ErrorGatherer(error)
        entries = {}
        for key, element in value.items():
            element_location = location.push_key(key)
            try:
                entries[key] = json_value(element, element_location, error)
            except DeserializeError as exc:
                gatherer.add(exc, element_location)
        gatherer.raise_if_any()
        return entries
    return value


def comma_separated(parse: Callable[[str], Any]) -> Deserializer:
    """Return a deserializer of a comma-separated string into a list.

    Each piece is converted by ``parse``; a ValueError or TypeError it raises
    becomes an unexpected-value error carrying its message.
    """

    def deserialize_comma_separated(
        value: Any,
        location: ValuePointer = _ORIGIN,
        error: type[DeserializeError] = DeserializeError,
    ) -> list[Any]:
        if kind_of(value) is not ValueKind.STRING:
            raise fail(error, IncorrectValueKind(value, (ValueKind.STRING,)), location)
        try:
            return [parse(piece) for piece in value.split(",")]
        except (ValueError, TypeError) as exc:
            raise fail(error, Unexpected(str(exc)), location) from exc

    return deserialize_comma_separated