"""A recursive filter type and a query holding one, read with custom deserializers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .collections import _ErrorGatherer
from .core import DeserializeError, IncorrectValueKind, MissingField, UnknownKey, fail
from .scalars import string
from .value import ValueKind, ValuePointer, kind_of

_ORIGIN = ValuePointer()


@dataclass(frozen=True)
class Direct:
    """A filter that is a single string."""

    value: str


@dataclass(frozen=True)
class Array:
    """A filter made of nested filters."""

    items: tuple[Filter, ...]


Filter = Union[Direct, Array]


@dataclass(frozen=True)
class Query:
    """A named filter."""

    name: str
    filter: Filter


def deserialize_filter(
    value: Any,
    location: ValuePointer = _ORIGIN,
    error: type[DeserializeError] = DeserializeError,
) -> Filter:
    """Read a string as Direct and a sequence as an Array of filters; stop at the first error."""
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return Direct(value)
    if kind is ValueKind.SEQUENCE:
        return Array(
            tuple(
                deserialize_filter(item, location.push_index(index), error)
                for index, item in enumerate(value)
            )
        )
    raise fail(
        error,
        IncorrectValueKind(value, (ValueKind.STRING, ValueKind.SEQUENCE)),
        location,
    )


_QUERY_FIELDS = ("name", "filter")
_QUERY_READERS = {"name": string, "filter": deserialize_filter}


def deserialize_query(
    value: Any,
    location: ValuePointer = _ORIGIN,
    error: type[DeserializeError] = DeserializeError,
) -> Query:
    """Read a map with exactly the fields ``name`` and ``filter``."""
    if kind_of(value) is not ValueKind.MAP:
        raise fail(error, IncorrectValueKind(value, (ValueKind.MAP,)), location)
    gatherer = _ErrorGatherer(error)
    found: dict[str, Any] = {}
    failed: set[str] = set()
    for key, item in value.items():
        reader = _QUERY_READERS.get(key)
        if reader is None:
            gatherer.add_kind(UnknownKey(key, _QUERY_FIELDS), location)
            continue
        field_location = location.push_key(key)
        try:
            found[key] = reader(item, field_location, error)
        except DeserializeError as exc:
            failed.add(key)
            gatherer.add(exc, field_location)
    for field in _QUERY_FIELDS:
        if field not in found and field not in failed:
            gatherer.add_kind(MissingField(field), location)
    gatherer.raise_if_any()
    return Query(found["name"], found["filter"])