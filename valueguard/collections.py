"""Deserializers for containers: sequences, sets, optionals, mappings and tuples."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from .core import (
    Break,
    DeserializeError,
    ErrorKind,
    Flow,
    IncorrectValueKind,
    Unexpected,
    fail,
)
from .value import ValueKind, ValuePointer, kind_of

_ORIGIN = ValuePointer()

Deserializer = Callable[[Any, ValuePointer, type], Any]


class _ErrorGatherer:
    """Gathers errors through an error class's ``merge`` and ``error`` hooks."""

    def __init__(self, error: type[DeserializeError]) -> None:
        self.error = error
        self.current: Optional[DeserializeError] = None

    def _follow(self, flow: Flow) -> None:
        if isinstance(flow, Break):
            raise flow.value from None
        self.current = flow.value

    def add(self, exc: BaseException, location: ValuePointer) -> None:
        """Merge an error raised at ``location``; raise it if merging stops."""
        self._follow(self.error.merge(self.current, exc, location))

    def add_kind(self, kind: ErrorKind, location: ValuePointer) -> None:
        """Record an error of ``kind`` at ``location``; raise it if it stops."""
        self._follow(self.error.error(self.current, kind, location))

    def raise_if_any(self) -> None:
        """Raise the gathered error, if there is one."""
        if self.current is not None:
            raise self.current


def _require(
    value: Any,
    kind: ValueKind,
    location: ValuePointer,
    error: type[DeserializeError],
) -> None:
    if kind_of(value) is not kind:
        raise fail(error, IncorrectValueKind(value, (kind,)), location)


def _deserialize_items(
    item: Deserializer,
    value: Any,
    location: ValuePointer,
    error: type[DeserializeError],
) -> list[Any]:
    _require(value, ValueKind.SEQUENCE, location, error)
    gatherer = _ErrorGatherer(error)
    results = []
    for index, element in enumerate(value):
        element_location = location.push_index(index)
        try:
            results.append(item(element, element_location, error))
        except DeserializeError as exc:
            gatherer.add(exc, element_location)
    gatherer.raise_if_any()
    return results


def sequence_of(item: Deserializer) -> Deserializer:
    """Return a deserializer of a sequence whose elements are read by ``item``."""

    def deserialize_sequence(
        value: Any,
        location: ValuePointer = _ORIGIN,
        error: type[DeserializeError] = DeserializeError,
    ) -> list[Any]:
        return _deserialize_items(item, value, location, error)

    return deserialize_sequence


def set_of(item: Deserializer) -> Deserializer:
    """Return a deserializer of a sequence into a set of elements read by ``item``."""

    def deserialize_set(
        value: Any,
        location: ValuePointer = _ORIGIN,
        error: type[DeserializeError] = DeserializeError,
    ) -> set[Any]:
        return set(_deserialize_items(item, value, location, error))

    return deserialize_set


def optional(inner: Deserializer) -> Deserializer:
    """Return a deserializer that maps null to None and reads anything else with ``inner``."""

    def deserialize_optional(
        value: Any,
        location: ValuePointer = _ORIGIN,
        error: type[DeserializeError] = DeserializeError,
    ) -> Any:
        if value is None:
            return None
        return inner(value, location, error)

    return deserialize_optional


def _type_name(key: Callable[[str], Any]) -> str:
    return getattr(key, "__qualname__", None) or getattr(key, "__name__", None) or repr(key)


def mapping_of(item: Deserializer, key: Callable[[str], Any] = str) -> Deserializer:
    """Return a deserializer of a map whose values are read by ``item``.

    Each string key is converted by ``key``; a key that ``key`` rejects with
    ValueError or TypeError is reported as an unexpected value at the map.
    """
    key_name = _type_name(key)

    def deserialize_mapping(
        value: Any,
        location: ValuePointer = _ORIGIN,
        error: type[DeserializeError] = DeserializeError,
    ) -> dict[Any, Any]:
        _require(value, ValueKind.MAP, location, error)
        gatherer = _ErrorGatherer(error)
        results: dict[Any, Any] = {}
        for string_key, element in value.items():
            try:
                parsed_key = key(string_key)
            except (ValueError, TypeError):
                gatherer.add_kind(
                    Unexpected(
                        f'the key "{string_key}" could not be deserialized '
                        f"into the key type `{key_name}`"
                    ),
                    location,
                )
                continue
            element_location = location.push_key(string_key)
            try:
                results[parsed_key] = item(element, element_location, error)
            except DeserializeError as exc:
                gatherer.add(exc, element_location)
        gatherer.raise_if_any()
        return results

    return deserialize_mapping


def _fixed_tuple(items: tuple[Deserializer, ...]) -> Deserializer:
    count = len(items)

    def deserialize_tuple(
        value: Any,
        location: ValuePointer = _ORIGIN,
        error: type[DeserializeError] = DeserializeError,
    ) -> tuple[Any, ...]:
        _require(value, ValueKind.SEQUENCE, location, error)
        if len(value) != count:
            raise fail(
                error,
                Unexpected(f"the sequence should have exactly {count} elements"),
                location,
            )
        gatherer = _ErrorGatherer(error)
        results = []
        for index, (reader, element) in enumerate(zip(items, value)):
            element_location = location.push_index(index)
            try:
                results.append(reader(element, element_location, error))
            except DeserializeError as exc:
                gatherer.add(exc, element_location)
        gatherer.raise_if_any()
        return tuple(results)

    return deserialize_tuple


def pair_of(first: Deserializer, second: Deserializer) -> Deserializer:
    """Return a deserializer of a two-element sequence into a tuple."""
    return _fixed_tuple((first, second))


def triple_of(first: Deserializer, second: Deserializer, third: Deserializer) -> Deserializer:
    """Return a deserializer of a three-element sequence into a tuple."""
    return _fixed_tuple((first, second, third))