"""Deserialization protocol: control flow, error kinds and the base error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from .value import ValueKind, ValuePointer

T = TypeVar("T")


@dataclass(frozen=True)
class Continue(Generic[T]):
    """Carry on deserializing, accumulating the held error."""

    value: T


@dataclass(frozen=True)
class Break(Generic[T]):
    """Stop deserializing immediately with the held error."""

    value: T


Flow = Union[Continue, Break]


def take_cf_content(flow: Flow) -> Any:
    """Return what a Continue or a Break holds."""
    if isinstance(flow, (Continue, Break)):
        return flow.value
    raise TypeError("expected a Continue or a Break")


@dataclass(frozen=True)
class IncorrectValueKind:
    """The value is of a kind that is not accepted."""

    actual: Any
    accepted: tuple[ValueKind, ...]


@dataclass(frozen=True)
class MissingField:
    """A required field is absent."""

    field: str


@dataclass(frozen=True)
class UnknownKey:
    """A key was found that is not among the accepted ones."""

    key: str
    accepted: tuple[str, ...]


@dataclass(frozen=True)
class UnknownValue:
    """A string value is not among the accepted ones."""

    value: str
    accepted: tuple[str, ...]


@dataclass(frozen=True)
class Unexpected:
    """Any other problem, described by a message."""

    msg: str


ErrorKind = Union[IncorrectValueKind, MissingField, UnknownKey, UnknownValue, Unexpected]


class DeserializeError(Exception):
    """Base error raised when a value cannot be deserialized.

    Subclasses decide how an error kind becomes an error (``error``) and how a
    new error combines with the one gathered so far (``merge``). Both return a
    ``Continue`` to keep gathering errors or a ``Break`` to stop at once.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: Optional[ErrorKind] = None,
        location: Optional[ValuePointer] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.location = location if location is not None else ValuePointer()

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.message, self.kind, self.location) == (
            other.message,
            other.kind,
            other.location,
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.location))

    @classmethod
    def error(
        cls,
        current: Optional[DeserializeError],
        kind: ErrorKind,
        location: ValuePointer,
    ) -> Flow:
        """Build the error for ``kind`` at ``location``; stops by default."""
        return Break(cls(repr(kind), kind=kind, location=location))

    @classmethod
    def merge(
        cls,
        current: Optional[DeserializeError],
        other: BaseException,
        location: ValuePointer,
    ) -> Flow:
        """Combine ``other`` with the error gathered so far.

        An error of this class replaces the current one and stops; any other
        exception becomes an unexpected-value error at the merge location.
        """
        if isinstance(other, cls):
            return Break(other)
        return cls.error(current, Unexpected(str(other)), location)


def fail(error: type[DeserializeError], kind: ErrorKind, location: ValuePointer) -> DeserializeError:
    """Return the error of class ``error`` for ``kind`` at ``location``."""
    return take_cf_content(error.error(None, kind, location))


Deserializer = Callable[[Any, ValuePointer, type], Any]


def deserialize(
    deserializer: Deserializer,
    value: Any,
    error: type[DeserializeError] = DeserializeError,
) -> Any:
    """Run ``deserializer`` on ``value`` from the origin, raising ``error`` on failure."""
    return deserializer(value, ValuePointer(), error)