"""Deserializers for scalar values: null, booleans, integers, floats and strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .core import DeserializeError, IncorrectValueKind, Unexpected, fail
from .value import ValueKind, ValuePointer, kind_of

_ORIGIN = ValuePointer()


def _check_kind(
    value: Any,
    accepted: tuple[ValueKind, ...],
    location: ValuePointer,
    error: type[DeserializeError],
) -> None:
    if kind_of(value) not in accepted:
        raise fail(error, IncorrectValueKind(value, accepted), location)


@dataclass(frozen=True)
class IntegerType:
    """A bounded integer type used as a deserializer.

    Unsigned types accept only non-negative integers; signed types accept
    negative ones as well. Values outside the bounds are rejected with an
    unexpected-value error naming the bound.
    """

    name: str
    minimum: int
    maximum: int

    @property
    def signed(self) -> bool:
        """True if the type admits negative values."""
        return self.minimum < 0

    @property
    def accepted(self) -> tuple[ValueKind, ...]:
        """The value kinds this type accepts."""
        if self.signed:
            return (ValueKind.INTEGER, ValueKind.NEGATIVE_INTEGER)
        return (ValueKind.INTEGER,)

    def __call__(
        self,
        value: Any,
        location: ValuePointer = _ORIGIN,
        error: type[DeserializeError] = DeserializeError,
    ) -> int:
        _check_kind(value, self.accepted, location, error)
        if value > self.maximum:
            raise fail(
                error,
                Unexpected(
                    f"value: `{value}` is too large to be deserialized, "
                    f"maximum value authorized is `{self.maximum}`"
                ),
                location,
            )
        if value < self.minimum:
            raise fail(
                error,
                Unexpected(
                    f"value: `{value}` is too small to be deserialized, "
                    f"minimum value authorized is `{self.minimum}`"
                ),
                location,
            )
        return int(value)


def _unsigned(name: str, bits: int) -> IntegerType:
    return IntegerType(name, 0, (1 << bits) - 1)


def _signed(name: str, bits: int) -> IntegerType:
    return IntegerType(name, -(1 << (bits - 1)), (1 << (bits - 1)) - 1)


U8 = _unsigned("u8", 8)
U16 = _unsigned("u16", 16)
U32 = _unsigned("u32", 32)
U64 = _unsigned("u64", 64)
USIZE = _unsigned("usize", 64)
I8 = _signed("i8", 8)
I16 = _signed("i16", 16)
I32 = _signed("i32", 32)
I64 = _signed("i64", 64)
ISIZE = _signed("isize", 64)


def null_value(
    value: Any,
    location: ValuePointer = _ORIGIN,
    error: type[DeserializeError] = DeserializeError,
) -> None:
    """Accept only null and return None."""
    _check_kind(value, (ValueKind.NULL,), location, error)
    return None


def boolean(
    value: Any,
    location: ValuePointer = _ORIGIN,
    error: type[DeserializeError] = DeserializeError,
) -> bool:
    """Accept only a boolean."""
    _check_kind(value, (ValueKind.BOOLEAN,), location, error)
    return bool(value)


def string(
    value: Any,
    location: ValuePointer = _ORIGIN,
    error: type[DeserializeError] = DeserializeError,
) -> str:
    """Accept only a string."""
    _check_kind(value, (ValueKind.STRING,), location, error)
    return str(value)


def number(
    value: Any,
    location: ValuePointer = _ORIGIN,
    error: type[DeserializeError] = DeserializeError,
) -> float:
    """Accept an integer or a float and return it as a float."""
    _check_kind(
        value,
        (ValueKind.FLOAT, ValueKind.INTEGER, ValueKind.NEGATIVE_INTEGER),
        location,
        error,
    )
    return float(value)