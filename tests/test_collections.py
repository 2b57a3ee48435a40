import pytest

from valueguard.collections import (
    mapping_of,
    optional,
    pair_of,
    sequence_of,
    set_of,
    triple_of,
)
from valueguard.core import Continue, DeserializeError, IncorrectValueKind, Unexpected, deserialize
from valueguard.json_error import JsonError
from valueguard.scalars import U8, boolean, string
from valueguard.value import ValueKind, ValuePointer


class Collect(DeserializeError):
    """An error that gathers every location instead of stopping."""

    @classmethod
    def error(cls, current, kind, location):
        found = list(current.found) if current is not None else []
        err = cls("collected", kind=kind, location=location)
        err.found = found + [location]
        return Continue(err)

    @classmethod
    def merge(cls, current, other, location):
        found = list(current.found) if current is not None else []
        err = cls("collected", location=location)
        err.found = found + list(other.found)
        return Continue(err)


def test_sequence_round_trip():
    assert deserialize(sequence_of(string), ["a", "b", "c"], JsonError) == ["a", "b", "c"]


def test_sequence_empty():
    assert deserialize(sequence_of(U8), [], JsonError) == []


def test_sequence_wrong_kind():
    with pytest.raises(JsonError) as info:
        deserialize(sequence_of(U8), "nope", JsonError)
    assert info.value.kind == IncorrectValueKind("nope", (ValueKind.SEQUENCE,))
    assert info.value.location.is_origin()


def test_sequence_error_location():
    with pytest.raises(JsonError) as info:
        deserialize(sequence_of(U8), [1, 300], JsonError)
    assert info.value.location == ValuePointer((1,))
    assert isinstance(info.value.kind, Unexpected)


def test_sequence_gathers_all_errors():
    with pytest.raises(Collect) as info:
        deserialize(sequence_of(U8), [300, 1, -1], Collect)
    assert info.value.found == [ValuePointer((0,)), ValuePointer((2,))]


def test_set_removes_duplicates():
    assert deserialize(set_of(string), ["a", "a", "b"], JsonError) == {"a", "b"}


def test_set_error():
    with pytest.raises(JsonError) as info:
        deserialize(set_of(string), ["a", 1], JsonError)
    assert info.value.location == ValuePointer((1,))


def test_optional():
    reader = optional(U8)
    assert deserialize(reader, None, JsonError) is None
    assert deserialize(reader, 3, JsonError) == 3
    with pytest.raises(JsonError):
        deserialize(reader, "3", JsonError)


def test_mapping_with_key_conversion():
    assert deserialize(mapping_of(U8, int), {"1": 2, "3": 4}, JsonError) == {1: 2, 3: 4}


def test_mapping_default_string_keys():
    assert deserialize(mapping_of(boolean), {"a": True}, JsonError) == {"a": True}


def test_mapping_bad_key():
    with pytest.raises(JsonError) as info:
        deserialize(mapping_of(U8, int), {"x": 2}, JsonError)
    assert info.value.location.is_origin()
    assert 'the key "x" could not be deserialized' in info.value.kind.msg


def test_mapping_bad_value_location():
    with pytest.raises(JsonError) as info:
        deserialize(mapping_of(U8), {"a": 1, "b": "no"}, JsonError)
    assert info.value.location == ValuePointer(("b",))


def test_mapping_gathers_errors():
    with pytest.raises(Collect) as info:
        deserialize(mapping_of(U8, int), {"x": 1, "2": "no"}, Collect)
    assert info.value.found == [ValuePointer(), ValuePointer(("2",))]


def test_mapping_wrong_kind():
    with pytest.raises(JsonError) as info:
        deserialize(mapping_of(U8), [1], JsonError)
    assert info.value.kind.accepted == (ValueKind.MAP,)


def test_pair_round_trip():
    assert deserialize(pair_of(U8, string), [1, "a"], JsonError) == (1, "a")


@pytest.mark.parametrize("payload", [[2], [2, 3, 4]])
def test_pair_wrong_length(payload):
    reader = pair_of(U8, string)
    with pytest.raises(JsonError) as info:
        reader(payload, ValuePointer().push_key("me"), JsonError)
    assert str(info.value) == "Invalid value at `.me`: the sequence should have exactly 2 elements"


def test_pair_element_error():
    with pytest.raises(JsonError) as info:
        deserialize(pair_of(U8, string), [1, 2], JsonError)
    assert info.value.location == ValuePointer((1,))


def test_triple_round_trip():
    reader = triple_of(U8, string, boolean)
    assert deserialize(reader, [1, "a", True], JsonError) == (1, "a", True)


def test_triple_wrong_length():
    with pytest.raises(JsonError) as info:
        deserialize(triple_of(U8, string, boolean), [1, "a"], JsonError)
    assert isinstance(info.value.kind, Unexpected)