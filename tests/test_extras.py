import math

import pytest

from valueguard.core import Unexpected, deserialize
from valueguard.extras import comma_separated, json_value
from valueguard.json_error import JsonError
from valueguard.value import ValueKind, ValuePointer


def test_json_value_round_trip():
    document = {"The": "best", "doggos": ["are"], "the": {"bernese": "mountain"}}
    assert deserialize(json_value, document, JsonError) == document


def test_json_value_tuple_becomes_list():
    assert deserialize(json_value, (1, -2, 1.5, None, True), JsonError) == [1, -2, 1.5, None, True]


@pytest.mark.parametrize("scalar", [None, True, 0, -7, 2.5, "text"])
def test_json_value_scalars(scalar):
    assert deserialize(json_value, scalar, JsonError) == scalar


def test_json_value_rejects_nan():
    with pytest.raises(JsonError) as info:
        deserialize(json_value, {"x": math.nan}, JsonError)
    assert str(info.value) == "Invalid value at `.x`: the float NaN is not representable in JSON"


def test_json_value_rejects_infinity_in_sequence():
    with pytest.raises(JsonError) as info:
        deserialize(json_value, [1, math.inf], JsonError)
    assert info.value.location == ValuePointer((1,))
    assert isinstance(info.value.kind, Unexpected)


def test_comma_separated_parses():
    assert deserialize(comma_separated(int), "1,2,3", JsonError) == [1, 2, 3]


def test_comma_separated_single():
    assert deserialize(comma_separated(str), "solo", JsonError) == ["solo"]


def test_comma_separated_bad_piece():
    with pytest.raises(JsonError) as info:
        deserialize(comma_separated(int), "1,x", JsonError)
    assert isinstance(info.value.kind, Unexpected)
    assert "'x'" in info.value.kind.msg
    assert str(info.value).startswith("Invalid value: ")


def test_comma_separated_wrong_kind():
    with pytest.raises(JsonError) as info:
        deserialize(comma_separated(int), 12, JsonError)
    assert info.value.kind.accepted == (ValueKind.STRING,)