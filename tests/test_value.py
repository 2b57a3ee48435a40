import pytest

from valueguard.value import ValueKind, ValuePointer, kind_of


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "Null"),
        (-1, "NegativeInteger"),
        ([1], "Sequence"),
        ({"a": 1}, "Map"),
    ],
)
def test_value_kind_display(value, expected):
    assert str(kind_of(value)) == expected


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        (0, ValueKind.INTEGER),
        (10, ValueKind.INTEGER),
        (-1, ValueKind.NEGATIVE_INTEGER),
        (1.5, ValueKind.FLOAT),
        ("jorts", ValueKind.STRING),
        ([2], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({"me": 2}, ValueKind.MAP),
    ],
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_kind_of_rejects_unknown_types():
    with pytest.raises(TypeError):
        kind_of(object())


def test_kind_of_nested_json_document():
    value = {"The": "best", "doggos": ["are"], "the": {"bernese": "mountain"}}
    assert kind_of(value) is ValueKind.MAP
    assert kind_of(value["The"]) is ValueKind.STRING
    assert kind_of(value["doggos"]) is ValueKind.SEQUENCE
    assert kind_of(value["doggos"][0]) is ValueKind.STRING
    assert kind_of(value["the"]) is ValueKind.MAP
    assert kind_of(value["the"]["bernese"]) is ValueKind.STRING


def test_origin():
    origin = ValuePointer()
    assert origin.is_origin()
    assert origin.path == ()
    assert origin.first_field() is None
    assert origin.last_field() is None


def test_push_builds_path_without_mutating():
    origin = ValuePointer()
    pointer = origin.push_key("a").push_index(2)
    assert pointer.path == ("a", 2)
    assert not pointer.is_origin()
    assert origin.is_origin()


def test_first_and_last_field():
    pointer = ValuePointer().push_key("toto").push_key("tata").push_index(42).push_key("lol")
    assert pointer.first_field() == "toto"
    assert pointer.last_field() == "lol"

    single = ValuePointer().push_key("toto")
    assert single.first_field() == "toto"
    assert single.last_field() == "toto"


def test_only_indices_have_no_fields():
    pointer = ValuePointer().push_index(1).push_index(2).push_index(3)
    assert pointer.first_field() is None
    assert pointer.last_field() is None


def test_last_field_skips_trailing_indices():
    pointer = ValuePointer().push_key("a").push_index(0).push_index(1)
    assert pointer.last_field() == "a"


def test_pointers_compare_by_path():
    assert ValuePointer().push_key("x") == ValuePointer(("x",))
    assert ValuePointer().push_key("x") != ValuePointer().push_index(0)


def test_push_rejects_bad_components():
    with pytest.raises(TypeError):
        ValuePointer().push_key(3)
    with pytest.raises(TypeError):
        ValuePointer().push_index("3")
    with pytest.raises(TypeError):
        ValuePointer().push_index(True)
    with pytest.raises(ValueError):
        ValuePointer().push_index(-1)