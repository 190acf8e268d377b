import pytest

from codemark.rtypes import (
    TypeKind,
    basic,
    basic_type_of,
    chan_of,
    deref,
    is_any,
    is_int,
    is_primitive,
    is_supported,
    is_uint,
    is_valid_slice,
    map_of,
    name_for,
    named,
    pointer_to,
    slice_of,
    array_of,
)

STRING = basic(TypeKind.STRING)
INT = basic(TypeKind.INT)
ANY = basic(TypeKind.INTERFACE)


@pytest.mark.parametrize(
    "rtype,expected",
    [
        (pointer_to(STRING), "ptr.string"),
        (slice_of(ANY), "slice.interface"),
        (map_of(STRING, pointer_to(INT)), "map.string.ptr.int"),
        (chan_of(STRING), "chan.string"),
    ],
)
def test_name_for(rtype, expected):
    assert name_for(rtype) == expected


def test_deref_one_level():
    assert deref(pointer_to(STRING)) == STRING
    assert deref(STRING) == STRING
    assert deref(None) is None


def test_named_keeps_kind():
    t = named("I8", basic(TypeKind.INT8))
    assert is_int(t)
    assert basic_type_of(pointer_to(t)) == basic(TypeKind.INT8)


def test_predicates():
    assert is_uint(pointer_to(basic(TypeKind.UINT16)))
    assert is_primitive(pointer_to(STRING))
    assert not is_primitive(slice_of(STRING))
    assert is_any(pointer_to(ANY))
    assert is_supported(slice_of(pointer_to(slice_of(INT))))


def test_valid_slice():
    assert is_valid_slice(slice_of(pointer_to(INT)))
    assert is_valid_slice(slice_of(ANY))
    assert not is_valid_slice(slice_of(slice_of(INT)))
    assert not is_valid_slice(pointer_to(slice_of(INT)))


def test_basic_type_of():
    assert basic_type_of(array_of(slice_of(INT), 3)) == INT
    assert basic_type_of(map_of(STRING, INT)) is None
    assert basic_type_of(ANY) is None


def test_basic_rejects_composite():
    with pytest.raises(ValueError):
        basic(TypeKind.SLICE)