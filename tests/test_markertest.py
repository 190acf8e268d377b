import pytest

from codemark.marker import MarkerKind, is_typed_list
from codemark.markertest import (
    new_ident,
    new_marker,
    rand_marker,
    rand_marker_with_ident,
)
from codemark.rtypes import (
    TypeKind,
    basic,
    pointer_to,
    slice_of,
)


def _is_not_empty_str(value):
    return isinstance(value, str) and len(value) != 0


def _is_not_empty_list(value):
    return isinstance(value, list) and len(value) != 0


def _is_valid_int(value):
    return type(value) is int and value >= 0


def _is_valid_float(value):
    return type(value) is float and value >= 0


@pytest.mark.parametrize(
    "rtype, check, kind",
    [
        (basic(TypeKind.STRING), _is_not_empty_str, MarkerKind.STRING),
        (basic(TypeKind.INT), _is_valid_int, MarkerKind.INT),
        (basic(TypeKind.INT16), _is_valid_int, MarkerKind.INT),
        (basic(TypeKind.FLOAT32), _is_valid_float, MarkerKind.FLOAT),
        (basic(TypeKind.FLOAT64), _is_valid_float, MarkerKind.FLOAT),
        (pointer_to(basic(TypeKind.STRING)), _is_not_empty_str, MarkerKind.STRING),
        (slice_of(basic(TypeKind.STRING)), _is_not_empty_list, MarkerKind.LIST),
        (slice_of(basic(TypeKind.INT)), _is_not_empty_list, MarkerKind.LIST),
        (slice_of(basic(TypeKind.FLOAT64)), _is_not_empty_list, MarkerKind.LIST),
        (slice_of(pointer_to(basic(TypeKind.FLOAT64))), _is_not_empty_list, MarkerKind.LIST),
    ],
)
def test_rand_marker_valid_cases(rtype, check, kind):
    m = rand_marker(rtype)
    assert check(m.value)
    assert m.kind is kind


def test_rand_marker_unknown_type():
    with pytest.raises(ValueError):
        rand_marker(pointer_to(slice_of(basic(TypeKind.STRING))))


def test_rand_marker_slice_of_struct_fails():
    with pytest.raises(ValueError):
        rand_marker(slice_of(basic(TypeKind.STRUCT)))


def test_new_ident():
    assert new_ident("string") == "codemark:testing:string"


def test_new_marker():
    m = new_marker("int", MarkerKind.INT, 3)
    assert m.ident == "codemark:testing:int"
    assert m.kind is MarkerKind.INT
    assert m.value == 3


def test_rand_marker_ident_from_type_name():
    m = rand_marker(pointer_to(basic(TypeKind.STRING)))
    assert m.ident == "codemark:testing:ptr.string"
    m.validate()
    assert m.is_equal(m.value)


def test_rand_marker_with_ident_keeps_ident():
    m = rand_marker_with_ident("codemark:custom:value", basic(TypeKind.BOOL))
    assert m.ident == "codemark:custom:value"
    assert type(m.value) is bool
    assert m.kind is MarkerKind.BOOL


def test_int16_within_bounds():
    for _ in range(50):
        m = rand_marker(basic(TypeKind.INT16))
        assert 0 <= m.value < 2**15 - 1


def test_list_elements_match_element_type():
    for elem in (TypeKind.STRING, TypeKind.INT, TypeKind.FLOAT64, TypeKind.BOOL, TypeKind.COMPLEX128):
        rtype = slice_of(basic(elem))
        m = rand_marker(rtype)
        is_typed_list(rtype, m.value)
        assert 1 <= len(m.value) <= 8


def test_any_list_elements_are_primitive():
    m = rand_marker(slice_of(basic(TypeKind.INTERFACE)))
    assert m.kind is MarkerKind.LIST
    assert all(type(v) in (int, str, bool, float, complex) for v in m.value)


def test_complex_marker():
    m = rand_marker(basic(TypeKind.COMPLEX64))
    assert type(m.value) is complex
    assert 0 <= m.value.real < 100 and 0 <= m.value.imag < 100