import pytest

from codemark.marker import MarkerKind, kind_from_rtype
from codemark.option import Target
from codemark.registry import OptionExistsError
from codemark.registrytest import (
    alias_opts,
    all_types,
    bool_types,
    complex_types,
    float_types,
    int_types,
    list_types,
    new_opts_set,
    new_registry,
    string_types,
    uint_types,
)
from codemark.rtypes import TypeKind, is_supported, name_for


def test_all_types_is_concatenation():
    expected = (
        float_types()
        + complex_types()
        + bool_types()
        + string_types()
        + int_types()
        + uint_types()
        + list_types()
    )
    assert all_types() == expected


def test_all_types_supported():
    assert all(is_supported(t) for t in all_types())


def test_type_names_are_unique():
    names = [name_for(t) for t in all_types()]
    assert len(names) == len(set(names))


@pytest.mark.parametrize(
    "group, kind",
    [
        (float_types, MarkerKind.FLOAT),
        (complex_types, MarkerKind.COMPLEX),
        (bool_types, MarkerKind.BOOL),
        (string_types, MarkerKind.STRING),
        (int_types, MarkerKind.INT),
        (uint_types, MarkerKind.INT),
        (list_types, MarkerKind.LIST),
    ],
)
def test_group_marker_kinds(group, kind):
    assert {kind_from_rtype(t) for t in group()} == {kind}


def test_alias_opts_idents():
    idents = [o.ident for o in alias_opts()]
    assert idents == [
        "codemark:testing:byte",
        "codemark:testing:rune",
        "codemark:testing:ptr.byte",
        "codemark:testing:ptr.rune",
        "codemark:testing:slice.byte",
        "codemark:testing:slice.rune",
        "codemark:testing:slice.ptr.byte",
        "codemark:testing:slice.ptr.rune",
    ]


def test_alias_types():
    byte_opt = alias_opts()[0]
    assert byte_opt.rtype.kind is TypeKind.UINT8
    assert byte_opt.rtype.name == "Byte"


def test_new_opts_set_contents():
    opts = new_opts_set()
    assert len(opts) == len(all_types()) + len(alias_opts())
    idents = [o.ident for o in opts]
    assert len(idents) == len(set(idents))
    assert all(o.targets == (Target.ANY,) for o in opts)
    assert all(o.doc is None and o.is_unique is False for o in opts)


def test_new_registry_holds_all():
    opts = new_opts_set()
    reg = new_registry(opts)
    assert set(reg.all()) == {o.ident for o in opts}
    opt = reg.get("codemark:testing:ptr.float32")
    assert opt.rtype.name == "PtrF32"
    assert reg.get("codemark:testing:slice.interface").rtype.name == "AnyList"


def test_new_registry_duplicate_fails():
    opts = alias_opts()
    with pytest.raises(OptionExistsError):
        new_registry(opts + opts[:1])


def test_new_registry_empty():
    assert new_registry([]).all() == {}