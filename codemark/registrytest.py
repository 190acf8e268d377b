"""Option sets and registries covering every type the default converters support."""

from __future__ import annotations

from .markertest import new_ident
from .option import Option, Target, make_option
from .registry import Registry
from .rtypes import RType, TypeKind, basic, named, name_for, pointer_to, slice_of


def _t(name: str, kind: TypeKind) -> RType:
    return named(name, basic(kind))


def _ptr(name: str, kind: TypeKind) -> RType:
    return named(name, pointer_to(basic(kind)))


def _list(name: str, kind: TypeKind) -> RType:
    return named(name, slice_of(basic(kind)))


def _ptr_list(name: str, kind: TypeKind) -> RType:
    return named(name, slice_of(pointer_to(basic(kind))))


def float_types() -> list[RType]:
    return [
        _t("F32", TypeKind.FLOAT32),
        _t("F64", TypeKind.FLOAT64),
        _ptr("PtrF32", TypeKind.FLOAT32),
        _ptr("PtrF64", TypeKind.FLOAT64),
    ]


def complex_types() -> list[RType]:
    return [
        _t("C64", TypeKind.COMPLEX64),
        _t("C128", TypeKind.COMPLEX128),
        _ptr("PtrC64", TypeKind.COMPLEX64),
        _ptr("PtrC128", TypeKind.COMPLEX128),
    ]


def bool_types() -> list[RType]:
    return [_t("Bool", TypeKind.BOOL), _ptr("PtrBool", TypeKind.BOOL)]


def string_types() -> list[RType]:
    return [_t("String", TypeKind.STRING), _ptr("PtrString", TypeKind.STRING)]


def int_types() -> list[RType]:
    return [
        _t("Int", TypeKind.INT),
        _t("I8", TypeKind.INT8),
        _t("I16", TypeKind.INT16),
        _t("I32", TypeKind.INT32),
        _t("I64", TypeKind.INT64),
        _ptr("PtrInt", TypeKind.INT),
        _ptr("PtrI8", TypeKind.INT8),
        _ptr("PtrI16", TypeKind.INT16),
        _ptr("PtrI32", TypeKind.INT32),
        _ptr("PtrI64", TypeKind.INT64),
    ]


def uint_types() -> list[RType]:
    return [
        _t("Uint", TypeKind.UINT),
        _t("U8", TypeKind.UINT8),
        _t("U16", TypeKind.UINT16),
        _t("U32", TypeKind.UINT32),
        _t("U64", TypeKind.UINT64),
        _ptr("PtrUint", TypeKind.UINT),
        _ptr("PtrU8", TypeKind.UINT8),
        _ptr("PtrU16", TypeKind.UINT16),
        _ptr("PtrU32", TypeKind.UINT32),
        _ptr("PtrU64", TypeKind.UINT64),
    ]


def list_types() -> list[RType]:
    return [
        _list("StringList", TypeKind.STRING),
        _list("IntList", TypeKind.INT),
        _list("I8List", TypeKind.INT8),
        _list("I16List", TypeKind.INT16),
        _list("I32List", TypeKind.INT32),
        _list("I64List", TypeKind.INT64),
        _list("UintList", TypeKind.UINT),
        _list("U8List", TypeKind.UINT8),
        _list("U16List", TypeKind.UINT16),
        _list("U32List", TypeKind.UINT32),
        _list("U64List", TypeKind.UINT64),
        _list("F32List", TypeKind.FLOAT32),
        _list("F64List", TypeKind.FLOAT64),
        _list("C64List", TypeKind.COMPLEX64),
        _list("C128List", TypeKind.COMPLEX128),
        _list("BoolList", TypeKind.BOOL),
        _list("AnyList", TypeKind.INTERFACE),
        _ptr_list("PtrStringList", TypeKind.STRING),
        _ptr_list("PtrBoolList", TypeKind.BOOL),
        _ptr_list("PtrIntList", TypeKind.INT),
        _ptr_list("PtrI8List", TypeKind.INT8),
        _ptr_list("PtrI16List", TypeKind.INT16),
        _ptr_list("PtrI32List", TypeKind.INT32),
        _ptr_list("PtrI64List", TypeKind.INT64),
        _ptr_list("PtrUintList", TypeKind.UINT),
        _ptr_list("PtrU8List", TypeKind.UINT8),
        _ptr_list("PtrU16List", TypeKind.UINT16),
        _ptr_list("PtrU32List", TypeKind.UINT32),
        _ptr_list("PtrU64List", TypeKind.UINT64),
        _ptr_list("PtrF32List", TypeKind.FLOAT32),
        _ptr_list("PtrF64List", TypeKind.FLOAT64),
        _ptr_list("PtrC64List", TypeKind.COMPLEX64),
        _ptr_list("PtrC128List", TypeKind.COMPLEX128),
        _ptr_list("PtrAnyList", TypeKind.INTERFACE),
    ]


def all_types() -> list[RType]:
    return [
        *float_types(),
        *complex_types(),
        *bool_types(),
        *string_types(),
        *int_types(),
        *uint_types(),
        *list_types(),
    ]


def alias_opts() -> list[Option]:
    """Options for byte and rune, which share their types with uint8 and int32."""
    aliases = [
        ("byte", _t("Byte", TypeKind.UINT8)),
        ("rune", _t("Rune", TypeKind.INT32)),
        ("ptr.byte", _ptr("PtrByte", TypeKind.UINT8)),
        ("ptr.rune", _ptr("PtrRune", TypeKind.INT32)),
        ("slice.byte", _list("ByteList", TypeKind.UINT8)),
        ("slice.rune", _list("RuneList", TypeKind.INT32)),
        ("slice.ptr.byte", _ptr_list("PtrByteList", TypeKind.UINT8)),
        ("slice.ptr.rune", _ptr_list("PtrRuneList", TypeKind.INT32)),
    ]
    return [make_option(new_ident(name), rtype, None, False, Target.ANY) for name, rtype in aliases]


def new_opts_set() -> list[Option]:
    """Return one option per supported type, plus the byte and rune aliases."""
    opts = [
        make_option(new_ident(name_for(rtype)), rtype, None, False, Target.ANY)
        for rtype in all_types()
    ]
    return opts + alias_opts()


def new_registry(opts: list[Option]) -> Registry:
    """Return a registry holding ``opts``; duplicates raise OptionExistsError."""
    registry = Registry()
    for opt in opts:
        registry.define(opt)
    return registry