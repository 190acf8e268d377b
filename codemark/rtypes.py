"""A small runtime type model describing the value types an option accepts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TypeKind(Enum):
    """The kind of a runtime type."""

    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"
    STRING = "string"
    INTERFACE = "interface"
    STRUCT = "struct"
    FUNC = "func"
    POINTER = "ptr"
    SLICE = "slice"
    ARRAY = "array"
    MAP = "map"
    CHAN = "chan"

    def __str__(self) -> str:
        return self.value


_COMPOSITE = frozenset(
    {TypeKind.POINTER, TypeKind.SLICE, TypeKind.ARRAY, TypeKind.MAP, TypeKind.CHAN}
)
_INTS = frozenset({TypeKind.INT, TypeKind.INT8, TypeKind.INT16, TypeKind.INT32, TypeKind.INT64})
_UINTS = frozenset(
    {TypeKind.UINT, TypeKind.UINT8, TypeKind.UINT16, TypeKind.UINT32, TypeKind.UINT64}
)
_FLOATS = frozenset({TypeKind.FLOAT32, TypeKind.FLOAT64})
_COMPLEXES = frozenset({TypeKind.COMPLEX64, TypeKind.COMPLEX128})
_SCALARS = _INTS | _UINTS | _FLOATS | _COMPLEXES | {TypeKind.BOOL, TypeKind.STRING}


@dataclass(frozen=True)
class RType:
    """A runtime type: a kind plus element, key, length and an optional name."""

    kind: TypeKind
    elem: Optional["RType"] = None
    key: Optional["RType"] = None
    length: Optional[int] = None
    name: Optional[str] = None

    def __str__(self) -> str:
        if self.name:
            return self.name
        if self.kind is TypeKind.POINTER:
            return f"*{self.elem}"
        if self.kind is TypeKind.SLICE:
            return f"[]{self.elem}"
        if self.kind is TypeKind.ARRAY:
            return f"[{self.length}]{self.elem}"
        if self.kind is TypeKind.MAP:
            return f"map[{self.key}]{self.elem}"
        if self.kind is TypeKind.CHAN:
            return f"chan {self.elem}"
        return self.kind.value


def basic(kind: TypeKind) -> RType:
    """Return the unnamed type of a non-composite kind."""
    if kind in _COMPOSITE:
        raise ValueError(f"{kind} is a composite kind and needs an element type")
    return RType(kind)


def pointer_to(elem: RType) -> RType:
    return RType(TypeKind.POINTER, elem=elem)


def slice_of(elem: RType) -> RType:
    return RType(TypeKind.SLICE, elem=elem)


def array_of(elem: RType, length: int) -> RType:
    if length < 0:
        raise ValueError(f"array length cannot be negative: {length}")
    return RType(TypeKind.ARRAY, elem=elem, length=length)


def map_of(key: RType, elem: RType) -> RType:
    return RType(TypeKind.MAP, elem=elem, key=key)


def chan_of(elem: RType) -> RType:
    return RType(TypeKind.CHAN, elem=elem)


def named(name: str, underlying: RType) -> RType:
    """Return a named type sharing the kind and structure of ``underlying``."""
    return RType(underlying.kind, underlying.elem, underlying.key, underlying.length, name)


def deref(rtype: Optional[RType]) -> Optional[RType]:
    """Strip one level of pointer; non-pointers are returned unchanged."""
    if rtype is None:
        return None
    if is_pointer(rtype):
        return rtype.elem
    return rtype


def is_pointer(rtype: RType) -> bool:
    return rtype.kind is TypeKind.POINTER


def is_bool(rtype: RType) -> bool:
    return deref(rtype).kind is TypeKind.BOOL


def is_string(rtype: RType) -> bool:
    return deref(rtype).kind is TypeKind.STRING


def is_int(rtype: RType) -> bool:
    return deref(rtype).kind in _INTS


def is_uint(rtype: RType) -> bool:
    return deref(rtype).kind in _UINTS


def is_float(rtype: RType) -> bool:
    return deref(rtype).kind in _FLOATS


def is_complex(rtype: RType) -> bool:
    return deref(rtype).kind in _COMPLEXES


def is_any(rtype: RType) -> bool:
    return deref(rtype).kind is TypeKind.INTERFACE


def is_primitive(rtype: RType) -> bool:
    """True for non-slice types that a builtin converter handles."""
    return (
        is_int(rtype)
        or is_uint(rtype)
        or is_float(rtype)
        or is_string(rtype)
        or is_bool(rtype)
        or is_complex(rtype)
    )


def is_supported(rtype: RType) -> bool:
    """True if the default converters support the type."""
    return is_primitive(rtype) or rtype.kind is TypeKind.SLICE or is_any(rtype)


def is_valid_slice(rtype: RType) -> bool:
    if rtype.kind is not TypeKind.SLICE:
        return False
    return is_primitive(rtype.elem) or is_any(rtype.elem)


def name_for(rtype: Optional[RType]) -> str:
    """Describe a type left to right, e.g. ``map.string.ptr.int``. Not unique."""
    parts: list[str] = []
    while rtype is not None:
        parts.append(rtype.kind.value)
        if rtype.kind is TypeKind.MAP:
            parts.append(name_for(rtype.key))
        rtype = rtype.elem if rtype.kind in _COMPOSITE else None
    return ".".join(parts)


def basic_type_of(rtype: RType) -> Optional[RType]:
    """Return the unnamed scalar type behind pointers, slices, arrays and names."""
    while rtype.kind in (TypeKind.POINTER, TypeKind.SLICE, TypeKind.ARRAY):
        rtype = rtype.elem
    if rtype.kind in _SCALARS:
        return basic(rtype.kind)
    return None