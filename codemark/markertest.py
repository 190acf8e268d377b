"""Helpers that build markers for tests, including random ones for a given type."""

from __future__ import annotations

import random
from typing import Any, Optional

from .marker import Marker, MarkerKind, kind_from_rtype
from .randgen import (
    RAND_LEN,
    int_from_type,
    random_bool,
    random_complex,
    random_float,
    random_string,
)
from .rtypes import (
    RType,
    TypeKind,
    basic,
    is_any,
    is_bool,
    is_complex,
    is_float,
    is_int,
    is_primitive,
    is_string,
    is_supported,
    is_uint,
    is_valid_slice,
    name_for,
)

_PRIMITIVE_KINDS = (
    TypeKind.INT,
    TypeKind.STRING,
    TypeKind.BOOL,
    TypeKind.FLOAT64,
    TypeKind.COMPLEX128,
)


def new_ident(name: str) -> str:
    """Return an identifier in the ``codemark:testing:*`` namespace."""
    return f"codemark:testing:{name}"


def new_marker(option: str, kind: MarkerKind, value: Any) -> Marker:
    """Return a marker named ``codemark:testing:<option>`` without validation."""
    return Marker(new_ident(option), kind, value)


def _random_primitive_type() -> RType:
    return basic(random.choice(_PRIMITIVE_KINDS))


def _random_primitive_value(rtype: RType) -> Any:
    if is_int(rtype) or is_uint(rtype):
        return int_from_type(rtype)()
    if is_string(rtype):
        return random_string(RAND_LEN)
    if is_bool(rtype):
        return random_bool()
    if is_float(rtype):
        return random_float()
    if is_complex(rtype):
        return random_complex()
    if is_any(rtype):
        return _random_primitive_value(_random_primitive_type())
    return None


def _random_list(elem: RType, n: int) -> list:
    if n <= 0:
        n = random.randint(1, 8)
    return [_random_primitive_value(elem) for _ in range(n)]


def _random_value(rtype: RType) -> Optional[Any]:
    if not is_supported(rtype):
        return None
    if is_primitive(rtype):
        return _random_primitive_value(rtype)
    if is_valid_slice(rtype):
        return _random_list(rtype.elem, RAND_LEN)
    return None


def rand_marker_with_ident(ident: str, rtype: RType) -> Marker:
    """Return a marker with a random value of ``rtype`` and the given identifier.

    Raises ValueError if no value can be generated for ``rtype``.
    """
    value = _random_value(rtype)
    if value is None:
        raise ValueError(f"no value could be generated for given type: {rtype}")
    return Marker(ident, kind_from_rtype(rtype), value)


def rand_marker(rtype: RType) -> Marker:
    """Return a random marker whose identifier is derived from ``rtype``."""
    return rand_marker_with_ident(new_ident(name_for(rtype)), rtype)