"""Markers: identifier, kind and parsed value."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from typing import Any, Optional

from .rtypes import (
    RType,
    TypeKind,
    basic,
    basic_type_of,
    is_bool,
    is_complex,
    is_float,
    is_int,
    is_string,
    is_uint,
    is_valid_slice,
)
from .tokens import _go_quote
from .validate import InvalidIdentError, validate_ident


class MarkerKind(IntEnum):
    INVALID = 0
    STRING = 1
    FLOAT = 2
    INT = 3
    COMPLEX = 4
    BOOL = 5
    LIST = 6

    def __str__(self) -> str:
        return self.name


class InvalidMarkerError(ValueError):
    """Raised when a marker has a bad identifier or no value."""


def _format_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    nd = len(digits)
    dp = nd + exponent
    exp = dp - 1
    prefix = "-" if sign else ""
    if exp < -4 or exp >= 6:
        mant = digits[0] + ("." + digits[1:] if nd > 1 else "")
        esign = "-" if exp < 0 else "+"
        return f"{prefix}{mant}e{esign}{abs(exp):02d}"
    if dp <= 0:
        return f"{prefix}0.{'0' * -dp}{digits}"
    if dp >= nd:
        return prefix + digits + "0" * (dp - nd)
    return f"{prefix}{digits[:dp]}.{digits[dp:]}"


def _format_complex(c: complex) -> str:
    imag = _format_float(c.imag)
    if not imag.startswith(("+", "-")):
        imag = "+" + imag
    return f"{_format_float(c.real)}{imag}i"


def _format_value(value: Any, quote: bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _go_quote(value) if quote else value
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, complex):
        return _format_complex(value)
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(v, True) for v in value) + "]"
    return str(value)


def _equal(a: Any, b: Any) -> bool:
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_equal(x, y) for x, y in zip(a, b))
    return type(a) is type(b) and a == b


@dataclass
class Marker:
    """A marker as found in a comment, e.g. ``+domain:resource:option=3``."""

    ident: str
    kind: MarkerKind
    value: Any

    def __str__(self) -> str:
        if self.kind is MarkerKind.STRING:
            return f'{self.ident}="{self.value}"'
        return f"{self.ident}={_format_value(self.value, False)}"

    def validate(self) -> None:
        """Raise InvalidMarkerError if the identifier or value is not valid."""
        try:
            validate_ident(self.ident)
        except InvalidIdentError:
            raise InvalidMarkerError(f"marker identifier is invalid: {self.ident}") from None
        if self.value is None:
            raise InvalidMarkerError(f"value of marker is not valid: {self.value}")

    def is_equal(self, value: Any) -> bool:
        """True if ``value`` equals the marker value, with matching types."""
        return _equal(value, self.value)


def fake(kind: MarkerKind, value: Any) -> Marker:
    """Return a marker in the ``codemark:fake:*`` namespace."""
    return Marker(f"codemark:fake:{kind}", kind, value)


def type_of(kind: MarkerKind) -> Optional[RType]:
    """Return the runtime type used for a marker kind; None for LIST and INVALID."""
    mapping = {
        MarkerKind.STRING: TypeKind.STRING,
        MarkerKind.INT: TypeKind.INT64,
        MarkerKind.FLOAT: TypeKind.FLOAT64,
        MarkerKind.COMPLEX: TypeKind.COMPLEX128,
        MarkerKind.BOOL: TypeKind.BOOL,
    }
    tkind = mapping.get(kind)
    return basic(tkind) if tkind is not None else None


def kind_from_rtype(rtype: RType) -> MarkerKind:
    """Return the marker kind for a runtime type, INVALID if none fits."""
    if is_valid_slice(rtype):
        return MarkerKind.LIST
    if is_int(rtype) or is_uint(rtype):
        return MarkerKind.INT
    if is_float(rtype):
        return MarkerKind.FLOAT
    if is_complex(rtype):
        return MarkerKind.COMPLEX
    if is_bool(rtype):
        return MarkerKind.BOOL
    if is_string(rtype):
        return MarkerKind.STRING
    return MarkerKind.INVALID


_ELEM_TYPES = {
    TypeKind.STRING: str,
    TypeKind.INT: int,
    TypeKind.INT16: int,
    TypeKind.INT32: int,
    TypeKind.INT64: int,
    TypeKind.UINT: int,
    TypeKind.UINT8: int,
    TypeKind.UINT16: int,
    TypeKind.UINT32: int,
    TypeKind.UINT64: int,
    TypeKind.FLOAT32: float,
    TypeKind.FLOAT64: float,
    TypeKind.COMPLEX64: complex,
    TypeKind.COMPLEX128: complex,
    TypeKind.BOOL: bool,
}


def is_typed_list(rtype: RType, values: list) -> None:
    """Raise TypeError unless every element of ``values`` fits ``rtype``.

    An interface type accepts anything. Otherwise the scalar type behind
    pointers, slices, arrays and names decides the required element type.
    """
    if rtype.kind is TypeKind.INTERFACE:
        return
    base = basic_type_of(rtype)
    if base is None:
        raise TypeError(f"type is not fullfilling one of the rules described above: {rtype}")
    expected = _ELEM_TYPES.get(base.kind)
    if expected is None:
        return
    for value in values:
        if type(value) is not expected:
            raise TypeError(f"{value!r} is not of type {expected.__name__}")