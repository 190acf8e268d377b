"""Number parsing with the literal syntax markers accept."""

import math

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def complex_order(text: str) -> str:
    """Reorder a complex literal to ``<sign>real<sign>imag i``."""
    if not text:
        raise ValueError("empty complex literal")
    sign = text[0]
    cut_sign = "+"
    if sign in "+-":
        text = text[1:]
    else:
        sign = "+"
    real, found, imag = text.partition("+")
    if not found:
        real, _, imag = text.partition("-")
        cut_sign = "-"
    if not real:
        raise ValueError(f"malformed complex literal: {text!r}")
    if real.endswith("i"):
        return f"{cut_sign}{imag}{sign}{real}"
    return f"{sign}{real}{cut_sign}{imag}"


def parse_int(text: str) -> int:
    """Parse a signed 64-bit integer with base prefixes (0x, 0o, 0b, leading 0)."""
    body = text[1:] if text[:1] in "+-" else text
    if not body or body != body.strip() or body[:1] in "+-":
        raise ValueError(f"invalid integer: {text!r}")
    lowered = body.lower()
    try:
        if len(body) > 1 and body[0] == "0" and lowered[1] not in "xob":
            if "_" in body and not body[1:].lstrip("_"):
                raise ValueError
            value = int(body[1:].lstrip("_") or "0", 8) if body[1] != "_" else int(body[2:], 8)
        elif lowered[:2] in ("0x", "0o", "0b"):
            value = int(body, 0)
        else:
            if "_" in body:
                raise ValueError
            value = int(body, 10)
    except ValueError:
        raise ValueError(f"invalid integer: {text!r}") from None
    if text.startswith("-"):
        value = -value
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_float(text: str) -> float:
    """Parse a 64-bit float; overflow to infinity is an error."""
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float: {text!r}")
    body = text.lstrip("+-").lower()
    try:
        if body.startswith("0x"):
            value = float.fromhex(text)
        else:
            value = float(text)
    except ValueError:
        raise ValueError(f"invalid float: {text!r}") from None
    if math.isinf(value) and body not in ("inf", "infinity"):
        raise ValueError(f"float out of range: {text!r}")
    return value


def parse_complex(text: str) -> complex:
    """Parse a complex number written in either order, e.g. ``9i+9``."""
    ordered = complex_order(text)
    if ordered.startswith("(") and ordered.endswith(")"):
        ordered = ordered[1:-1]
    if "j" in ordered.lower() or ordered != ordered.strip() or "_" in ordered:
        raise ValueError(f"invalid complex: {text!r}")
    if ordered.endswith("i"):
        ordered = ordered[:-1] + "j"
    try:
        return complex(ordered)
    except ValueError:
        raise ValueError(f"invalid complex: {text!r}") from None