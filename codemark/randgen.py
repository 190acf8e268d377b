"""Random values for generating test markers."""

from __future__ import annotations

import random
import string
from typing import Callable

from .rtypes import RType, TypeKind, deref

RAND_LEN = -1

_INT64_MAX = 2**63 - 1
_MAXIMUMS = {
    TypeKind.INT: _INT64_MAX,
    TypeKind.INT8: 2**7 - 1,
    TypeKind.INT16: 2**15 - 1,
    TypeKind.INT32: 2**31 - 1,
    TypeKind.INT64: _INT64_MAX,
    TypeKind.UINT: _INT64_MAX,
    TypeKind.UINT8: 2**7 - 1,
    TypeKind.UINT16: 2**15 - 1,
    TypeKind.UINT32: 2**31 - 1,
    TypeKind.UINT64: _INT64_MAX,
}
_CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits


def int_from_type(rtype: RType) -> Callable[[], int]:
    """Return a generator of non-negative ints below the signed maximum of ``rtype``."""
    kind = deref(rtype).kind
    try:
        maximum = _MAXIMUMS[kind]
    except KeyError:
        raise ValueError(f"not an integer type: {rtype}") from None
    return lambda: random.randrange(maximum)


def random_int() -> int:
    """Return a random non-negative 64-bit integer."""
    return random.randrange(_INT64_MAX)


def random_float() -> float:
    """Return a random float in [1, 100)."""
    return 1 + random.random() * (100 - 1)


def random_bool() -> bool:
    return random_int() % 2 == 1


def random_string(n: int = RAND_LEN) -> str:
    """Return ``n`` random alphanumerics; 12 if ``n`` is not positive."""
    if n <= 0:
        n = 12
    return "".join(random.choice(_CHARSET) for _ in range(n))


def random_complex() -> complex:
    """Return a complex number with integral parts in [0, 100)."""
    return complex(random.randrange(100), random.randrange(100))


def random_ident() -> str:
    """Return a random string usable as an identifier (no leading digit)."""
    name = random_string(RAND_LEN)
    while name[0].isdigit():
        name = random_string(RAND_LEN)
    return name