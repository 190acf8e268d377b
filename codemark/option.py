"""Option definitions: which identifiers exist, what type they take and where."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .rtypes import RType
from .validate import InvalidIdentError, validate_ident


class Target(Enum):
    """The kind of declaration an option may be attached to."""

    PKG = "pkg"
    METHOD = "method"
    FUNC = "func"
    VAR = "var"
    CONST = "const"
    IMPORT = "import"
    ALIAS = "alias"
    NAMED = "named"
    STRUCT = "struct"
    FIELD = "field"
    IFACE = "iface"
    IFACE_SIG = "iface_sig"
    ANY = "any"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionDoc:
    """Human readable documentation of an option."""

    desc: str = ""


@dataclass(eq=False)
class Option:
    """A definable option identified by ``domain:resource:option``."""

    ident: str
    rtype: Optional[RType]
    targets: tuple[Target, ...] = field(default_factory=tuple)
    doc: Optional[OptionDoc] = None
    is_unique: bool = False


class InvalidOptionError(ValueError):
    """Raised when an option definition is not valid."""


def validate_option(option: Option) -> None:
    """Raise InvalidOptionError if ``option`` has a bad ident, no type or no targets."""
    try:
        validate_ident(option.ident)
    except InvalidIdentError as exc:
        raise InvalidOptionError(str(exc)) from exc
    if option.rtype is None:
        raise InvalidOptionError(f"type cannot be nil: {option.ident}")
    if not option.targets:
        raise InvalidOptionError(f"no targets defined: {option.ident}")


def make_option(
    ident: str,
    rtype: Optional[RType],
    doc: Optional[OptionDoc],
    is_unique: bool,
    *args: Target,
) -> Option:
    """Build and validate an option; the trailing arguments are its targets."""
    option = Option(ident=ident, rtype=rtype, targets=tuple(args), doc=doc, is_unique=is_unique)
    validate_option(option)
    return option


def _segment(ident: str, index: int) -> str:
    parts = ident.split(":")
    if len(parts) != 3:
        return ""
    return parts[index]


def domain_of(ident: str) -> str:
    """Return the domain segment of ``ident`` or "" if it has not three segments."""
    return _segment(ident, 0)


def resource_of(ident: str) -> str:
    """Return the resource segment of ``ident`` or "" if it has not three segments."""
    return _segment(ident, 1)


def option_of(ident: str) -> str:
    """Return the option segment of ``ident`` or "" if it has not three segments."""
    return _segment(ident, 2)