"""In-memory registry of option definitions."""

from __future__ import annotations

import threading
from typing import Optional

from .option import Option, OptionDoc


class OptionExistsError(ValueError):
    """Raised when an option with the same identifier is already defined."""


class OptionNotFoundError(LookupError):
    """Raised when no option is defined for an identifier."""


class Registry:
    """A thread-safe mapping of identifiers to option definitions."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._opts: dict[str, Option] = {}

    def define(self, option: Option) -> None:
        """Add ``option``; raise OptionExistsError if its identifier is taken."""
        with self._lock:
            existing = self._opts.get(option.ident)
            if existing is not None:
                raise OptionExistsError(f"option already exists: {existing.ident}")
            self._opts[option.ident] = option

    def get(self, ident: str) -> Option:
        """Return the option defined for ``ident``."""
        try:
            return self._opts[ident]
        except KeyError:
            raise OptionNotFoundError(f"option not found: `{ident}`") from None

    def doc_of(self, ident: str) -> Optional[OptionDoc]:
        """Return the documentation of the option defined for ``ident``."""
        return self.get(ident).doc

    def all(self) -> dict[str, Option]:
        """Return all defined options keyed by identifier."""
        with self._lock:
            return dict(self._opts)


def merge(*args: Registry) -> Registry:
    """Combine registries into a new one; duplicate identifiers raise OptionExistsError."""
    merged = Registry()
    for registry in args:
        for option in registry.all().values():
            merged.define(option)
    return merged