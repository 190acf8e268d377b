"""Parser building markers from the token stream."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .lexer import Lexer
from .marker import Marker, MarkerKind
from .numparse import parse_complex, parse_float, parse_int
from .tokens import Token, TokenKind

_BOOLS = {
    "1": True, "t": True, "T": True, "TRUE": True, "true": True, "True": True,
    "0": False, "f": False, "F": False, "FALSE": False, "false": False, "False": False,
}


def _parse_bool(text: str) -> bool:
    try:
        return _BOOLS[text]
    except KeyError:
        raise ValueError(f"invalid boolean: {text!r}") from None


_SCALARS: dict[TokenKind, tuple[MarkerKind, Callable[[str], Any], str]] = {
    TokenKind.STRING: (MarkerKind.STRING, str, "string"),
    TokenKind.INT: (MarkerKind.INT, parse_int, "int"),
    TokenKind.FLOAT: (MarkerKind.FLOAT, parse_float, "float"),
    TokenKind.COMPLEX: (MarkerKind.COMPLEX, parse_complex, "complex"),
    TokenKind.BOOL: (MarkerKind.BOOL, _parse_bool, "boolean"),
}


class ParseError(ValueError):
    """Raised when markers cannot be parsed; ``markers`` holds those built so far."""

    def __init__(self, message: str, markers: Iterable[Marker] = ()) -> None:
        super().__init__(message)
        self.markers = list(markers)


class _Parser:
    def __init__(self, text: str) -> None:
        self._lexer = Lexer(text)
        self.markers: list[Marker] = []

    def _fail(self, message: str) -> ParseError:
        return ParseError(message, self.markers)

    def _advance(self) -> Token:
        tok = self._lexer.next_token()
        if tok.kind is TokenKind.ERROR:
            raise self._fail(f"failed while lexing: {tok.value}")
        return tok

    def _scalar(self, tok: Token) -> tuple[MarkerKind, Any]:
        kind, convert, label = _SCALARS[tok.kind]
        try:
            return kind, convert(tok.value)
        except ValueError as exc:
            if tok.kind is TokenKind.BOOL:
                raise self._fail(f"couldn't parse boolean value: {tok.value}") from None
            raise self._fail(
                f"couldn't parse {label} value: `{tok.value}`. Err: {exc}"
            ) from None

    def _value(self, tok: Token) -> tuple[MarkerKind, Any]:
        if tok.kind in _SCALARS:
            return self._scalar(tok)
        if tok.kind is TokenKind.LBRACK:
            items: list[Any] = []
            elem = self._advance()
            while elem.kind in _SCALARS:
                items.append(self._scalar(elem)[1])
                elem = self._advance()
            return MarkerKind.LIST, items
        raise self._fail(
            "A wrong kind is passed as a TokenKind from the lexer. This should usually "
            f"never happen! Found kind is: `{tok}`"
        )

    def run(self) -> list[Marker]:
        tok = self._advance()
        while tok.kind is not TokenKind.EOF:
            ident = self._advance().value
            self._advance()  # assignment
            kind, value = self._value(self._advance())
            tok = self._advance()
            self.markers.append(Marker(ident, kind, value))
        return self.markers


def parse(text: str) -> list[Marker]:
    """Parse all markers found in ``text``.

    Raises ParseError on the first lexing or parsing failure.
    """
    return _Parser(text).run()