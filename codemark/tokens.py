"""Tokens produced by the marker lexer."""

from dataclasses import dataclass
from enum import IntEnum

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _go_quote(text: str) -> str:
    """Quote a string with double quotes and backslash escapes."""
    out = []
    for ch in text:
        code = ord(ch)
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        elif code < 0x20 or code == 0x7F:
            out.append(f"\\x{code:02x}")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    return '"' + "".join(out) + '"'


class TokenKind(IntEnum):
    EOF = 1
    ERROR = 2
    STRING = 3
    BOOL = 4
    IDENT = 5
    ASSIGN = 6
    PLUS = 7
    LBRACK = 8
    RBRACK = 9
    INT = 10
    FLOAT = 11
    COMPLEX = 12

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str = ""

    def __str__(self) -> str:
        if self.kind is TokenKind.EOF:
            return "EOF"
        if self.kind is TokenKind.ERROR:
            return self.value
        return _go_quote(self.value)