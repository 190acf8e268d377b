"""Lexer turning comment text into marker tokens."""

from __future__ import annotations

import string
from typing import Callable, Iterator, Optional

from .numparse import parse_complex, parse_float, parse_int
from .tokens import Token, TokenKind
from .validate import InvalidIdentError, validate_ident

_EOF = ""
_PLUS = "+"
_COLON = ":"
_NEWLINE = "\n"
_RETURN = "\r"
_UNDERSCORE = "_"
_DOT = "."
_TICK = "`"
_DQUOT = '"'
_LBRACK = "["
_RBRACK = "]"
_ASSIGN = "="
_COMMA = ","
_BACKSLASH = "\\"

_SIMPLE_ESCAPES = frozenset('abfnrtv\\"')
_UNICODE_ESCAPE_WIDTH = {"x": 2, "u": 4, "U": 8}
_OCTAL_DIGITS = frozenset("01234567")
_HEX_DIGITS = frozenset(string.hexdigits)

_State = Optional[Callable[[], "_State"]]


def _is_digit(r: str) -> bool:
    return r.isdecimal() or r in ("-", "+")


def _is_space(r: str) -> bool:
    return r in (" ", "\t")


def _is_bool(r: str) -> bool:
    return r in ("t", "f")


def _is_newline(r: str) -> bool:
    return r in (_NEWLINE, _RETURN)


def _is_lower(r: str) -> bool:
    return r.isalpha() and r.islower()


def _is_ident_char(r: str) -> bool:
    return r.isalpha() or r.isdecimal() or r in (_COLON, _UNDERSCORE, _DOT)


def _valid_escape(text: str, i: int) -> int:
    """Return the length of the escape sequence starting at ``text[i]`` or 0."""
    if i + 1 >= len(text):
        return 0
    esc = text[i + 1]
    if esc in _SIMPLE_ESCAPES:
        return 2
    if esc in _UNICODE_ESCAPE_WIDTH:
        width = _UNICODE_ESCAPE_WIDTH[esc]
        digits = text[i + 2 : i + 2 + width]
        if len(digits) != width or not set(digits) <= _HEX_DIGITS:
            return 0
        if esc != "x":
            code = int(digits, 16)
            if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                return 0
        return 2 + width
    if esc in _OCTAL_DIGITS:
        digits = text[i + 1 : i + 4]
        if len(digits) != 3 or not set(digits) <= _OCTAL_DIGITS or int(digits, 8) > 255:
            return 0
        return 4
    return 0


def _is_valid_quoted(content: str) -> bool:
    """True if ``content`` is the body of a valid double-quoted string literal."""
    i = 0
    while i < len(content):
        ch = content[i]
        if ch in (_DQUOT, _NEWLINE):
            return False
        if ch != _BACKSLASH:
            i += 1
            continue
        width = _valid_escape(content, i)
        if not width:
            return False
        i += width
    return True


def _kind_of_number(number: str) -> TokenKind:
    def accepts(parse: Callable[[str], object]) -> bool:
        try:
            parse(number)
        except ValueError:
            return False
        return True

    is_int = accepts(parse_int)
    is_float = accepts(parse_float)
    is_complex = accepts(parse_complex)
    if not (is_int or is_float or is_complex):
        raise ValueError(f"cannot lex number: {number}")
    if is_complex:
        return TokenKind.COMPLEX
    if not is_int and is_float:
        return TokenKind.FLOAT
    return TokenKind.INT


class Lexer:
    """Scans a whole comment on construction; tokens end with EOF or ERROR."""

    def __init__(self, text: str) -> None:
        self._input = text.strip()
        self._start = 0
        self._pos = 0
        self._width = 0
        self._in_list = False
        self._tokens: list[Token] = []
        state: _State = self._lex_text
        while state is not None:
            state = state()
        self._pending = iter(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        """Iterate over all scanned tokens."""
        return iter(self._tokens)

    def next_token(self) -> Token:
        """Return the next unread token; an EOF token once all are read."""
        return next(self._pending, Token(TokenKind.EOF))

    # -- primitives -------------------------------------------------------

    def _next(self) -> str:
        if self._pos >= len(self._input):
            self._width = 0
            return _EOF
        r = self._input[self._pos]
        self._width = 1
        self._pos += 1
        return r

    def _backup(self) -> None:
        self._pos -= self._width

    def _peek(self) -> str:
        r = self._next()
        self._backup()
        return r

    def _ignore(self) -> None:
        self._start = self._pos

    def _accept_while(self, pred: Callable[[str], bool]) -> None:
        while pred(self._next()):
            pass
        self._backup()

    def _current(self) -> str:
        return self._input[self._start : self._pos]

    def _emit(self, kind: TokenKind, value: Optional[str] = None) -> None:
        self._tokens.append(Token(kind, self._current() if value is None else value))
        self._start = self._pos

    def _error(self, message: str) -> _State:
        self._tokens.append(Token(TokenKind.ERROR, message))
        self._start = 0
        self._pos = 0
        self._input = ""
        return None

    def _has_plus_prefix(self) -> bool:
        return self._input.startswith(_PLUS, self._pos)

    def _scan_string(self) -> None:
        while True:
            r = self._next()
            if r == _BACKSLASH:
                self._next()
                continue
            if r in (_EOF, _DQUOT) or _is_newline(r):
                break
        self._backup()
        if not _is_valid_quoted(self._current()):
            raise ValueError(f"string `{self._current()}` is not a valid go string")

    def _scan_multiline_string(self) -> None:
        self._accept_while(lambda r: r not in (_TICK, _EOF))

    # -- states -----------------------------------------------------------

    def _lex_text(self) -> _State:
        if self._has_plus_prefix():
            return self._lex_plus
        while True:
            r = self._next()
            if r == _EOF:
                return self._lex_eof
            if not _is_newline(r):
                continue
            self._accept_while(_is_space)
            self._ignore()
            if self._has_plus_prefix():
                return self._lex_plus

    def _lex_plus(self) -> _State:
        self._next()
        self._emit(TokenKind.PLUS)
        if not _is_lower(self._peek()):
            return self._error(
                f"after a `{_PLUS}` an immediate identifier is expected. The identifier "
                "can only be in lower letters and has to contain two `:` describing the path"
            )
        return self._lex_ident

    def _lex_ident(self) -> _State:
        r = self._peek()
        if _is_digit(r):
            return self._error(f"marker identifier cannot start with a digit: {ord(r)}")
        self._accept_while(_is_ident_char)
        ident = self._current()
        try:
            validate_ident(ident)
        except InvalidIdentError as exc:
            return self._error(f"err: {exc}")
        self._emit(TokenKind.IDENT)
        r = self._peek()
        if r == _ASSIGN:
            return self._lex_assign
        if r in (_EOF, _NEWLINE):
            return self._lex_bool_without_assignment
        return self._error(
            f"expected an assignment operator or a newline after the identifier `{ident}`"
        )

    def _lex_assign(self) -> _State:
        self._next()
        self._emit(TokenKind.ASSIGN)
        r = self._peek()
        if r == _LBRACK:
            return self._lex_lbrack
        if _is_digit(r):
            return self._lex_number
        if r == _DQUOT:
            return self._lex_start_dquot
        if r == _TICK:
            return self._lex_start_tick
        if _is_bool(r):
            return self._lex_bool
        return self._error(
            "expecting value after assignment. For the possible valid values see: <docs link>"
        )

    def _lex_start_tick(self) -> _State:
        self._next()
        self._ignore()
        self._scan_multiline_string()
        self._emit(TokenKind.STRING)
        if self._peek() == _TICK:
            return self._lex_end_tick
        return self._error(f'expected `"` got `{self._peek()}`')

    def _lex_end_tick(self) -> _State:
        self._next()
        self._ignore()
        return self._lex_end_of_expr

    def _lex_bool_without_assignment(self) -> _State:
        self._emit(TokenKind.ASSIGN, "=")
        self._emit(TokenKind.BOOL, "true")
        return self._lex_end_of_expr

    def _lex_bool(self) -> _State:
        spelling = "false" if self._peek() == "f" else "true"
        for expected in spelling:
            if self._peek() != expected:
                return self._error(f"`{spelling}` is not spelled correctly")
            self._next()
        self._emit(TokenKind.BOOL)
        return self._lex_list_seq if self._in_list else self._lex_end_of_expr

    def _lex_number(self) -> _State:
        self._accept_while(
            lambda r: not _is_newline(r) and r not in (_EOF, _COMMA, _RBRACK)
        )
        try:
            kind = _kind_of_number(self._current())
        except ValueError as exc:
            return self._error(str(exc))
        self._emit(kind)
        return self._lex_list_seq if self._in_list else self._lex_end_of_expr

    def _lex_lbrack(self) -> _State:
        self._next()
        self._emit(TokenKind.LBRACK)
        self._in_list = True
        r = self._peek()
        if r == _RBRACK:
            return self._lex_rbrack
        if _is_digit(r):
            return self._lex_number
        if r == _DQUOT:
            return self._lex_start_dquot
        if _is_bool(r):
            return self._lex_bool
        if _is_space(r):
            return self._error("no space allowed after the opening bracket of a list")
        if r == _COMMA:
            return self._error("expected value in array not seperator")
        if r == _TICK:
            return self._error("multiline strings are not supported in list")
        return self._error(
            "expected closing bracket. Be sure that there is no whitespace between "
            "the last element and `]`"
        )

    def _lex_list_seq(self) -> _State:
        r = self._peek()
        if r == _COMMA:
            return self._lex_comma
        if r == _RBRACK:
            return self._lex_rbrack
        return self._error("expected next array value or closing bracket")

    def _lex_comma(self) -> _State:
        self._next()
        self._ignore()
        self._accept_while(_is_space)
        self._ignore()
        r = self._peek()
        if _is_digit(r):
            return self._lex_number
        if r == _DQUOT:
            return self._lex_start_dquot
        if r == _RBRACK:
            return self._error("remove the comma before the closing bracket of the list")
        if _is_bool(r):
            return self._lex_bool
        if r == _TICK:
            return self._error("multiline strings are not supported in list")
        return self._error("expected next value in list after comma")

    def _lex_start_dquot(self) -> _State:
        self._next()
        self._ignore()
        try:
            self._scan_string()
        except ValueError as exc:
            return self._error(f"error: {exc}")
        self._emit(TokenKind.STRING)
        if self._peek() == _DQUOT:
            return self._lex_end_dquot
        return self._error(f'expected `"` got `{self._peek()}`')

    def _lex_end_dquot(self) -> _State:
        self._next()
        self._ignore()
        return self._lex_list_seq if self._in_list else self._lex_end_of_expr

    def _lex_rbrack(self) -> _State:
        self._next()
        self._emit(TokenKind.RBRACK)
        self._in_list = False
        return self._lex_end_of_expr

    def _lex_end_of_expr(self) -> _State:
        self._accept_while(_is_space)
        self._ignore()
        r = self._peek()
        if _is_newline(r):
            return self._lex_text
        if r == _EOF:
            return self._lex_eof
        return self._error(
            f"after a finished marker expression only a newline can follow but found: `{r}`"
        )

    def _lex_eof(self) -> _State:
        self._emit(TokenKind.EOF)
        return None


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text``, ending with EOF or ERROR."""
    return list(Lexer(text))