from codemark.tokens import Token, TokenKind


def test_eof_str():
    assert str(Token(TokenKind.EOF, "")) == "EOF"


def test_error_str_is_message():
    assert str(Token(TokenKind.ERROR, "cannot lex number: x")) == "cannot lex number: x"


def test_value_is_quoted():
    assert str(Token(TokenKind.STRING, "string")) == '"string"'
    assert str(Token(TokenKind.IDENT, "codemark:lexer:int")) == '"codemark:lexer:int"'


def test_escapes():
    assert str(Token(TokenKind.STRING, 'a\n"b')) == '"a\\n\\"b"'


def test_equality_and_kind_order():
    token = Token(TokenKind.INT, "99")
    assert token.kind is TokenKind.INT
    assert token.value == "99"
    assert str(token) == '"99"'
    assert token == Token(TokenKind.INT, "99")
    assert not (token == Token(TokenKind.FLOAT, "99"))
    assert TokenKind.EOF < TokenKind.COMPLEX
    assert str(TokenKind.LBRACK) == "LBRACK"