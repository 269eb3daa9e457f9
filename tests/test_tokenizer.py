import pytest
from sexpr.errors import LexicalError, UnterminatedString
from sexpr.matcher import Kind
from sexpr.tokenizer import Tokenizer, tokenize


def kinds(src):
    return [t.kind for t in tokenize(src)]


def test_empty_string():
    assert tokenize("") == []


def test_only_trivia():
    assert tokenize(" \t\n\n ; comment\n") == []


def test_basic_kinds():
    assert kinds('(a 42 #t "s")') == [
        Kind.LPAREN,
        Kind.IDENTIFIER,
        Kind.NUMBER,
        Kind.BOOLEAN,
        Kind.STRING,
        Kind.RPAREN,
    ]


def test_token_text_is_a_view():
    src = "(foo bar)"
    tok = tokenize(src)[2]
    assert tok.text == "bar"
    assert (tok.start, tok.end) == (5, 8)
    assert tok.source is src


def test_line_tracking():
    a, b = tokenize("a\nb")
    assert (a.line, a.column) == (0, 0)
    assert (b.line, b.column) == (1, 0)


def test_column_advances_past_tokens():
    toks = tokenize("(ab  cd)")
    assert [t.column for t in toks] == [0, 1, 5, 7]


def test_multiple_newlines():
    toks = tokenize("a\n\n\n  b")
    assert (toks[1].line, toks[1].column) == (3, 2)


def test_multiline_string_advances_lines():
    toks = tokenize('"one\ntwo" x')
    assert toks[0].kind is Kind.STRING
    assert (toks[1].line, toks[1].column) == (1, 5)


def test_crlf_line_endings():
    toks = tokenize("a\r\nb")
    assert [t.text for t in toks] == ["a", "b"]
    assert toks[1].line == 1


def test_peek_does_not_consume():
    t = Tokenizer("x y")
    assert t.peek().text == "x"
    assert t.peek().text == "x"
    assert next(t).text == "x"
    assert next(t).text == "y"
    assert t.peek() is None
    with pytest.raises(StopIteration):
        next(t)


def test_lexical_error_is_not_end_of_input():
    t = Tokenizer("a $ b")
    assert next(t).text == "a"
    with pytest.raises(LexicalError, match="unexpected character '\\$' at line 0, column 2"):
        next(t)
    # cursor moved past the bad character
    assert next(t).text == "b"


def test_unterminated_string():
    t = Tokenizer('a "never closed')
    next(t)
    with pytest.raises(UnterminatedString, match="column 2"):
        next(t)
    assert list(t) == []


def test_string_with_trailing_backslash_is_unterminated():
    with pytest.raises(UnterminatedString):
        tokenize('"abc\\"')
