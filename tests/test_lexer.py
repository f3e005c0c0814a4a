import pytest

from sprig.lexer.lexer import tokenize
from sprig.parser.errors import LexError


def types(code):
    return [token.type for token in tokenize(code)]


def test_assignment_and_call_tokens():
    assert types("x = 12; print(x)") == [
        "IDENTIFIER", "EQUALS", "INTEGER", "SEMICOLON",
        "IDENTIFIER", "LPAREN", "IDENTIFIER", "RPAREN",
    ]


def test_integer_value_is_int():
    [token] = tokenize("42")
    assert token.value == 42


def test_operators_are_identifiers():
    tokens = tokenize("a + b")
    assert [t.type for t in tokens] == ["IDENTIFIER", "IDENTIFIER", "IDENTIFIER"]
    assert tokens[1].value == "+"


def test_digits_followed_by_letters_are_a_name():
    [token] = tokenize("2x")
    assert token.type == "IDENTIFIER"
    assert token.value == "2x"


def test_string_drops_quotes_and_keeps_escape_text():
    [token] = tokenize('"hi\\n"')
    assert token.type == "STRING"
    assert token.value == "hi\\n"


def test_function_literal_tokens():
    assert types("(a, b) { a }") == [
        "LPAREN", "IDENTIFIER", "COMMA", "IDENTIFIER", "RPAREN",
        "LBRACE", "IDENTIFIER", "RBRACE",
    ]


def test_line_numbers_follow_newlines():
    tokens = tokenize("a;\n\nb")
    assert tokens[0].lineno == 1
    assert tokens[-1].lineno == 3


def test_unterminated_string_is_a_lex_error():
    with pytest.raises(LexError) as excinfo:
        tokenize('x = "abc')
    assert excinfo.value.lineno == 1
    assert excinfo.value.col_offset == 5


def test_empty_string_is_a_lex_error():
    with pytest.raises(LexError):
        tokenize('""')


def test_float_literal_is_rejected():
    with pytest.raises(LexError, match="floating point"):
        tokenize("1.5")


def test_integer_out_of_range_is_rejected():
    with pytest.raises(LexError, match="32 bits"):
        tokenize("2147483648")


def test_largest_integer_is_accepted():
    [token] = tokenize("2147483647")
    assert token.value == 2147483647


def test_tokenize_does_not_share_line_state():
    tokenize("a\nb\nc")
    assert tokenize("a")[0].lineno == 1
