import pytest
from filter_expr.errors import ErrorKind, LexError
from filter_expr.lexer import tokenize

@pytest.mark.parametrize("src,expected", [
    ("", []),
    ("1+2", ["1", "+", "2"]),
    (" 1 -\t2\n", ["1", "-", "2"]),
    ("(1+2)*3", ["(", "1", "+", "2", ")", "*", "3"]),
    ("12", ["1", "2"]),
])
def test_tokenize(src, expected):
    assert tokenize(src) == expected

@pytest.mark.parametrize("src,char,position", [
    ("a", "a", 0),
    ("1 + x", "x", 4),
    ("1/2", "/", 1),
])
def test_tokenize_rejects_unknown_characters(src, char, position):
    with pytest.raises(LexError) as info:
        tokenize(src)
    assert info.value.char == char
    assert info.value.position == position
    assert info.value.to_dict()["kind"] == ErrorKind.LEXICAL.value
