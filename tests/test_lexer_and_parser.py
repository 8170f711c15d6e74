import re

import pytest

from tinylisp.errors import TinyLispSyntaxError
from tinylisp.reader.parser import TokenStream, lex, parse_number, read
from tinylisp.printer import to_string
from tinylisp.types.value import Tag, make_number, tag_of


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ("(a . b)", [("lparen", "("), ("symbol", "a"), ("symbol", "."), ("symbol", "b"), ("rparen", ")")]),
        ("let* a'b", [("symbol", "let*"), ("symbol", "a'b")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("a;b\nc", [("symbol", "a"), ("symbol", "c")]),
        ("\t(\x01x)", [("lparen", "("), ("symbol", "x"), ("rparen", ")")]),
        ("", []),
    ],
)
def test_lex(source, expected):
    assert list(lex(source)) == expected


def test_lex_pulls_lines_lazily():
    pulled = []

    def lines():
        for line in ["(a\n", "b)\n", "c\n"]:
            pulled.append(line)
            yield line

    tokens = lex(lines())
    assert next(tokens) == ("lparen", "(")
    assert pulled == ["(a\n"]


@pytest.mark.parametrize(
    "token,expected",
    [
        ("42", 42.0),
        ("-1.5", -1.5),
        ("1e3", 1000.0),
        ("0x10", 16.0),
        ("inf", float("inf")),
        ("1_0", None),
        ("abc", None),
        ("-", None),
        (".", None),
    ],
)
def test_parse_number(token, expected):
    assert parse_number(token) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(1 2 3)",
        "(a (b c) . d)",
        "(quote x)",
        "((1 . 2) (3 . 4))",
        "()",
        "foo",
    ],
)
def test_parse_then_print(session, source):
    [expr] = list(read(source, session))
    assert to_string(expr, session) == source


def test_quote_shorthand(session):
    [expr] = list(read("'(a b)", session))
    assert to_string(expr, session) == "(quote (a b))"


def test_parse_builds_atoms_and_numbers(session):
    a, n, empty = list(read("abc 2.5 ()", session))
    assert tag_of(a) is Tag.ATOM
    assert a == session.atom("abc")
    assert n == make_number(2.5)
    assert empty == session.nil


def test_parse_nan_is_canonical(session):
    [x] = list(read("nan", session))
    assert x == make_number(float("nan"))


def test_dot_without_list_is_an_atom(session):
    [x] = list(read(".", session))
    assert to_string(x, session) == "."


def test_dot_alone_in_list(session):
    [x] = list(read("(. 5)", session))
    assert to_string(x, session) == "5"


@pytest.mark.parametrize(
    "source,message",
    [
        ("(1 2", "Unmatched '('"),
        (")", "Unexpected ')'"),
        ("(1 . )", "Unexpected ')'"),
        ("(1 . 2 3)", "Expected ')' after dotted cdr"),
        ("'", "Unexpected end of input"),
    ],
)
def test_syntax_errors(session, source, message):
    with pytest.raises(TinyLispSyntaxError, match=re.escape(message)):
        list(read(source, session))


def test_parse_expr_returns_none_at_end(session):
    stream = TokenStream(lex("1"), session)
    assert stream.parse_expr() == make_number(1)
    assert stream.parse_expr() is None
