import io

import pytest

from tinylisp.printer import format_number, to_string, write_value
from tinylisp.types.value import Tag, box, make_number


@pytest.mark.parametrize(
    "n,expected",
    [
        (6.0, "6"),
        (-0.0, "-0"),
        (0.1, "0.1"),
        (1 / 3, "0.3333333333"),
        (12345678901.0, "1.23456789e+10"),
        (float("inf"), "inf"),
        (float("nan"), "nan"),
    ],
)
def test_format_number(n, expected):
    assert format_number(make_number(n)) == expected


def test_render_tags(session):
    assert to_string(session.nil, session) == "()"
    assert to_string(session.atom("hello"), session) == "hello"
    assert to_string(box(Tag.PRIM, 5), session) == "<+>"
    assert to_string(box(Tag.CLOS, 900), session) == "{900}"


def test_render_lists(session):
    s = session
    inner = s.cons(make_number(1), s.cons(make_number(2), s.nil))
    outer = s.cons(inner, s.cons(s.atom("x"), s.atom("y")))
    assert to_string(outer, s) == "((1 2) x . y)"


def test_write_value_streams(session):
    out = io.StringIO()
    write_value(session.cons(session.tru, session.nil), session, out)
    assert out.getvalue() == "(t)"
