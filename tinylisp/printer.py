"""Render tinylisp values as text.

    ()          nil
    name        atom
    <name>      primitive
    {n}         closure, n being its cell index
    (a b . c)   list, improper tails after a dot
    %.10g       number
"""

from __future__ import annotations

from io import StringIO
from typing import TextIO

from tinylisp import Value
from tinylisp.types.session import Session
from tinylisp.types.value import Tag, ordinal, tag_of, to_float


def format_number(x: Value) -> str:
    return "%.10g" % to_float(x)


def write_value(x: Value, session: Session, out: TextIO) -> None:
    tag = tag_of(x)
    if tag is Tag.NIL:
        out.write("()")
    elif tag is Tag.ATOM:
        out.write(session.name_of(x))
    elif tag is Tag.PRIM:
        out.write(f"<{session.primitives[ordinal(x)][0]}>")
    elif tag is Tag.CONS:
        _write_list(x, session, out)
    elif tag is Tag.CLOS:
        out.write(f"{{{ordinal(x)}}}")
    else:
        out.write(format_number(x))


def _write_list(t: Value, session: Session, out: TextIO) -> None:
    out.write("(")
    while True:
        write_value(session.car(t), session, out)
        t = session.cdr(t)
        if tag_of(t) is Tag.NIL:
            break
        if tag_of(t) is not Tag.CONS:
            out.write(" . ")
            write_value(t, session, out)
            break
        out.write(" ")
    out.write(")")


def to_string(x: Value, session: Session) -> str:
    with StringIO() as buffer:
        write_value(x, session, buffer)
        return buffer.getvalue()
