"""Core evaluator for the tinylisp kernel.

Implements eval/apply over NaN-boxed values. Operands are handed to
primitives unevaluated, together with the caller's environment, so special
forms such as quote, if and define are ordinary table entries that decide for
themselves what to evaluate. Closures evaluate all of their arguments
(`evlis`) and bind them over their captured environment (`reduce`).

Structural failures never raise: they produce the session's error value,
which then flows through evaluation like any other value.
"""

from __future__ import annotations

from tinylisp import Value
from tinylisp.types.session import Session
from tinylisp.types.value import Tag, ordinal, tag_of


def evaluate(x: Value, e: Value, s: Session) -> Value:
    """Evaluate `x` in environment `e`."""
    tag = tag_of(x)
    if tag is Tag.ATOM:
        return s.assoc(x, e)
    if tag is Tag.CONS:
        # only the operator is evaluated here; operands go to apply as-is
        return apply(evaluate(s.car(x), e, s), s.cdr(x), e, s)
    return x


def apply(f: Value, t: Value, e: Value, s: Session) -> Value:
    """Apply primitive or closure `f` to the unevaluated argument list `t`."""
    tag = tag_of(f)
    if tag is Tag.PRIM:
        _, fn = s.primitives[ordinal(f)]
        return fn(t, e, s)
    if tag is Tag.CLOS:
        return reduce(f, t, e, s)
    return s.fail("apply", "not a valid closure or primitive")


def evlis(t: Value, e: Value, s: Session) -> Value:
    """Return a new list holding each element of `t` evaluated in `e`.

    A trailing atom (including `t` itself being an atom) is looked up rather
    than evaluated element-wise, so `(f . args)` spreads a bound list.
    """
    values: list[Value] = []
    while tag_of(t) is Tag.CONS:
        values.append(evaluate(s.car(t), e, s))
        t = s.cdr(t)
    result = s.assoc(t, e) if tag_of(t) is Tag.ATOM else s.nil
    for x in reversed(values):
        result = s.cons(x, result)
    return result


def bind(v: Value, t: Value, e: Value, s: Session) -> Value:
    """Extend `e` by binding the parameter list `v` to the argument list `t`.

    A proper parameter list binds positionally. An atom, either the whole parameter list
    or the tail of a dotted one, takes the remaining arguments as a list.
    """
    while tag_of(v) is Tag.CONS:
        e = s.pair(s.car(v), s.car(t), e)
        v, t = s.cdr(v), s.cdr(t)
    if tag_of(v) is Tag.NIL:
        return e
    return s.pair(v, t, e)


def reduce(f: Value, t: Value, e: Value, s: Session) -> Value:
    """Apply closure `f`: evaluate its body with the arguments bound."""
    code = s.car(f)
    captured = s.cdr(f)
    scope = s.env if s.is_nil(captured) else captured
    return evaluate(s.cdr(code), bind(s.car(code), evlis(t, e, s), scope, s), s)
