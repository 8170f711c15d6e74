"""Numeric primitives.

All of them evaluate their operands eagerly. Operands are read as doubles
without any tag check: a non-number reads as NaN, and NaN results are stored
in canonical form by `make_number`, so they can never alias a tagged value.
Division follows IEEE-754 instead of raising on a zero divisor.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from tinylisp import Value
from tinylisp.types.session import Session
from tinylisp.types.value import Tag, make_number, tag_of, to_float
from tinylisp.evaluation.evaluator import evlis

# Largest magnitude that `int` truncates; bigger values come back unchanged.
INT_LIMIT = 1e16


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _fold(op: Callable[[float, float], float], tail: Value, env: Value, session: Session) -> Value:
    """Combine the evaluated operands left to right, starting from the first."""
    args = evlis(tail, env, session)
    first = session.car(args)
    args = session.cdr(args)
    if tag_of(args) is not Tag.CONS:
        return first
    n = to_float(first)
    while tag_of(args) is Tag.CONS:
        n = op(n, to_float(session.car(args)))
        args = session.cdr(args)
    return make_number(n)


def add(tail: Value, env: Value, session: Session) -> Value:
    """(+ n1 n2 ... nk) => sum of n1 to nk."""
    return _fold(operator.add, tail, env, session)


def sub(tail: Value, env: Value, session: Session) -> Value:
    """(- n1 n2 ... nk) => n1 minus the sum of n2 to nk."""
    return _fold(operator.sub, tail, env, session)


def mul(tail: Value, env: Value, session: Session) -> Value:
    """(* n1 n2 ... nk) => product of n1 to nk."""
    return _fold(operator.mul, tail, env, session)


def div(tail: Value, env: Value, session: Session) -> Value:
    """(/ n1 n2 ... nk) => n1 divided by the product of n2 to nk."""
    return _fold(_divide, tail, env, session)


def int_part(tail: Value, env: Value, session: Session) -> Value:
    """(int n) => n truncated toward zero, if it is small enough to do exactly."""
    x = session.car(evlis(tail, env, session))
    n = to_float(x)
    if -INT_LIMIT < n < INT_LIMIT:
        return make_number(float(int(n)))
    return x


def less_than(tail: Value, env: Value, session: Session) -> Value:
    """(< n1 n2) => t if n1 < n2, otherwise ()."""
    args = evlis(tail, env, session)
    a = to_float(session.car(args))
    b = to_float(session.car(session.cdr(args)))
    return session.truth(a - b < 0)
