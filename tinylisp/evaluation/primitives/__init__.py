"""Primitive dispatch table.

Maps names to callbacks of the shape ``(unevaluated args, caller env,
session) -> Value``. Every entry, special form or not, is bound in the global
environment as a PRIM value carrying its index in this table, so a later
`define` of the same name shadows it like any other binding.

The order is fixed: a PRIM ordinal is an index into this tuple.
"""

from tinylisp import PrimitiveFn
from tinylisp.types.session import Session
from tinylisp.types.value import Tag, box
from tinylisp.evaluation.primitives.quote_forms import eval_form, quote_form
from tinylisp.evaluation.primitives.list_forms import cons, car, cdr
from tinylisp.evaluation.primitives.arithmetic import add, sub, mul, div, int_part, less_than
from tinylisp.evaluation.primitives.logic_forms import equ, logical_not, or_form, and_form
from tinylisp.evaluation.primitives.control_forms import cond_form, if_form, let_star_form
from tinylisp.evaluation.primitives.lambda_form import lambda_form
from tinylisp.evaluation.primitives.define_form import define_form
from tinylisp.evaluation.primitives.quit_form import quit_form

PRIMITIVES: tuple[tuple[str, PrimitiveFn], ...] = (
    ("eval", eval_form),
    ("quote", quote_form),
    ("cons", cons),
    ("car", car),
    ("cdr", cdr),
    ("+", add),
    ("-", sub),
    ("*", mul),
    ("/", div),
    ("int", int_part),
    ("<", less_than),
    ("equ", equ),
    ("or", or_form),
    ("and", and_form),
    ("not", logical_not),
    ("cond", cond_form),
    ("if", if_form),
    ("let*", let_star_form),
    ("lambda", lambda_form),
    ("define", define_form),
    ("quit", quit_form),
)


def register(session: Session) -> None:
    """Install the primitive table and bind every entry in the global environment."""
    if session.primitives:
        raise RuntimeError("primitives are already installed in this session")
    session.primitives = PRIMITIVES
    for i, (name, _) in enumerate(PRIMITIVES):
        session.define(session.atom(name), box(Tag.PRIM, i))
