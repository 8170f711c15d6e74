from tinylisp import Value
from tinylisp.types.session import Session
from tinylisp.types.value import Tag, tag_of, values_equal
from tinylisp.evaluation.evaluator import evaluate, evlis


def equ(tail: Value, env: Value, session: Session) -> Value:
    """(equ x y) => t if x and y are the same word, otherwise ()."""
    args = evlis(tail, env, session)
    return session.truth(values_equal(session.car(args), session.car(session.cdr(args))))


def logical_not(tail: Value, env: Value, session: Session) -> Value:
    """(not x) => t if x is (), otherwise ()."""
    return session.truth(session.is_nil(session.car(evlis(tail, env, session))))


def or_form(tail: Value, env: Value, session: Session) -> Value:
    """Short-circuiting OR.

    (or x1 x2 ... xk) evaluates operands left to right and returns the first
    one that is not (). Returns () when every operand is () or there are none.
    """
    x = session.nil
    while tag_of(tail) is Tag.CONS:
        x = evaluate(session.car(tail), env, session)
        if not session.is_nil(x):
            break
        tail = session.cdr(tail)
    return x


def and_form(tail: Value, env: Value, session: Session) -> Value:
    """Short-circuiting AND.

    (and x1 x2 ... xk) stops at the first operand that evaluates to () and
    returns it; otherwise returns the last value. With no operands, returns ().
    """
    x = session.nil
    while tag_of(tail) is Tag.CONS:
        x = evaluate(session.car(tail), env, session)
        if session.is_nil(x):
            break
        tail = session.cdr(tail)
    return x
