from tinylisp import Value
from tinylisp.types.session import Session
from tinylisp.evaluation.evaluator import evlis


def cons(tail: Value, env: Value, session: Session) -> Value:
    """(cons x y) => the pair (x . y)."""
    args = evlis(tail, env, session)
    return session.cons(session.car(args), session.car(session.cdr(args)))


def car(tail: Value, env: Value, session: Session) -> Value:
    return session.car(session.car(evlis(tail, env, session)))


def cdr(tail: Value, env: Value, session: Session) -> Value:
    return session.cdr(session.car(evlis(tail, env, session)))
