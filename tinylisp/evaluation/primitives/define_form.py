from tinylisp import Value
from tinylisp.types.session import Session
from tinylisp.evaluation.evaluator import evaluate


def define_form(tail: Value, env: Value, session: Session) -> Value:
    """
    (define name value)
    Always binds in the global environment, whatever env it is evaluated in.
    The value is computed before the new binding cell is allocated, so the
    value's cells lie above the new reclamation boundary.
    """
    name = session.car(tail)
    value = evaluate(session.car(session.cdr(tail)), env, session)
    session.define(name, value)
    return name
