from tinylisp import Value
from tinylisp.types.session import Session


def lambda_form(tail: Value, env: Value, session: Session) -> Value:
    """(lambda params body)

    `params` is a list of atoms, a dotted list whose tail atom collects the
    remaining arguments, or a single atom that collects all of them.
    """
    return session.closure(session.car(tail), session.car(session.cdr(tail)), env)
