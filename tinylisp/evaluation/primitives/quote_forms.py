from tinylisp import Value
from tinylisp.types.session import Session
from tinylisp.evaluation.evaluator import evaluate, evlis


def eval_form(tail: Value, env: Value, session: Session) -> Value:
    """(eval x): evaluate x, then evaluate the result again in the caller's env."""
    return evaluate(session.car(evlis(tail, env, session)), env, session)


def quote_form(tail: Value, env: Value, session: Session) -> Value:
    """(quote x): return x unevaluated."""
    return session.car(tail)
