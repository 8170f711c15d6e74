from tinylisp import Value
from tinylisp.types.session import Session
from tinylisp.types.value import Tag, tag_of
from tinylisp.evaluation.evaluator import evaluate


def cond_form(tail: Value, env: Value, session: Session) -> Value:
    """(cond (x1 y1) (x2 y2) ... (xk yk)) => the first yi whose xi is not ()."""
    car, cdr = session.car, session.cdr
    while tag_of(tail) is Tag.CONS and session.is_nil(evaluate(car(car(tail)), env, session)):
        tail = cdr(tail)
    return evaluate(car(cdr(car(tail))), env, session)


def if_form(tail: Value, env: Value, session: Session) -> Value:
    """(if x y z) => y if x is not (), otherwise z."""
    test = evaluate(session.car(tail), env, session)
    branch = session.cdr(tail) if session.is_nil(test) else tail
    return evaluate(session.car(session.cdr(branch)), env, session)


def let_star_form(tail: Value, env: Value, session: Session) -> Value:
    """(let* (v1 x1) (v2 x2) ... y)

    Bind each vi to xi in turn, every initializer seeing the bindings before
    it, then evaluate the final expression y in the extended environment.
    """
    car, cdr = session.car, session.cdr
    while tag_of(tail) is Tag.CONS and not session.is_nil(cdr(tail)):
        binding = car(tail)
        env = session.pair(car(binding), evaluate(car(cdr(binding)), env, session), env)
        tail = cdr(tail)
    return evaluate(car(tail), env, session)
