from tinylisp import Value
from tinylisp.errors import QuitRequested
from tinylisp.types.session import Session


def quit_form(tail: Value, env: Value, session: Session) -> Value:
    """(quit): leave the read-eval-print loop."""
    raise QuitRequested("quit")
