import pytest

from tinylisp.interpreter import Interpreter
from tinylisp.types.session import Session
from tinylisp.evaluation.primitives import register


@pytest.fixture
def interp():
    """Fresh interpreter with the default arena size and quiet diagnostics."""
    return Interpreter(verbose_errors=False)


@pytest.fixture
def session():
    """Bare session with the primitive table installed."""
    s = Session(cells=1024, verbose_errors=False)
    register(s)
    return s
