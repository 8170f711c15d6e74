from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from tinylisp import Value
from tinylisp.types.session import Session
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.evaluation.primitives import register
from tinylisp.reader.parser import lex, read, TokenStream
from tinylisp.printer import to_string

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads, evaluates and prints tinylisp code against one Session.

    Results are rendered before the end-of-form reclamation, since the cells
    of a result do not outlive its top-level form unless it was defined.
    """

    def __init__(self, cells: Optional[int] = None, verbose_errors: Optional[bool] = None):
        self.session = Session(cells, verbose_errors)
        register(self.session)
        logger.debug(
            "session ready: %d primitives, %d free cells",
            len(self.session.primitives),
            self.session.free_cells,
        )

    def stream(self, source: Union[str, Iterable[str]]) -> TokenStream:
        return TokenStream(lex(source), self.session)

    def eval_form(self, expr: Value) -> str:
        """Evaluate one parsed top-level form, render it, then reclaim its cells."""
        try:
            return to_string(evaluate(expr, self.session.env, self.session), self.session)
        finally:
            self.session.reclaim()

    def eval_all(self, code: Union[str, Iterable[str]]) -> list[str]:
        """Evaluate every form in `code` and return the rendered results."""
        return [self.eval_form(expr) for expr in read(code, self.session)]

    def eval(self, code: Union[str, Iterable[str]]) -> Union[str, list[str]]:
        results = self.eval_all(code)
        if not results:
            return "()"
        if len(results) == 1:
            return results[0]
        return results
