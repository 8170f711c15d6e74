"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing: `lex` accepts a whole string or any iterable of
  lines (such as sys.stdin) and only pulls the next line when the parser
  asks for another token.
- Builds values directly in the session's arena:

    - numbers -> NaN-boxed doubles (anything float() or float.fromhex() accepts)
    - symbols -> atoms interned in the symbol heap
    - lists -> chains of cons cells, () -> nil
    - dotted lists -> (a b . c) with c as the final cdr
    - 'x -> (quote x)
    - ; comment to end of line
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional, Union

from tinylisp import Value
from tinylisp.errors import TinyLispSyntaxError
from tinylisp.types.session import Session
from tinylisp.types.value import make_number

# Control characters count as whitespace.
_WS = r"\x00-\x20\s"

TOKEN_RE = re.compile(
    rf"[{_WS}]*(?:"
    r"(?P<comment>;.*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    rf"|(?P<symbol>[^{_WS}();'][^{_WS}();]*)"  # numbers, atoms and the dot
    r")",
    re.DOTALL,
)

Token = tuple[Optional[str], Optional[str]]


def lex(source: Union[str, Iterable[str]]) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    lines = source.splitlines(keepends=True) if isinstance(source, str) else source
    for line in lines:
        pos = 0
        n = len(line)
        while pos < n:
            match = TOKEN_RE.match(line, pos)
            if not match:
                break  # only whitespace left on this line
            pos = match.end()
            kind = match.lastgroup
            if kind == "comment":
                break
            yield kind, match.group(kind)


def parse_number(token: str) -> Optional[float]:
    if "_" in token:
        return None
    try:
        return float(token)
    except ValueError:
        pass
    if "x" in token.lower():
        try:
            return float.fromhex(token)
        except ValueError:
            pass
    return None


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]], session: Session):
        self.tokens = iter(token_iter)
        self.session = session
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> Token:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> Token:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Value]:
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "lparen":
            return self._parse_list()

        if tok_type == "rparen":
            raise TinyLispSyntaxError("Unexpected ')'")

        if tok_type == "quote":
            s = self.session
            quoted = self._parse_required()
            return s.cons(s.atom("quote"), s.cons(quoted, s.nil))

        return self._parse_atomic(tok_val)

    def _parse_required(self) -> Value:
        expr = self.parse_expr()
        if expr is None:
            raise TinyLispSyntaxError("Unexpected end of input")
        return expr

    def _parse_list(self) -> Value:
        s = self.session
        items: list[Value] = []
        tail = s.nil
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise TinyLispSyntaxError("Unmatched '('")
            if tok_type == "rparen":
                self.advance()
                break
            if tok_type == "symbol" and tok_val == ".":
                self.advance()
                tail = self._parse_required()
                if self.peek()[0] != "rparen":
                    raise TinyLispSyntaxError("Expected ')' after dotted cdr")
                self.advance()
                break
            items.append(self._parse_required())
        for item in reversed(items):
            tail = s.cons(item, tail)
        return tail

    def _parse_atomic(self, token: str) -> Value:
        n = parse_number(token)
        if n is not None:
            return make_number(n)
        return self.session.atom(token)

    def parse_all(self) -> Iterator[Value]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def read(source: Union[str, Iterable[str]], session: Session) -> Iterator[Value]:
    """Parse every expression in `source` lazily."""
    return TokenStream(lex(source), session).parse_all()
