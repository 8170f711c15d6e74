"""Interpreter session: the arena plus the pair, environment and closure model.

A Session owns all interpreter state: the arena, the `nil`, `t` and `ERR`
sentinels and the global environment. Environments
are association lists built from arena cells,

    ((name . value) . parent)

so extending one is two cell allocations and lookup is a linear walk. The
global environment doubles as the reclamation boundary: its head cell is the
lowest cell that must survive the end of a top-level form.
"""

from __future__ import annotations

import logging
from typing import Optional

from tinylisp import PrimitiveFn, Value
from tinylisp.config import get_cells, get_verbose_errors
from tinylisp.types.arena import Arena
from tinylisp.types.value import Tag, box, is_pair, ordinal, tag_of, values_equal

logger = logging.getLogger(__name__)


class Session:
    """Arena, sentinels and global environment for one interpreter."""

    __slots__ = ("arena", "nil", "tru", "err", "env", "verbose_errors", "primitives")

    def __init__(self, cells: Optional[int] = None, verbose_errors: Optional[bool] = None):
        self.arena = Arena(get_cells(cells))
        self.verbose_errors = get_verbose_errors(verbose_errors)
        self.primitives: tuple[tuple[str, PrimitiveFn], ...] = ()
        self.nil: Value = box(Tag.NIL, 0)
        self.err: Value = self.arena.intern("ERR")
        self.tru: Value = self.arena.intern("t")
        self.env: Value = self.pair(self.tru, self.tru, self.nil)

    def fail(self, op: str, message: str) -> Value:
        """Report a recoverable failure and return the error value."""
        if self.verbose_errors:
            logger.warning("[err] %s: %s", op, message)
        else:
            logger.debug("[err] %s: %s", op, message)
        return self.err

    # --- atoms ---
    def atom(self, name: str) -> Value:
        return self.arena.intern(name)

    def name_of(self, x: Value) -> str:
        return self.arena.atom_name(ordinal(x))

    # --- pairs ---
    def cons(self, x: Value, y: Value) -> Value:
        return self.arena.alloc_cell(x, y)

    def car(self, p: Value) -> Value:
        if is_pair(p):
            return self.arena.load_car(ordinal(p))
        return self.fail("car", "not a pair")

    def cdr(self, p: Value) -> Value:
        if is_pair(p):
            return self.arena.load_cdr(ordinal(p))
        return self.fail("cdr", "not a pair")

    def is_nil(self, x: Value) -> bool:
        return tag_of(x) is Tag.NIL

    def truth(self, flag: bool) -> Value:
        return self.tru if flag else self.nil

    # --- environments ---
    def pair(self, v: Value, x: Value, e: Value) -> Value:
        """Return `e` extended with the binding (v . x)."""
        return self.cons(self.cons(v, x), e)

    def closure(self, v: Value, x: Value, e: Value) -> Value:
        # A closure made at global scope stores nil and sees the live global env.
        captured = self.nil if values_equal(e, self.env) else e
        return box(Tag.CLOS, ordinal(self.pair(v, x, captured)))

    def assoc(self, v: Value, e: Value) -> Value:
        """Look up atom `v` in environment `e`, innermost binding first."""
        while tag_of(e) is Tag.CONS and not values_equal(v, self.car(self.car(e))):
            e = self.cdr(e)
        if tag_of(e) is Tag.CONS:
            return self.cdr(self.car(e))
        name = self.name_of(v) if tag_of(v) is Tag.ATOM else repr(v)
        return self.fail("assoc", f"symbol {name} not found")

    def define(self, v: Value, x: Value) -> None:
        """Prepend (v . x) to the global environment."""
        self.env = self.pair(v, x, self.env)

    # --- reclamation ---
    def reclaim(self) -> None:
        """Drop every cell allocated after the global environment's head cell."""
        before = self.arena.sp
        self.arena.rewind(ordinal(self.env))
        logger.debug("reclaimed %d cells", self.arena.sp - before)

    @property
    def free_cells(self) -> int:
        return self.arena.free_cells
