"""Fixed-capacity arena shared by the symbol heap and the cell stack.

One numpy buffer of `cells` 64-bit words is viewed two ways:

- as bytes, holding NUL-terminated atom names that grow upward from byte 0
  (`hp` is the next free byte);
- as words, holding (car, cdr) records that grow downward from word `cells`
  (`sp` is the lowest used word).

The only bounds check is ``hp <= 8 * sp``. Crossing it is fatal.
"""

from __future__ import annotations

import logging

import numpy as np

from tinylisp import Value
from tinylisp.errors import ArenaExhausted
from tinylisp.types.value import Tag, box

logger = logging.getLogger(__name__)

CELL_BYTES = 8


class Arena:
    __slots__ = ("cells", "words", "heap", "hp", "sp")

    def __init__(self, cells: int):
        if cells <= 0:
            raise ValueError(f"arena needs at least one cell, got {cells}")
        self.cells = cells
        self.words = np.zeros(cells, dtype=np.uint64)
        self.heap = self.words.view(np.uint8)  # aliases the same memory
        self.hp = 0
        self.sp = cells

    def _check(self, hp: int, sp: int) -> None:
        if hp > sp * CELL_BYTES:
            logger.critical("arena exhausted (hp=%d, sp=%d)", hp, sp)
            raise ArenaExhausted(hp, sp)

    # --- symbol heap ---
    def intern(self, name: str) -> Value:
        """Return the atom for `name`, appending it to the heap on first use.

        Lone surrogates, which stand for undecodable input bytes, are kept.
        """
        raw = name.encode("utf-8", "surrogatepass")
        if not raw or b"\0" in raw:
            raise ValueError(f"invalid atom name {name!r}")
        names = self.heap[: self.hp].tobytes()
        i = 0
        while i < self.hp:
            end = names.index(b"\0", i)
            if names[i:end] == raw:
                return box(Tag.ATOM, i)
            i = end + 1

        new_hp = i + len(raw) + 1
        self._check(new_hp, self.sp)
        self.heap[i : i + len(raw)] = np.frombuffer(raw, dtype=np.uint8)
        self.heap[i + len(raw)] = 0
        self.hp = new_hp
        return box(Tag.ATOM, i)

    def atom_name(self, offset: int) -> str:
        data = self.heap[offset : self.hp].tobytes()
        return data[: data.index(b"\0")].decode("utf-8", "surrogatepass")

    # --- cell stack ---
    def alloc_cell(self, car: Value, cdr: Value) -> Value:
        """Push a (car, cdr) record and return a CONS addressing it."""
        sp = self.sp - 2
        self._check(self.hp, sp)
        self.words[sp + 1] = car
        self.words[sp] = cdr
        self.sp = sp
        return box(Tag.CONS, sp)

    def load_car(self, i: int) -> Value:
        return int(self.words[i + 1])

    def load_cdr(self, i: int) -> Value:
        return int(self.words[i])

    def rewind(self, sp: int) -> None:
        """Reset the stack offset, discarding every record below `sp`."""
        if not self.sp <= sp <= self.cells:
            raise ValueError(f"cannot rewind stack from {self.sp} to {sp}")
        self.sp = sp

    @property
    def free_cells(self) -> int:
        return self.sp - self.hp // CELL_BYTES

    def __repr__(self) -> str:
        return f"<Arena cells={self.cells} hp={self.hp} sp={self.sp}>"
