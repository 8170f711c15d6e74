"""NaN-boxed value encoding.

Every tinylisp value is one 64-bit word. Ordinary words are the IEEE-754 bit
pattern of a double. The five non-numeric kinds live in the quiet-NaN space:
the top 16 bits hold the tag and the low 32 bits hold an ordinal (a heap
offset, a cell index or a primitive table index).

    0x7ff8 ATOM   offset of the atom name in the symbol heap
    0x7ff9 PRIM   index into the primitive dispatch table
    0x7ffa CONS   cell index of a (car, cdr) record
    0x7ffb CLOS   cell index of a ((params . body) . env) record
    0x7ffc NIL    the empty list

Arithmetic can produce NaNs whose bits fall into that range (Python's own
``float('nan')`` is 0x7ff8000000000000, i.e. atom 0), so ``make_number``
folds every NaN onto one canonical pattern outside the tag region. This is
the only module that should look at bit patterns.
"""

from __future__ import annotations

import struct
from enum import IntEnum

from tinylisp import Value


class Tag(IntEnum):
    NUMBER = 0x0000  # any word outside the reserved region
    ATOM = 0x7FF8
    PRIM = 0x7FF9
    CONS = 0x7FFA
    CLOS = 0x7FFB
    NIL = 0x7FFC


TAG_SHIFT = 48
ORDINAL_MASK = 0xFFFFFFFF
WORD_MASK = 0xFFFFFFFFFFFFFFFF

# Negative quiet NaN: high 16 bits are 0xfff8, never a tag.
CANONICAL_NAN: Value = 0xFFF8000000000000

_TAGS = {int(t): t for t in Tag if t is not Tag.NUMBER}
_F64 = struct.Struct("<d")
_U64 = struct.Struct("<Q")


def box(tag: Tag, i: int) -> Value:
    """Tag ordinal `i` with `tag`."""
    return (int(tag) << TAG_SHIFT) | (i & ORDINAL_MASK)


def ordinal(x: Value) -> int:
    return x & ORDINAL_MASK


def tag_of(x: Value) -> Tag:
    return _TAGS.get(x >> TAG_SHIFT, Tag.NUMBER)


def make_number(n: float) -> Value:
    n = float(n)
    if n != n:
        return CANONICAL_NAN
    return _U64.unpack(_F64.pack(n))[0]


def to_float(x: Value) -> float:
    """Reinterpret the word as a double. Tagged words come back as NaN."""
    return _F64.unpack(_U64.pack(x & WORD_MASK))[0]


def values_equal(x: Value, y: Value) -> bool:
    # bitwise, so NaN == NaN and 0.0 != -0.0
    return x == y


def is_pair(x: Value) -> bool:
    """True for CONS and CLOS, which share the record layout."""
    return ((x >> TAG_SHIFT) & ~(Tag.CONS ^ Tag.CLOS)) == Tag.CONS
