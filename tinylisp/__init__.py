# Core type aliases for the tinylisp kernel.
# Every runtime value is a single 64-bit word: either the IEEE-754 bit pattern
# of a float, or a NaN-boxed tag plus ordinal (see tinylisp.types.value).
# Words are carried around as plain Python ints.
#
# Naming guidance:
# - Value:       a tagged word produced by the reader or the evaluator.
# - PrimitiveFn: the callback shape shared by every builtin in the dispatch table.

from typing import Any, Callable

# Runtime value alias (an unsigned 64-bit word)
Value = int

# Primitive callback: (unevaluated args, caller env, session) -> Value
PrimitiveFn = Callable[[Value, Value, Any], Value]
