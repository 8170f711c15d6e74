"""Command line read-eval-print loop for tinylisp."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from tinylisp.errors import ArenaExhausted, QuitRequested, TinyLispSyntaxError
from tinylisp.interpreter import Interpreter

logger = logging.getLogger(__name__)

BANNER = "--- TinyLisp REPL ---"


def run(interp: Interpreter, stdin: TextIO, stdout: TextIO, prompt: bool = True) -> int:
    """Read, evaluate and print until end of input. Returns the exit status.

    QuitRequested propagates to the caller.
    """
    session = interp.session
    stream = interp.stream(stdin)
    if prompt:
        stdout.write(BANNER)
    while True:
        if prompt:
            stdout.write(f"\n[{session.free_cells}]> ")
            stdout.flush()
        try:
            expr = stream.parse_expr()
            if expr is None:
                break
            text = interp.eval_form(expr)
        except ArenaExhausted as exc:
            logger.critical("%s", exc)
            return 1
        except TinyLispSyntaxError as exc:
            logger.error("syntax error: %s", exc)
            session.reclaim()
            continue
        except RecursionError:
            logger.error("recursion too deep")
            session.reclaim()
            continue
        stdout.write(text)
        if not prompt:
            stdout.write("\n")
    if prompt:
        stdout.write("\n")
    stdout.flush()
    return 0


def repl(interp: Interpreter, stdin: TextIO, stdout: TextIO) -> int:
    """Interactive loop: banner, prompts, and Goodbye! on (quit)."""
    try:
        return run(interp, stdin, stdout)
    except QuitRequested:
        stdout.write("Goodbye!\n")
        return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinylisp", description="A tiny NaN-boxed Lisp interpreter")
    parser.add_argument("files", nargs="*", type=Path, help="source files to evaluate before the prompt")
    parser.add_argument("-c", "--cells", type=int, default=None, help="arena size in 8-byte cells (default: $TINYLISP_CELLS or 1024)")
    parser.add_argument("-i", "--interactive", action="store_true", help="start the prompt after evaluating files")
    parser.add_argument("-q", "--quiet-errors", action="store_true", help="do not report [err] diagnostics")
    parser.add_argument("--log-level", default="WARNING", help="logging level for diagnostics on stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        stream=sys.stderr,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    try:
        interp = Interpreter(cells=args.cells, verbose_errors=False if args.quiet_errors else None)
    except (ArenaExhausted, ValueError) as exc:
        logger.critical("cannot set up the arena: %s", exc)
        return 1

    try:
        for path in args.files:
            with path.open(encoding="utf-8", errors="surrogateescape") as source:
                status = run(interp, source, sys.stdout, prompt=False)
            if status:
                return status
    except QuitRequested:
        sys.stdout.write("Goodbye!\n")
        return 0

    if args.files and not args.interactive:
        return 0
    return repl(interp, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
