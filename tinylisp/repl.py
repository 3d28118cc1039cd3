"""Interactive shell for tinylisp.

Reads one form per line, prints the rendered result, and reports
LispErrors without ending the session. End of file (Ctrl-D) exits.

    python -m tinylisp [--max-depth N] [--log-level LEVEL] [-e EXPR ...]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from tinylisp import __version__
from tinylisp.config import get_prompt
from tinylisp.errors import LispError
from tinylisp.interpreter import Interpreter
from tinylisp.printer import to_source

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinylisp", description="tinylisp interpreter")
    parser.add_argument("-e", "--eval", action="append", metavar="EXPR", default=[],
                        help="evaluate EXPR and print the result instead of starting the shell")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="evaluation nesting limit (default: $TINYLISP_MAX_DEPTH or 200)")
    parser.add_argument("--log-level", default="warning",
                        choices=["debug", "info", "warning", "error"],
                        help="logging level (default: warning)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_repl(
    interp: Interpreter,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    prompt: Optional[str] = None,
) -> None:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    if prompt is None:
        prompt = get_prompt()

    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        if not line.strip():
            continue
        try:
            result = interp.eval_line(line)
        except LispError as e:
            print(f"error: {e}", file=stdout)
            continue
        print(to_source(result), file=stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )
    interp = Interpreter(max_depth=args.max_depth)

    if args.eval:
        for expr in args.eval:
            try:
                print(to_source(interp.eval_line(expr)))
            except LispError as e:
                print(f"error: {e}", file=sys.stderr)
                return 1
        return 0

    logger.info("starting shell, max depth %d", interp.env.max_depth)
    run_repl(interp)
    return 0
