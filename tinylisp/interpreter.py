from __future__ import annotations

import logging

from tinylisp import Node
from tinylisp.errors import LispEOFError, LispRecursionError, LispSyntaxError
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.printer import to_source
from tinylisp.reader.lexer import lex
from tinylisp.reader.parser import Parser
from tinylisp.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One tinylisp session: reads and evaluates source text against an
    Environment that persists across calls, so `setq` bindings made by one
    line are visible to the next.
    """

    def __init__(self, prelude: str | None = None, *, max_depth: int | None = None):
        self.env: Environment = Environment(max_depth=max_depth)

        if prelude:
            self.eval(prelude)

    def eval_line(self, line: str) -> Node:
        """Evaluate the single top-level form in `line`.

        Raises LispEOFError when the line holds no form at all, and
        LispSyntaxError when anything follows the first form.
        """
        parser = Parser(lex(line), max_depth=self.env.max_depth)
        try:
            expr = parser.parse()
            trailing = parser.peek()
        except RecursionError:
            raise LispRecursionError("host recursion limit exceeded while reading") from None
        if expr is None:
            raise LispEOFError("end of input")
        if trailing is not None:
            raise LispSyntaxError(
                f"Unexpected input after the first form at {trailing.index}", trailing.index
            )
        return self._evaluate(expr)

    def eval(self, code: str) -> Node:
        """Evaluate every form in `code` in order and return the last result ([] if none)."""
        result: Node = []
        forms = Parser(lex(code), max_depth=self.env.max_depth).parse_all()
        while True:
            try:
                expr = next(forms)
            except StopIteration:
                return result
            except RecursionError:
                raise LispRecursionError("host recursion limit exceeded while reading") from None
            result = self._evaluate(expr)

    def _evaluate(self, expr: Node) -> Node:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("evaluating %s", to_source(expr))
        base = len(self.env.frames)
        try:
            return evaluate(expr, self.env)
        except RecursionError:
            # Unwinding at the host limit may skip frame pops; drop any call
            # frames left above the session's own.
            del self.env.frames[base:]
            self.env.depth = 0
            logger.warning("host recursion limit reached during evaluation")
            raise LispRecursionError("host recursion limit exceeded") from None
