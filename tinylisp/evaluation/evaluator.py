"""Core evaluator for the tinylisp interpreter.

Reduces a Node to a value against an Environment: atoms evaluate to
themselves, symbols to their (re-evaluated) binding, quoted lists to plain
lists, and lists dispatch on their head through the special-form registry or
a bound closure.
"""

from __future__ import annotations

import logging

from tinylisp import Node
from tinylisp.errors import (
    LispEmptyFormError,
    LispRecursionError,
    LispTypeError,
    LispUnknownKeywordError,
)
from tinylisp.evaluation.apply import apply_closure
from tinylisp.evaluation.special_forms import SPECIAL_FORMS
from tinylisp.printer import to_source
from tinylisp.types.closure import Closure
from tinylisp.types.environment import Environment
from tinylisp.types.quoted import QuotedList
from tinylisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: Node, env: Environment) -> Node:
    """
    Evaluate `expr` in `env`, raising a LispError on failure.

    Nesting is bounded by env.max_depth; the depth counter is restored on
    every exit path.
    """
    env.depth += 1
    try:
        if env.depth > env.max_depth:
            logger.warning("evaluation depth limit %d exceeded", env.max_depth)
            raise LispRecursionError(f"maximum evaluation depth {env.max_depth} exceeded")

        match expr:
            case Symbol():
                value = env.lookup(expr.name)
                # Unbound symbols evaluate to themselves
                if value is None:
                    return expr
                return evaluate(value, env)

            case QuotedList():
                return list(expr.items)

            case []:
                raise LispEmptyFormError("cannot evaluate an empty list as a form")

            case [head, *tail_args]:
                if not isinstance(head, Symbol):
                    raise LispTypeError(
                        f"{to_source(head)} is not a keyword in {to_source(expr)}"
                    )

                # --- Special forms handling ---
                handler = SPECIAL_FORMS.get(head)
                if handler is not None:
                    return handler(tail_args, env, evaluate, expr)

                # --- Closure application ---
                fn = env.lookup(head.name)
                if fn is None:
                    raise LispUnknownKeywordError(f"unknown keyword: {head.name}")
                if not isinstance(fn, Closure):
                    raise LispTypeError(
                        f"{head.name} is bound to {to_source(fn)}, which is not callable"
                    )
                return apply_closure(fn, tail_args, env, evaluate, expr)

        # --- Atoms return as-is ---
        return expr
    finally:
        env.depth -= 1
