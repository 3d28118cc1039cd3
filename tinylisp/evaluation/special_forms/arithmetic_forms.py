"""Integer arithmetic special forms: + - * /.

Each form evaluates its arguments left to right and folds them with the
operator, starting from the first value. Every intermediate result must stay
within the 64-bit signed range.
"""

from __future__ import annotations

import operator
from typing import Callable

from tinylisp import EvaluatorFn, Node
from tinylisp.errors import (
    LispArityError,
    LispOverflowError,
    LispTypeError,
    LispZeroDivisionError,
)
from tinylisp.printer import to_source
from tinylisp.types.environment import Environment
from tinylisp.types.integer import fits_int64, is_integer


def integer_arguments(
    tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn, form: list[Node]
) -> list[int]:
    """Evaluate every argument of `form`, insisting on at least one and on integers."""
    if not tail:
        raise LispArityError(f"empty argument: {to_source(form)}")
    values = []
    for arg in tail:
        value = evaluate_fn(arg, env)
        if not is_integer(value):
            raise LispTypeError(
                f"{to_source(form[0])} takes only integers, but got "
                f"{to_source(arg)} in {to_source(form)}"
            )
        values.append(value)
    return values


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _fold_form(op: Callable[[int, int], int]):
    def form_handler(
        tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn, form: list[Node]
    ) -> Node:
        values = integer_arguments(tail, env, evaluate_fn, form)
        acc = values[0]
        for value in values[1:]:
            try:
                acc = op(acc, value)
            except ZeroDivisionError:
                raise LispZeroDivisionError(f"division by zero in {to_source(form)}") from None
            if not fits_int64(acc):
                raise LispOverflowError(f"integer overflow in {to_source(form)}")
        return acc

    return form_handler


add_form = _fold_form(operator.add)
sub_form = _fold_form(operator.sub)
mul_form = _fold_form(operator.mul)
div_form = _fold_form(truncating_div)
