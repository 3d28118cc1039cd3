"""car / cdr over quoted lists."""

from tinylisp import EvaluatorFn
from tinylisp import Node
from tinylisp.errors import LispArityError, LispTypeError
from tinylisp.printer import to_source
from tinylisp.types.environment import Environment
from tinylisp.types.quoted import QuotedList


def _quoted_argument(
    tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn, form: list[Node]
) -> QuotedList:
    name = to_source(form[0])
    if len(tail) != 1:
        raise LispArityError(f"{name} takes exactly 1 argument, but got {len(tail)} in {to_source(form)}")
    arg = tail[0]
    # A quoted literal is taken as is; anything else must evaluate to one
    value = arg if isinstance(arg, QuotedList) else evaluate_fn(arg, env)
    if not isinstance(value, QuotedList):
        raise LispTypeError(f"{name} takes only a quoted list, but got {to_source(arg)}")
    return value


def car_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: list[Node],
) -> Node:
    quoted = _quoted_argument(tail, env, evaluate_fn, form)
    if not quoted.items:
        return []
    return quoted.items[0]


def cdr_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: list[Node],
) -> Node:
    quoted = _quoted_argument(tail, env, evaluate_fn, form)
    if not quoted.items:
        return []
    return QuotedList(quoted.items[1:])
