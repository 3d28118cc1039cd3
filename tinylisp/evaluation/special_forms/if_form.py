from tinylisp import EvaluatorFn
from tinylisp import Node
from tinylisp.errors import LispArityError, LispTypeError
from tinylisp.printer import to_source
from tinylisp.types.boolean import T, F
from tinylisp.types.environment import Environment


def if_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: list[Node],
) -> Node:
    if len(tail) not in (2, 3):
        raise LispArityError(
            f"if requires a condition, a then-expression and an optional "
            f"else-expression, but got {len(tail)} arguments in {to_source(form)}"
        )

    cond = evaluate_fn(tail[0], env)
    # Only #t and #f are conditions; there is no general truthiness
    if cond is T:
        return evaluate_fn(tail[1], env)
    if cond is F:
        if len(tail) == 3:
            return evaluate_fn(tail[2], env)
        return []
    raise LispTypeError(
        f"if condition must be #t or #f, but got {to_source(cond)} in {to_source(form)}"
    )
