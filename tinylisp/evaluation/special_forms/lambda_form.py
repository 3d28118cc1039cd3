from tinylisp import EvaluatorFn
from tinylisp import Node
from tinylisp.errors import LispArityError, LispTypeError
from tinylisp.printer import to_source
from tinylisp.types.closure import Closure
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol


def lambda_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: list[Node],
) -> Node:
    # (lambda (params...) (body...)): the body is a single list form.
    # The closure does not capture env; see Closure.
    if len(tail) != 2:
        raise LispArityError(f"lambda requires a parameter list and a body, but got {len(tail)} arguments in {to_source(form)}")

    params, body = tail
    if not isinstance(params, list):
        raise LispTypeError(f"lambda parameters must be a list, but got {to_source(params)}")
    for param in params:
        if not isinstance(param, Symbol):
            raise LispTypeError(f"lambda parameter must be a symbol, but got {to_source(param)} in {to_source(form)}")
    if not isinstance(body, list):
        raise LispTypeError(f"lambda body must be a list, but got {to_source(body)}")

    return Closure([param.name for param in params], body)
