from tinylisp import EvaluatorFn
from tinylisp import Node
from tinylisp.errors import LispArityError, LispTypeError
from tinylisp.printer import to_source
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol


def setq_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: list[Node],
) -> Node:
    """
    (setq name value [name value ...])
    Pairs are handled left to right: a later value sees earlier bindings.
    Returns the setq form itself.
    """
    if len(tail) % 2:
        raise LispArityError(f"setq requires name/value pairs, but got {len(tail)} arguments in {to_source(form)}")

    for key, val_expr in zip(tail[::2], tail[1::2]):
        if not isinstance(key, Symbol):
            raise LispTypeError(f"setq name must be a symbol, but got {to_source(key)} in {to_source(form)}")
        env.bind(key.name, evaluate_fn(val_expr, env))
    return form
