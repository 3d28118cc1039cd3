"""Closure application for tinylisp.

A call pushes one frame, binds each parameter to its evaluated argument in
that frame, evaluates the body as a list form and pops the frame again,
whether the body returned or raised. Arguments are evaluated after the push,
so the frame is already visible while they are computed. Nothing is captured
at definition time: free variables resolve against the frames live during
the call (dynamic scope).
"""

import logging

from tinylisp import EvaluatorFn, Node
from tinylisp.errors import LispArityError
from tinylisp.printer import to_source
from tinylisp.types.closure import Closure
from tinylisp.types.environment import Environment

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: list[Node],
) -> Node:
    """Call `fn` with the unevaluated argument expressions `args`.

    Raises LispArityError, before touching the environment, when the number
    of arguments differs from the number of parameters.
    """
    if len(args) != fn.arity:
        raise LispArityError(
            f"{to_source(form[0])} takes {fn.arity} arguments, but got "
            f"{len(args)} in {to_source(form)}"
        )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("calling %s", to_source(form))
    with env.frame():
        for name, arg in zip(fn.formals, args):
            env.bind(name, evaluate_fn(arg, env))
        return evaluate_fn(list(fn.body), env)
