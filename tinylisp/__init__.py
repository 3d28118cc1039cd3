# Core type aliases for tinylisp's data model.
# Nodes are plain Python values where one fits (int for integers, list for
# evaluable lists) plus a few small classes under tinylisp.types for the
# variants Python has no natural equivalent for (Symbol, QuotedList, Closure,
# the #t/#f booleans). The same Node values serve as syntax and as results.
#
# Naming guidance:
# - Node: any syntax tree or evaluated value.
# - EvaluatorFn: the evaluate(node, env) callable handed to special forms.

from typing import Any, Callable

Node = Any

EvaluatorFn = Callable[..., Node]

__version__ = "0.1.0"
