"""Integer comparison special forms: = > >= < <= /=.

(op a b c ...) is #t when every adjacent pair satisfies the relation.
"""

from __future__ import annotations

import operator
from itertools import pairwise
from typing import Callable

from tinylisp import EvaluatorFn, Node
from tinylisp.evaluation.special_forms.arithmetic_forms import integer_arguments
from tinylisp.types.boolean import from_bool
from tinylisp.types.environment import Environment


def _compare_form(relation: Callable[[int, int], bool]):
    def form_handler(
        tail: list[Node], env: Environment, evaluate_fn: EvaluatorFn, form: list[Node]
    ) -> Node:
        values = integer_arguments(tail, env, evaluate_fn, form)
        return from_bool(all(relation(a, b) for a, b in pairwise(values)))

    return form_handler


eq_form = _compare_form(operator.eq)
gt_form = _compare_form(operator.gt)
ge_form = _compare_form(operator.ge)
lt_form = _compare_form(operator.lt)
le_form = _compare_form(operator.le)
ne_form = _compare_form(operator.ne)
