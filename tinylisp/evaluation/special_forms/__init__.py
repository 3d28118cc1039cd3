"""Registry of special forms for the tinylisp evaluator.

Maps Symbols to handler functions that implement the built-in evaluation
rules. The evaluator consults this table before looking the head up as a
closure. Every handler is called as handler(tail, env, evaluate_fn, form).
"""

from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.arithmetic_forms import add_form, sub_form, mul_form, div_form
from tinylisp.evaluation.special_forms.comparison_forms import eq_form, gt_form, ge_form, lt_form, le_form, ne_form
from tinylisp.evaluation.special_forms.if_form import if_form
from tinylisp.evaluation.special_forms.list_forms import car_form, cdr_form
from tinylisp.evaluation.special_forms.setq_form import setq_form
from tinylisp.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("+"): add_form,
    Symbol("-"): sub_form,
    Symbol("*"): mul_form,
    Symbol("/"): div_form,
    Symbol("="): eq_form,
    Symbol(">"): gt_form,
    Symbol(">="): ge_form,
    Symbol("<"): lt_form,
    Symbol("<="): le_form,
    Symbol("/="): ne_form,
    Symbol("if"): if_form,
    Symbol("car"): car_form,
    Symbol("cdr"): cdr_form,
    Symbol("setq"): setq_form,
    Symbol("lambda"): lambda_form,
}
