import pytest

from tinylisp.errors import LispArityError, LispTypeError
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.lexer import lex
from tinylisp.reader.parser import Parser
from tinylisp.types.quoted import QuotedList
from tinylisp.types.symbol import Symbol


def run(source, env):
    result = None
    for expr in Parser(lex(source)).parse_all():
        result = evaluate(expr, env)
    return result


def test_quoted_list_evaluates_to_list_without_evaluating_items(env):
    assert run("'(1 (+ 1 2) x)", env) == [1, [Symbol("+"), 1, 2], Symbol("x")]


def test_quoting_defers_exactly_one_level(env):
    assert run("'('(1))", env) == [QuotedList([1])]


def test_quoted_items_are_shared(env):
    quoted = QuotedList([[Symbol("a")]])
    result = evaluate(quoted, env)
    assert result[0] is quoted.items[0]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car '(42 123 0))", 42),
        ("(car '((1 2) 3))", [1, 2]),
        ("(car '())", []),
        ("(cdr '(0 4 2))", QuotedList([4, 2])),
        ("(cdr '(1))", QuotedList()),
        ("(cdr '())", []),
        ("(car (cdr '(1 2 3)))", 2),
        ("(cdr (cdr '(1 2 3)))", QuotedList([3])),
    ]
)
def test_car_cdr(env, source, expected):
    assert run(source, env) == expected


@pytest.mark.parametrize("source", ["(car)", "(car '(1) '(2))", "(cdr)"])
def test_car_cdr_arity(env, source):
    with pytest.raises(LispArityError):
        run(source, env)


@pytest.mark.parametrize("source", ["(car 1)", "(cdr (+ 1 2))", "(car (car '((1))))"])
def test_car_cdr_require_quoted_list(env, source):
    with pytest.raises(LispTypeError, match="takes only a quoted list"):
        run(source, env)
