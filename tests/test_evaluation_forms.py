import pytest

from tinylisp.errors import LispArityError, LispTypeError
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.lexer import lex
from tinylisp.reader.parser import Parser
from tinylisp.types.boolean import T, F


def run(source, env):
    result = None
    for expr in Parser(lex(source)).parse_all():
        result = evaluate(expr, env)
    return result


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 7 7)", T),
        ("(= 7 13)", F),
        ("(= 1 1 1)", T),
        ("(= 1 1 2)", F),
        ("(< 1 2 3)", T),
        ("(< 1 3 2)", F),
        ("(<= 1 1 2)", T),
        ("(> 3 2 1)", T),
        ("(> 3 3)", F),
        ("(>= 3 3 1)", T),
        ("(/= 1 2)", T),
        ("(/= 1 1)", F),
        ("(/= 1 2 1)", T),
        ("(= 5)", T),
        ("(< (- 0 1) 0)", T),
    ]
)
def test_comparisons(env, source, expected):
    assert run(source, env) is expected


@pytest.mark.parametrize("source", ["(=)", "(<)", "(/=)"])
def test_comparison_empty_argument(env, source):
    with pytest.raises(LispArityError, match="empty argument"):
        run(source, env)


def test_comparison_requires_integers(env):
    with pytest.raises(LispTypeError):
        run("(= 1 '(1))", env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if (= 7 7) 42 99)", 42),
        ("(if (= 7 13) 42 99)", 99),
        ("(if (= 1 1) 5)", 5),
        ("(if (= 1 2) 5)", []),
        ("(if (< 1 2) (+ 1 1) (undefined-fn))", 2),
        ("(if (> 1 2) (undefined-fn) (* 3 3))", 9),
    ]
)
def test_if(env, source, expected):
    assert run(source, env) == expected


@pytest.mark.parametrize("source", ["(if (= 1 1))", "(if)", "(if (= 1 1) 1 2 3)"])
def test_if_arity(env, source):
    with pytest.raises(LispArityError):
        run(source, env)


@pytest.mark.parametrize("source", ["(if 1 2 3)", "(if '(1) 2 3)", "(if x 2 3)"])
def test_if_condition_must_be_boolean(env, source):
    with pytest.raises(LispTypeError, match="must be #t or #f"):
        run(source, env)
