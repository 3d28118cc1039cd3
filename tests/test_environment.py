import pytest

from tinylisp.errors import EnvironmentStackError, LispError
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol


def test_new_environment_has_one_empty_frame(env):
    assert len(env) == 1
    assert env.lookup("x") is None


def test_bind_and_lookup(env):
    env.bind("x", 42)
    assert env.lookup("x") == 42
    env.bind("x", 7)
    assert env.lookup("x") == 7


def test_lookup_scans_innermost_first(env):
    env.bind("x", 1)
    env.bind("y", 2)
    env.push_frame()
    env.bind("x", 10)
    assert env.lookup("x") == 10
    assert env.lookup("y") == 2
    env.pop_frame()
    assert env.lookup("x") == 1


def test_bind_targets_innermost_frame_only(env):
    env.bind("x", 1)
    env.push_frame()
    env.bind("x", 2)
    assert env.frames[0] == {"x": 1}
    assert env.frames[1] == {"x": 2}


def test_unbind_removes_from_innermost_frame_only(env):
    env.bind("x", 1)
    env.push_frame()
    env.bind("x", 2)
    env.unbind("x")
    assert env.lookup("x") == 1
    env.unbind("x")  # absent in the innermost frame: no-op
    assert env.lookup("x") == 1


def test_bound_values_are_shared_not_copied(env):
    body = [Symbol("+"), 1, 2]
    env.bind("f", body)
    assert env.lookup("f") is body


def test_frame_context_pops_on_error(env):
    with pytest.raises(ValueError):
        with env.frame():
            env.bind("tmp", 1)
            raise ValueError("boom")
    assert len(env) == 1
    assert env.lookup("tmp") is None


@pytest.mark.parametrize("operation", [
    lambda e: e.bind("x", 1),
    lambda e: e.unbind("x"),
    lambda e: e.pop_frame(),
])
def test_empty_stack_is_an_internal_fault(operation):
    e = Environment()
    e.pop_frame()
    with pytest.raises(EnvironmentStackError) as excinfo:
        operation(e)
    assert not isinstance(excinfo.value, LispError)


def test_push_frame_allowed_on_empty_stack():
    e = Environment()
    e.pop_frame()
    e.push_frame()
    e.bind("x", 1)
    assert e.lookup("x") == 1


def test_max_depth_from_argument_and_environment_variable(monkeypatch):
    assert Environment(max_depth=5).max_depth == 5
    monkeypatch.setenv("TINYLISP_MAX_DEPTH", "33")
    assert Environment().max_depth == 33


def test_str_and_repr(env):
    env.bind("x", 1)
    env.push_frame()
    env.bind("y", 2)
    assert str(env) == "{y: 2} -> ..."
    assert repr(env) == "<Environment frames: {y: 2} -> {x: 1}>"
