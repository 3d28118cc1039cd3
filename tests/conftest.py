import pytest

from tinylisp.interpreter import Interpreter
from tinylisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with a single top-level frame."""
    return Environment()


@pytest.fixture
def interp():
    """Fresh session; bindings persist across eval_line calls within a test."""
    return Interpreter()
