import io

import pytest

from tau.builtin.env_builtin import register
from tau.interpreter import Interpreter
from tau.types.environment import Environment


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running loops; deselect with -m \"not slow\"")


@pytest.fixture
def output():
    """Captures what prn/println write."""
    return io.StringIO()


@pytest.fixture
def interp(output):
    """A fresh interpreter per test, printing into `output`."""
    return Interpreter(output=output)


@pytest.fixture
def env():
    """Fresh environment with the core builtins loaded."""
    e = Environment(name="repl")
    register(e)
    return e
