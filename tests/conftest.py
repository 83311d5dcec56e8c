import pytest

from malt.builtin.env_builtin import register
from malt.evaluation.evaluator import evaluate
from malt.interpreter import Interpreter
from malt.reader.parser import read_str
from malt.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Read and evaluate one line of source in the shared `env` fixture."""

    def _run(source):
        parsed = read_str(source)
        if parsed.is_error:
            return parsed
        return evaluate(parsed.value, env)

    return _run
