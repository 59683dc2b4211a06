import pytest

from qbscript.interpreter import Interpreter
from qbscript.types import Environment


@pytest.fixture
def env():
    """A fresh, empty evaluation environment."""
    return Environment()


@pytest.fixture
def interp():
    """A fresh interpreter session without prelude."""
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source in the session and return the printed form of the last value."""
    def _run(code: str) -> str:
        return str(interp.eval(code)[-1])
    return _run
