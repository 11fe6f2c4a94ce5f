import pytest

from lisplet.interpreter import Interpreter
from lisplet.reader.builder import build
from lisplet.reader.lexer import tokenize
from lisplet.reader.parser import parse_one


@pytest.fixture
def interp():
    """Interpreter with an empty initial environment."""
    return Interpreter()


@pytest.fixture
def read_expr():
    """Source text -> Expression, without evaluating."""
    def _read(source):
        return build(parse_one(tokenize(source)))
    return _read
