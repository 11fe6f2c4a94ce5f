from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from lisplet import LispValue, Node, Token
from lisplet.config import get_recursion_limit
from lisplet.evaluation.evaluator import evaluate
from lisplet.reader.builder import build
from lisplet.reader.lexer import tokenize
from lisplet.reader.parser import parse_one
from lisplet.types.environment import Environment
from lisplet.types.errors import EvaluationDepthError, LispletError
from lisplet.types.expression import Expression

logger = logging.getLogger(__name__)


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """Raise the host recursion limit to at least `limit` for the duration of the block."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, limit))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def _excerpt(code: str, width: int = 60) -> str:
    text = " ".join(code.split())
    return text if len(text) <= width else text[:width - 3] + "..."


class Interpreter:
    """
    Runs the pipeline (tokenize, parse, build, evaluate) on one source text.
    The initial Environment is never modified, so no state carries over
    between calls to `eval`.
    """

    def __init__(
        self,
        bindings: Optional[Mapping[str, LispValue]] = None,
        *,
        max_recursion: Optional[int] = None,
    ):
        self.env: Environment = Environment(bindings)
        self.max_recursion: int = max_recursion or get_recursion_limit()

    def tokenize(self, code: str) -> list[Token]:
        return tokenize(code)

    def read(self, code: str) -> Node:
        """Tokenize and parse exactly one top-level expression."""
        node = parse_one(self.tokenize(code))
        logger.debug("structure: %r", node)
        return node

    def build(self, code: str) -> Expression:
        expr = build(self.read(code))
        logger.debug("ast: %s", expr)
        return expr

    def eval(self, code: str) -> LispValue:
        try:
            with recursion_limit(self.max_recursion):
                expr = self.build(code)
                result = evaluate(expr, self.env)
                logger.debug("result: %r", result)
        except RecursionError as e:
            logger.debug("evaluation of %s exhausted the stack", _excerpt(code))
            raise EvaluationDepthError(f"Recursion too deep while evaluating {_excerpt(code)}") from e
        except LispletError as e:
            logger.debug("evaluation of %s failed: %s", _excerpt(code), e)
            raise
        return result
