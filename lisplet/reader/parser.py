"""
  Structural parser: tokens to a bracket skeleton.

- No semantic interpretation; atoms stay as their token text.
- One nested Python list per matched bracket pair.
- Works by stack reduction over a single accumulator: an open bracket pushes
  a marker, a close bracket folds everything after the latest marker into a
  nested list.
"""

from __future__ import annotations

import logging
from typing import Iterable

from lisplet import Node, Token
from lisplet.reader.lexer import OPEN, CLOSE
from lisplet.types.errors import StructuralError

logger = logging.getLogger(__name__)


class _OpenMarker:
    __slots__ = ("position",)

    def __init__(self, position: int):
        # Token index, for error messages
        self.position = position

    def __repr__(self):
        return "<(>"


def _last_open(stack: list) -> int:
    for i in range(len(stack) - 1, -1, -1):
        if isinstance(stack[i], _OpenMarker):
            return i
    return -1


def parse(tokens: Iterable[Token]) -> list[Node]:
    """Group `tokens` by brackets.

    Raises StructuralError on a close bracket with no open bracket, and on an
    open bracket still unmatched at end of input.
    """
    stack: list = []
    for position, token in enumerate(tokens):
        if token == OPEN:
            stack.append(_OpenMarker(position))
        elif token == CLOSE:
            start = _last_open(stack)
            if start == -1:
                raise StructuralError(f"Unmatched ')' at token {position}")
            group = stack[start + 1:]
            del stack[start:]
            stack.append(group)
        else:
            stack.append(token)

    start = _last_open(stack)
    if start != -1:
        raise StructuralError(f"Unmatched '(' at token {stack[start].position}")

    logger.debug("parsed %d top-level element(s)", len(stack))
    return stack


def parse_one(tokens: Iterable[Token]) -> Node:
    """Parse tokens holding exactly one top-level expression."""
    nodes = parse(tokens)
    if not nodes:
        raise StructuralError("Empty input: expected one expression")
    if len(nodes) > 1:
        raise StructuralError(f"Expected one top-level expression, found {len(nodes)}")
    return nodes[0]


def unparse(node: Node) -> str:
    """Re-serialize a skeleton: atoms joined by single spaces inside brackets."""
    if isinstance(node, list):
        return f"({' '.join(unparse(n) for n in node)})"
    return node
