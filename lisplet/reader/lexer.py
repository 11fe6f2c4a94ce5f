"""Lexer: source text to a flat sequence of tokens.

Brackets are tokens of their own; every other run of non-whitespace
characters is one atom token. Whitespace only separates.
"""

from __future__ import annotations

import logging

from lisplet import Token

logger = logging.getLogger(__name__)

OPEN: Token = "("
CLOSE: Token = ")"
WHITESPACE = frozenset(" \t\n\r")


def tokenize(text: str) -> list[Token]:
    """Split `text` into bracket and atom tokens, in source order."""
    tokens: list[Token] = []
    buf: list[str] = []

    def flush() -> None:
        if buf:
            tokens.append("".join(buf))
            buf.clear()

    for c in text:
        if c == OPEN or c == CLOSE:
            flush()
            tokens.append(c)
        elif c in WHITESPACE:
            flush()
        else:
            buf.append(c)
    flush()

    logger.debug("tokenized %d chars into %d tokens", len(text), len(tokens))
    return tokens
