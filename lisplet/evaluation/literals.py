"""Literal grammar shared by the evaluator and quote."""

from __future__ import annotations

import re
from typing import Optional

TRUE_LITERAL = "#t"
FALSE_LITERAL = "#f"
ELSE_KEYWORD = "else"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_integer(text: str) -> Optional[int]:
    """Return the integer spelled by `text`, or None."""
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    return None
