from __future__ import annotations

from enum import Enum
from typing import Optional


class Primitive(Enum):
    """The closed set of built-in operations, identified by name."""

    CONS = "cons"
    CDR = "cdr"
    IS_NULL = "null?"
    EQ = "eq?"
    IS_ATOM = "atom?"
    IS_ZERO = "zero?"
    INCR = "incr"
    DECR = "decr"
    IS_NUMBER = "number?"

    @classmethod
    def named(cls, name: str) -> Optional[Primitive]:
        return _BY_NAME.get(name)

    def __str__(self) -> str:
        return f"#<primitive {self.value}>"


_BY_NAME = {p.value: p for p in Primitive}
