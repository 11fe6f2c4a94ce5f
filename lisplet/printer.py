"""External representation of Lisplet runtime values."""

from io import StringIO

from lisplet import LispValue
from lisplet.types.pair import Pair, EmptyType


def to_lisp_string(value: LispValue) -> str:
    """Render a runtime value the way it would be written in source."""
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if isinstance(value, EmptyType):
        return "()"
    if isinstance(value, Pair):
        return _pair_to_string(value)
    return str(value)


def _pair_to_string(value: Pair) -> str:
    with StringIO() as buffer:
        buffer.write("(")
        buffer.write(" ".join(to_lisp_string(item) for item in value))
        tail = value.tail
        while isinstance(tail, Pair):
            tail = tail.tail
        if not isinstance(tail, EmptyType):
            # Improper list
            buffer.write(" . ")
            buffer.write(to_lisp_string(tail))
        buffer.write(")")
        return buffer.getvalue()
