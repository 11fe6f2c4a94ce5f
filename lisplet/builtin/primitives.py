"""Built-in operations for the Lisplet runtime.

Each primitive takes the list of evaluated arguments. `PRIMITIVES` maps every
member of the closed `Primitive` set to its arity and implementation.
"""
from __future__ import annotations
from typing import Callable

from lisplet import LispValue
from lisplet.types.errors import ArityError, LispTypeError, UnknownPrimitiveError
from lisplet.types.pair import Pair, Empty
from lisplet.types.primitive import Primitive


def is_number(value: LispValue) -> bool:
    """Integers only; booleans are not numbers."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Value equality that keeps booleans and integers apart."""
    if a is b:
        return True
    if type(a) != type(b):
        return False
    if isinstance(a, Pair):
        return is_equal(a.head, b.head) and is_equal(a.tail, b.tail)
    return a == b


def _integer(op: Primitive, value: LispValue) -> int:
    if not is_number(value):
        raise LispTypeError(f"{op.value} expects a number, got {value!r}")
    return value


def cons(args: list[LispValue]) -> Pair:
    return Pair(args[0], args[1])


def cdr(args: list[LispValue]) -> LispValue:
    """Second component of a Pair."""
    p = args[0]
    if not isinstance(p, Pair):
        raise LispTypeError(f"cdr expects a pair, got {p!r}")
    return p.tail


def is_null(args: list[LispValue]) -> bool:
    return args[0] is Empty


def eq(args: list[LispValue]) -> bool:
    return is_equal(args[0], args[1])


def is_atom(args: list[LispValue]) -> bool:
    return not isinstance(args[0], Pair)


def is_zero(args: list[LispValue]) -> bool:
    return _integer(Primitive.IS_ZERO, args[0]) == 0


def incr(args: list[LispValue]) -> int:
    return _integer(Primitive.INCR, args[0]) + 1


def decr(args: list[LispValue]) -> int:
    return _integer(Primitive.DECR, args[0]) - 1


def number_p(args: list[LispValue]) -> bool:
    return is_number(args[0])


PRIMITIVES: dict[Primitive, tuple[int, Callable[[list[LispValue]], LispValue]]] = {
    Primitive.CONS: (2, cons),
    Primitive.CDR: (1, cdr),
    Primitive.IS_NULL: (1, is_null),
    Primitive.EQ: (2, eq),
    Primitive.IS_ATOM: (1, is_atom),
    Primitive.IS_ZERO: (1, is_zero),
    Primitive.INCR: (1, incr),
    Primitive.DECR: (1, decr),
    Primitive.IS_NUMBER: (1, number_p),
}


def call_primitive(
    op: Primitive,
    args: list[LispValue],
    table: dict[Primitive, tuple[int, Callable[[list[LispValue]], LispValue]]] = PRIMITIVES,
) -> LispValue:
    """Dispatch `op` over already-evaluated `args`."""
    entry = table.get(op)
    if entry is None:
        raise UnknownPrimitiveError(f"Unknown primitive: {op.value}")
    arity, fn = entry
    if len(args) != arity:
        raise ArityError(f"{op.value} expects {arity} argument(s), got {len(args)}")
    return fn(args)
