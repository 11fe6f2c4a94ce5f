"""Cons cells for Lisplet.

A Pair is an immutable 2-tuple of runtime values. Proper lists are chains of
Pairs whose last tail is the empty-list marker `Empty`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from lisplet import LispValue


class EmptyType:
    """The empty-list marker. There is exactly one instance, `Empty`."""

    _instance: EmptyType | None = None

    def __new__(cls) -> EmptyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"

    def __eq__(self, other):
        return isinstance(other, EmptyType)

    def __hash__(self):
        return hash(EmptyType)


Empty = EmptyType()


@dataclass(frozen=True)
class Pair:
    head: LispValue
    tail: LispValue

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate the heads of a (possibly improper) list, stopping at the first non-Pair tail."""
        cell: LispValue = self
        while isinstance(cell, Pair):
            yield cell.head
            cell = cell.tail


def from_iterable(items: Iterable[LispValue]) -> LispValue:
    """Build a proper list from `items`; an empty iterable gives `Empty`."""
    result: LispValue = Empty
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result

