"""Expression tree for Lisplet.

The builder turns the bracket skeleton into these nodes; the evaluator
dispatches on the node class. Every node renders back to source text via
`str()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    """Raw atom text, resolved at evaluation time."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Identifier:
    """A name resolved purely by environment lookup. The builder does not emit it."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Quote:
    datum: Expression

    def __str__(self) -> str:
        return f"(quote {self.datum})"


@dataclass(frozen=True)
class Branch:
    question: Expression
    answer: Expression

    def __str__(self) -> str:
        return f"({self.question} {self.answer})"


@dataclass(frozen=True)
class Conditional:
    branches: tuple[Branch, ...]

    def __str__(self) -> str:
        if not self.branches:
            return "(cond)"
        return f"(cond {' '.join(str(b) for b in self.branches)})"


@dataclass(frozen=True)
class Lambda:
    params: tuple[str, ...]
    body: Expression

    def __str__(self) -> str:
        return f"(lambda ({' '.join(self.params)}) {self.body})"


@dataclass(frozen=True)
class Application:
    func: Expression
    args: tuple[Expression, ...]

    def __str__(self) -> str:
        return f"({' '.join(str(e) for e in (self.func, *self.args))})"


@dataclass(frozen=True)
class EmptyList:
    """The `()` skeleton. Only meaningful as quoted data."""

    def __str__(self) -> str:
        return "()"


Expression = Union[Literal, Identifier, Quote, Conditional, Lambda, Application, EmptyList]
