"""Closure representation and argument binding for Lisplet."""

from __future__ import annotations

from io import StringIO

from lisplet import LispValue
from lisplet.types.environment import Environment
from lisplet.types.expression import Expression
from lisplet.types.errors import ArityError


class Closure:
    """A lambda's runtime value: formal parameters, body, and the defining environment."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[str, ...], body: Expression, env: Environment):
        self.params: tuple[str, ...] = params
        self.body: Expression = body
        # Aliased, not copied
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<closure (")
            buffer.write(" ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Closure({self.params!r}, {str(self.body)!r})"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` to the formals in a new frame in front of the captured environment."""
        if len(args) != len(self.params):
            raise ArityError(
                f"{self} expects {len(self.params)} argument(s), got {len(args)}"
            )
        return self.env.extend(dict(zip(self.params, args)))
