"""Runtime environment for Lisplet.

An Environment is an immutable chain of frames. Each frame maps names to
evaluated Lisp values. Lookup searches the innermost (most recently pushed)
frame first and falls through to enclosing frames, which realizes lexical
scoping and shadowing. New scopes are new frames layered in front; frames are
never mutated after creation, so closures may alias a captured Environment
freely.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from lisplet import LispValue
from lisplet.types.errors import UnboundIdentifierError


class Environment:
    """Frame chain from names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        bindings: Optional[Mapping[str, LispValue]] = None,
        outer: Optional[Environment] = None,
    ):
        self.vars: Mapping[str, LispValue] = MappingProxyType(dict(bindings or {}))
        self.outer: Environment | None = outer

    @classmethod
    def from_bindings(cls, **bindings: LispValue) -> Environment:
        """Create a top-level environment with a single frame."""
        return cls(bindings)

    def extend(self, bindings: Mapping[str, LispValue]) -> Environment:
        """Return a new environment with `bindings` pushed in front of this one."""
        return Environment(bindings, outer=self)

    def frames(self) -> Iterator[Mapping[str, LispValue]]:
        """Yield frames innermost first."""
        env: Optional[Environment] = self
        while env is not None:
            yield env.vars
            env = env.outer

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`.

        Raises UnboundIdentifierError if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundIdentifierError(name)
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        """Number of frames in the chain."""
        return sum(1 for _ in self.frames())

    def _write_vars(self, buffer: StringIO, frame: Mapping[str, LispValue]) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in frame.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer, self.vars)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for frame in self.frames():
                env_buf = StringIO()
                self._write_vars(env_buf, frame)
                chain.append(env_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
