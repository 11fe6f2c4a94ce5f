"""Application engine for Lisplet.

Applies an evaluated function-position value to already-evaluated arguments:
- Primitives dispatch through the fixed primitive table.
- Closures bind their formals in a new frame in front of the environment they
  captured (not the caller's), then evaluate their body.
"""

from lisplet import LispValue, EvaluatorFn
from lisplet.builtin.primitives import call_primitive
from lisplet.printer import to_lisp_string
from lisplet.types.closure import Closure
from lisplet.types.errors import UncallableError
from lisplet.types.primitive import Primitive


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Primitive or a Closure; anything else is an UncallableError."""
    if isinstance(head, Primitive):
        return call_primitive(head, args)
    elif isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    else:
        raise UncallableError(f"Cannot apply non-function {to_lisp_string(head)}")
