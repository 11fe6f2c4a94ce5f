"""Tree-walking evaluator for Lisplet.

Dispatches on the Expression node class. Sub-expressions and closure bodies
re-enter `evaluate` recursively; there is no tail-call elimination, so very
deep recursion is bounded by the host stack.
"""

from __future__ import annotations

from lisplet import LispValue
from lisplet.evaluation.apply import apply
from lisplet.evaluation.literals import TRUE_LITERAL, FALSE_LITERAL, ELSE_KEYWORD, parse_integer
from lisplet.evaluation.special_forms.cond_form import eval_cond
from lisplet.evaluation.special_forms.lambda_form import eval_lambda
from lisplet.evaluation.special_forms.quote_form import eval_quote
from lisplet.types.environment import Environment
from lisplet.types.errors import BuildError, LispletError, UnboundIdentifierError
from lisplet.types.expression import (
    Application,
    Conditional,
    EmptyList,
    Expression,
    Identifier,
    Lambda,
    Literal,
    Quote,
)
from lisplet.types.primitive import Primitive


def evaluate_literal(text: str, env: Environment) -> LispValue:
    """Resolve atom text.

    Order of resolution:
    1) Environment chain, innermost frame first
    2) Integer
    3) #t or else -> True, #f -> False
    4) Primitive name
    Raises UnboundIdentifierError if nothing matches.
    """
    frame_env = env.find(text)
    if frame_env is not None:
        return frame_env.vars[text]
    n = parse_integer(text)
    if n is not None:
        return n
    if text == TRUE_LITERAL or text == ELSE_KEYWORD:
        return True
    if text == FALSE_LITERAL:
        return False
    prim = Primitive.named(text)
    if prim is not None:
        return prim
    raise UnboundIdentifierError(text)


def evaluate(expr: Expression, env: Environment | None = None) -> LispValue:
    """Evaluate `expr` against `env` (an empty environment if omitted)."""
    if env is None:
        env = Environment()

    match expr:
        case Literal(text=text):
            return evaluate_literal(text, env)
        case Identifier(name=name):
            return env.lookup(name)
        case Quote():
            return eval_quote(expr)
        case Conditional():
            return eval_cond(expr, env, evaluate)
        case Lambda():
            return eval_lambda(expr, env)
        case Application(func=func, args=args):
            head = evaluate(func, env)
            values = [evaluate(arg, env) for arg in args]
            return apply(head, values, evaluate)
        case EmptyList():
            raise BuildError("() is only valid as quoted data")

    raise LispletError(f"Cannot evaluate {expr!r}")
