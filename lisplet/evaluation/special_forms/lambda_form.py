from lisplet import Node
from lisplet.types.closure import Closure
from lisplet.types.environment import Environment
from lisplet.types.errors import BuildError
from lisplet.types.expression import Lambda


def build_lambda(tail: list[Node], build_fn) -> Lambda:
    # (lambda (params) body): exactly one body expression
    if len(tail) != 2:
        raise BuildError("lambda expects a parameter list and exactly 1 body expression")

    params, body = tail
    if not isinstance(params, list):
        raise BuildError(f"lambda parameters must be a list, got {params!r}")
    for p in params:
        if isinstance(p, list):
            raise BuildError(f"lambda parameter must be a name, got {p!r}")
    if len(set(params)) != len(params):
        raise BuildError(f"Duplicate lambda parameter in {params!r}")

    return Lambda(tuple(params), build_fn(body))


def eval_lambda(expr: Lambda, env: Environment) -> Closure:
    return Closure(expr.params, expr.body, env)
