from lisplet import LispValue, Node
from lisplet.evaluation.literals import TRUE_LITERAL, FALSE_LITERAL, parse_integer
from lisplet.types.errors import BuildError
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
from lisplet.types.pair import Empty, from_iterable
from lisplet.types.symbol import Symbol


def build_datum(node: Node) -> Expression:
    """Build quoted data. Special-form keywords are not interpreted here."""
    if not isinstance(node, list):
        return Literal(node)
    if not node:
        return EmptyList()
    head, *rest = node
    return Application(build_datum(head), tuple([build_datum(n) for n in rest]))


def build_quote(tail: list[Node], build_fn) -> Quote:
    if len(tail) != 1:
        raise BuildError("quote expects exactly 1 argument")
    return Quote(build_datum(tail[0]))


def atom_value(text: str) -> LispValue:
    n = parse_integer(text)
    if n is not None:
        return n
    if text == TRUE_LITERAL:
        return True
    if text == FALSE_LITERAL:
        return False
    return Symbol(text)


def datum_value(expr: Expression) -> LispValue:
    """Turn a quoted expression into a runtime value: atoms, or lists of Pairs."""
    match expr:
        case Literal(text=text):
            return atom_value(text)
        case Identifier(name=name):
            return Symbol(name)
        case EmptyList():
            return Empty
        case Application(func=func, args=args):
            return from_iterable([datum_value(func), *(datum_value(a) for a in args)])
        case Quote(datum=datum):
            return from_iterable([Symbol("quote"), datum_value(datum)])
        case Lambda(params=params, body=body):
            return from_iterable([
                Symbol("lambda"),
                from_iterable(Symbol(p) for p in params),
                datum_value(body),
            ])
        case Conditional(branches=branches):
            return from_iterable([
                Symbol("cond"),
                *(from_iterable([datum_value(b.question), datum_value(b.answer)]) for b in branches),
            ])
    raise BuildError(f"Cannot quote {expr!r}")


def eval_quote(expr: Quote) -> LispValue:
    return datum_value(expr.datum)
