import pytest

from lisplet.reader.builder import build
from lisplet.types.errors import BuildError
from lisplet.types.expression import (
    Application,
    Branch,
    Conditional,
    EmptyList,
    Lambda,
    Literal,
    Quote,
)


def test_atom_is_literal():
    assert build("42") == Literal("42")
    assert build("foo") == Literal("foo")


def test_end_to_end_example_ast(read_expr):
    expr = read_expr("((lambda (x) (incr x)) 7)")
    assert expr == Application(
        Lambda(("x",), Application(Literal("incr"), (Literal("x"),))),
        (Literal("7"),),
    )


def test_cond_branches(read_expr):
    expr = read_expr("(cond ((zero? x) y) (else 1))")
    assert expr == Conditional((
        Branch(Application(Literal("zero?"), (Literal("x"),)), Literal("y")),
        Branch(Literal("else"), Literal("1")),
    ))


def test_quote_does_not_interpret_keywords(read_expr):
    assert read_expr("(quote (lambda x))") == Quote(
        Application(Literal("lambda"), (Literal("x"),))
    )
    assert read_expr("(quote ())") == Quote(EmptyList())


def test_non_keyword_head_is_application(read_expr):
    assert read_expr("((f) 1)") == Application(
        Application(Literal("f"), ()), (Literal("1"),)
    )
    assert read_expr("(foo)") == Application(Literal("foo"), ())


def test_lambda_without_params(read_expr):
    assert read_expr("(lambda () 1)") == Lambda((), Literal("1"))


@pytest.mark.parametrize(
    "source",
    [
        "(x y (incr x))",
        "(lambda (x) (incr x))",
        "(cond ((zero? n) #t) (else (f (decr n))))",
        "(quote (a b (c)))",
        "((lambda (le) ((lambda (f) (f f)) (lambda (f) (le f)))) 1 2)",
    ]
)
def test_expression_renders_back_to_source(read_expr, source):
    assert str(read_expr(source)) == source


@pytest.mark.parametrize(
    "source",
    [
        "()",
        "(incr ())",
        "(quote)",
        "(quote a b)",
        "(cond x)",
        "(cond (a))",
        "(cond (a b c))",
        "(lambda (x))",
        "(lambda x x)",
        "(lambda (x) x x)",
        "(lambda ((x)) x)",
        "(lambda (x x) x)",
        "(lambda)",
    ]
)
def test_malformed_forms(read_expr, source):
    with pytest.raises(BuildError):
        read_expr(source)
