import pytest
from hypothesis import given, strategies as st

from lisplet.reader.lexer import tokenize
from lisplet.reader.parser import parse, parse_one, unparse
from lisplet.types.errors import StructuralError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", ["a"]),
        ("(a b c)", ["(", "a", "b", "c", ")"]),
        ("  (incr\t7)\n", ["(", "incr", "7", ")"]),
        ("(a(b)c)", ["(", "a", "(", "b", ")", "c", ")"]),
        ("(zero? -12)", ["(", "zero?", "-12", ")"]),
        ("foo", ["foo"]),
        ("x\r\ny", ["x", "y"]),
        ("", []),
        ("   ", []),
        ("#t #f", ["#t", "#f"]),
    ]
)
def test_lexer_basic(source, expected):
    assert tokenize(source) == expected


def test_lexer_flushes_trailing_symbol():
    assert tokenize("(a) trailing") == ["(", "a", ")", "trailing"]


def test_lexer_end_to_end_example():
    assert tokenize("((lambda (x) (incr x)) 7)") == [
        "(", "(", "lambda", "(", "x", ")", "(", "incr", "x", ")", ")", "7", ")"
    ]


@pytest.mark.parametrize(
    "source, expected",
    [
        ("a", ["a"]),
        ("()", [[]]),
        ("(a b c)", [["a", "b", "c"]]),
        ("((a b) (c d))", [[["a", "b"], ["c", "d"]]]),
        ("(a (b (c)))", [["a", ["b", ["c"]]]]),
        ("a b", ["a", "b"]),
        ("(a) (b)", [["a"], ["b"]]),
    ]
)
def test_parser(source, expected):
    assert parse(tokenize(source)) == expected


@pytest.mark.parametrize("source", ["(incr 1", "(", "((a)", "(a (b)"])
def test_unmatched_open_bracket(source):
    with pytest.raises(StructuralError):
        parse(tokenize(source))


@pytest.mark.parametrize("source", [")", "(a))", "a)", ")("])
def test_unmatched_close_bracket(source):
    with pytest.raises(StructuralError):
        parse(tokenize(source))


def test_parse_one_requires_single_expression():
    assert parse_one(tokenize("(a b)")) == ["a", "b"]
    with pytest.raises(StructuralError):
        parse_one(tokenize(""))
    with pytest.raises(StructuralError):
        parse_one(tokenize("(a) (b)"))


def test_unparse():
    assert unparse(["a", ["b", "c"], []]) == "(a (b c) ())"
    assert unparse("atom") == "atom"


# -------------------------------
# Hypothesis strategies
# -------------------------------
atom_strat = st.text(alphabet="abcxyz0123456789?#-+!*", min_size=1, max_size=6)

sexpr_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=4),
    max_leaves=20,
)

whitespace_strat = st.sampled_from([" ", "  ", "\t", "\n", " \r\n "])


def _to_source(expr, draw_ws):
    """Render a nested list with arbitrary whitespace between elements."""
    if isinstance(expr, list):
        inner = draw_ws().join(_to_source(e, draw_ws) for e in expr)
        return f"({draw_ws()}{inner}{draw_ws()})"
    return expr


@given(sexpr_strat, st.data())
def test_parse_yields_single_structure(sexpr, data):
    source = _to_source(sexpr, lambda: data.draw(whitespace_strat))
    assert parse(tokenize(source)) == [sexpr]


@given(sexpr_strat, st.data())
def test_unparse_reproduces_tokens(sexpr, data):
    source = _to_source(sexpr, lambda: data.draw(whitespace_strat))
    tokens = tokenize(source)
    assert tokenize(unparse(parse_one(tokens))) == tokens
