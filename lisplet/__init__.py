# Core type aliases for Lisplet's data model.
#
# Naming guidance:
# - Token:     a lexical unit, either a bracket marker or the text of an atom.
# - Node:      an element of the bracket skeleton: an atom's text or a nested list of Nodes.
# - LispValue: use in evaluator/runtime code to denote evaluated values
#              (int, bool, Symbol, Pair, Empty, Closure, Primitive).

from typing import Any, Callable, Union

Token = str

Node = Union[str, list]

# Runtime value alias
LispValue = Any

# Evaluator function type: passed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
