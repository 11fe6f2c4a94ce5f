"""AST builder: bracket skeleton to a typed Expression tree.

Atoms become Literals. A nested list whose head is a special-form keyword is
handed to that form's builder; any other nested list is an Application.
"""

from __future__ import annotations

import logging

from lisplet import Node
from lisplet.evaluation.special_forms import SPECIAL_FORMS
from lisplet.types.errors import BuildError
from lisplet.types.expression import Application, Expression, Literal

logger = logging.getLogger(__name__)


def build(node: Node) -> Expression:
    """Build an Expression from one skeleton node. Raises BuildError on malformed forms."""
    if not isinstance(node, list):
        return Literal(node)
    if not node:
        raise BuildError("Empty application: ()")

    head, *tail = node
    if isinstance(head, str) and head in SPECIAL_FORMS:
        return SPECIAL_FORMS[head](tail, build)
    return Application(build(head), tuple([build(n) for n in tail]))
