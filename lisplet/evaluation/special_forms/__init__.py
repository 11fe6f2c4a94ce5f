"""Registry of special forms for Lisplet.

Maps head keywords to builder functions. The AST builder consults this table
before falling back to an ordinary application; the evaluator dispatches the
resulting node classes to the matching evaluation half in each form module.
"""

from lisplet.evaluation.special_forms.quote_form import build_quote
from lisplet.evaluation.special_forms.cond_form import build_cond
from lisplet.evaluation.special_forms.lambda_form import build_lambda

SPECIAL_FORMS = {
    "quote": build_quote,
    "cond": build_cond,
    "lambda": build_lambda,
}
