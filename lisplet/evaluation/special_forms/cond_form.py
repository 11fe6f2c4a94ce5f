from lisplet import EvaluatorFn, LispValue, Node
from lisplet.types.environment import Environment
from lisplet.types.errors import BuildError, ExhaustedConditionalError
from lisplet.types.expression import Branch, Conditional


def build_cond(tail: list[Node], build_fn) -> Conditional:
    branches = []
    for clause in tail:
        if not isinstance(clause, list) or len(clause) != 2:
            raise BuildError(f"cond clause must be (question answer), got {clause!r}")
        question, answer = clause
        branches.append(Branch(build_fn(question), build_fn(answer)))
    return Conditional(tuple(branches))


def eval_cond(expr: Conditional, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # Only boolean true selects a branch; later questions are never evaluated
    for branch in expr.branches:
        if evaluate_fn(branch.question, env) is True:
            return evaluate_fn(branch.answer, env)
    raise ExhaustedConditionalError(f"No true question in {expr}")
