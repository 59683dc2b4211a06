from qbscript import EvaluatorFn, Node, Value
from qbscript.types.atom import Number
from qbscript.types.elem import Atom, Call
from qbscript.types.environment import Environment


def add_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    """(add a b ...) sums the Number operands; other operands are skipped."""
    total = 0
    for expr in tail:
        value = evaluate_fn(expr, env)
        if isinstance(value, Atom) and isinstance(value.atom, Number):
            total += value.atom.value
    return Atom(Number(total))
