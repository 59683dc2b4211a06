"""List-structure forms: cons, append, list, head, tail.

A Call operand is treated as a sequence just like a List; results are always
Lists.
"""

from qbscript import EvaluatorFn, Node, Value
from qbscript.errors import QbArityError
from qbscript.types.elem import Call, FALSE, List, is_sequence
from qbscript.types.environment import Environment


def cons_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    """(cons a b) prepends a to the items of b, or pairs them if b is not a sequence."""
    if len(tail) < 2:
        raise QbArityError("cons requires 2 operands")
    first = evaluate_fn(tail[0], env)
    rest = evaluate_fn(tail[1], env)
    if is_sequence(rest):
        return List((first,) + rest.items)
    return List((first, rest))


def append_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    """(append a b) appends b to the items of a, or pairs them if a is not a sequence."""
    if len(tail) < 2:
        raise QbArityError("append requires 2 operands")
    init = evaluate_fn(tail[0], env)
    last = evaluate_fn(tail[1], env)
    if is_sequence(init):
        return List(init.items + (last,))
    return List((init, last))


def list_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    return List(evaluate_fn(item, env) for item in tail)


def head_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    if not tail:
        raise QbArityError("head requires 1 operand")
    seq = evaluate_fn(tail[0], env)
    if is_sequence(seq) and seq.items:
        return seq.items[0]
    return FALSE


def tail_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    if not tail:
        raise QbArityError("tail requires 1 operand")
    seq = evaluate_fn(tail[0], env)
    if is_sequence(seq) and seq.items:
        return List(seq.items[1:])
    return FALSE
