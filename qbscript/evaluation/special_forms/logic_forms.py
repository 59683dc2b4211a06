"""Predicates and conditionals.

Two truthiness rules live side by side and are both intentional:

- `not` looks only at emptiness: an empty Call/List is true, anything else
  (a non-empty sequence, any Atom or Single) is false.
- `if` and `cond` look only at kind: an Atom or Single of any value is true,
  a Call/List is false even when empty.

Predicates answer with TRUE (`#t`) or FALSE (`[]`).
"""

from qbscript import EvaluatorFn, Node, Value
from qbscript.errors import QbArityError
from qbscript.types.elem import Call, FALSE, List, TRUE, boolean, is_atomic, is_sequence
from qbscript.types.environment import Environment


def negate(value: Value) -> Value:
    """The `not` rule: true only for an empty Call/List."""
    if is_sequence(value) and not value.items:
        return TRUE
    return FALSE


def atom_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    if not tail:
        raise QbArityError("atom requires 1 operand")
    return boolean(is_atomic(evaluate_fn(tail[0], env)))


def not_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    if not tail:
        raise QbArityError("not requires 1 operand")
    return negate(evaluate_fn(tail[0], env))


def eq_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    """(eq a b) compares two atoms by kind and payload; any sequence operand gives false."""
    if len(tail) < 2:
        raise QbArityError("eq requires 2 operands")
    a = evaluate_fn(tail[0], env)
    b = evaluate_fn(tail[1], env)
    if is_atomic(a) and is_atomic(b):
        return boolean(a.atom == b.atom)
    return FALSE


def ne_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    """(ne a b) is false, not true, when either operand is a sequence."""
    if len(tail) < 2:
        raise QbArityError("ne requires 2 operands")
    a = evaluate_fn(tail[0], env)
    b = evaluate_fn(tail[1], env)
    if is_atomic(a) and is_atomic(b):
        return boolean(a.atom != b.atom)
    return FALSE


def if_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    if not tail:
        raise QbArityError("if requires a condition, a then-expression and an else-expression")

    cond = evaluate_fn(tail[0], env)
    if len(tail) < 3:
        raise QbArityError("if requires a condition, a then-expression and an else-expression")

    if is_atomic(cond):
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)


def cond_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    """(cond [test result] ...) evaluates the result of the first atomic test.

    Clauses that are not Lists are skipped. Returns FALSE when nothing matches.
    """
    for clause in tail:
        if not isinstance(clause, List):
            continue
        if not clause.items:
            raise QbArityError("cond clause requires a test")
        if is_atomic(evaluate_fn(clause.items[0], env)):
            if len(clause.items) < 2:
                raise QbArityError("cond clause requires a result")
            return evaluate_fn(clause.items[1], env)
    return FALSE
