"""Numeric comparison forms.

Only Number payloads compare; anything else answers FALSE. `le` and `ge` are
the `not` of `gt` and `lt`, so `(le "a" 1)` is true.
"""

import operator
from typing import Callable, Optional

from qbscript import EvaluatorFn, Node, Value
from qbscript.errors import QbArityError
from qbscript.types.atom import Number
from qbscript.types.elem import Call, FALSE, boolean, is_atomic
from qbscript.types.environment import Environment
from qbscript.evaluation.special_forms.logic_forms import negate


def _number(value: Value) -> Optional[int]:
    if is_atomic(value) and isinstance(value.atom, Number):
        return value.atom.value
    return None


def _compare(
    name: str,
    op: Callable[[int, int], bool],
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(tail) < 2:
        raise QbArityError(f"{name} requires 2 operands")
    a = _number(evaluate_fn(tail[0], env))
    b = _number(evaluate_fn(tail[1], env))
    if a is None or b is None:
        return FALSE
    return boolean(op(a, b))


def lt_form(tail: tuple[Node, ...], env: Environment, evaluate_fn: EvaluatorFn, form: Call) -> Value:
    return _compare("lt", operator.lt, tail, env, evaluate_fn)


def gt_form(tail: tuple[Node, ...], env: Environment, evaluate_fn: EvaluatorFn, form: Call) -> Value:
    return _compare("gt", operator.gt, tail, env, evaluate_fn)


def le_form(tail: tuple[Node, ...], env: Environment, evaluate_fn: EvaluatorFn, form: Call) -> Value:
    return negate(_compare("le", operator.gt, tail, env, evaluate_fn))


def ge_form(tail: tuple[Node, ...], env: Environment, evaluate_fn: EvaluatorFn, form: Call) -> Value:
    return negate(_compare("ge", operator.lt, tail, env, evaluate_fn))
