"""Procedure application for qbscript.

A procedure is just the syntax `(fun [p1 p2 ...] body)`; there is no closure
object. Applying it:

- takes a snapshot of the caller's environment,
- binds each symbol parameter to the matching argument, evaluated in the
  caller's environment,
- evaluates the body in the snapshot.

Nothing bound during the call (parameters, nested `let`s) reaches the caller.
Extra arguments are ignored; a missing argument raises QbArityError.
"""

import logging

from qbscript import EvaluatorFn, Node, Value
from qbscript.errors import QbArityError
from qbscript.types.atom import Symbol
from qbscript.types.elem import Atom, Call, List
from qbscript.types.environment import Environment

logger = logging.getLogger(__name__)


def apply_fun(
    fn: Call,
    args: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    """Apply `fn`, a `(fun ...)` Call, to the unevaluated `args` of `form`."""
    if len(fn.items) < 2:
        raise QbArityError("fun requires a parameter list and a body")
    params = fn.items[1]
    if not isinstance(params, List):
        return form

    scope = env.snapshot()
    for index, param in enumerate(params.items):
        if not (isinstance(param, Atom) and isinstance(param.atom, Symbol)):
            continue
        if index >= len(args):
            raise QbArityError(
                f"{form}: missing argument {index + 1} for parameter {param}"
            )
        scope.define(param.atom, evaluate_fn(args[index], env))

    if len(fn.items) < 3:
        raise QbArityError("fun requires a parameter list and a body")
    logger.debug("apply %s with %d argument(s)", params, len(args))
    return evaluate_fn(fn.items[2], scope)
