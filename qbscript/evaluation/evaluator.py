"""Core evaluator for the qbscript interpreter.

Reduces an Elem to a value under a mutable Environment:

- Atom(String|Number), List      -> itself
- Atom(Symbol)                   -> the bound value, or itself when unbound
- Single(atom)                   -> Atom(atom), no lookup
- Call(())                       -> itself
- Call((builtin, ...))           -> SPECIAL_FORMS dispatch
- Call((bound-name, ...))        -> head replaced by its binding, re-evaluated
- Call(((fun [...] body), ...))  -> procedure application
- any other Call                 -> itself

Unrecognised forms are echoed back rather than reported.
"""

from __future__ import annotations

import logging

from qbscript import Node, Value
from qbscript.types.atom import Symbol
from qbscript.types.elem import Atom, Call, Single
from qbscript.types.environment import Environment
from qbscript.evaluation.apply import apply_fun
from qbscript.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)

FUN = Symbol("fun")


def evaluate(expr: Node, env: Environment) -> Value:
    match expr:
        case Atom(Symbol() as name):
            if name in env:
                return env.lookup(name)
            return expr
        case Single(atom):
            return Atom(atom)
        case Call():
            return evaluate_call(expr, env)

    # --- Strings, numbers and Lists return as-is ---
    return expr


def evaluate_call(form: Call, env: Environment) -> Value:
    if not form.items:
        return form

    head = form.items[0]
    tail = form.items[1:]
    match head:
        case Atom(Symbol() as name):
            handler = SPECIAL_FORMS.get(name)
            if handler is not None:
                logger.debug("dispatch %s", name)
                return handler(tail, env, evaluate, form)
            if name in env:
                # Calling by name: splice in the stored definition and retry
                return evaluate(Call((env.lookup(name),) + tail), env)
        case Call(items=(Atom(atom), *_)) if atom == FUN:
            return apply_fun(head, tail, env, evaluate, form)

    return form
