from qbscript import EvaluatorFn, Node, Value
from qbscript.errors import QbArityError
from qbscript.types.atom import Symbol
from qbscript.types.elem import Atom, Call
from qbscript.types.environment import Environment


def let_form(
    tail: tuple[Node, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: Call,
) -> Value:
    """
    (let name expr)
    Binds name to expr *unevaluated* and returns the name. Storing the raw
    expression lets a procedure call itself through its own name.
    A name that is not a plain symbol leaves the environment untouched and the
    form is returned as-is.
    """
    if not tail:
        raise QbArityError("let requires a name and an expression")

    name = tail[0]
    if not (isinstance(name, Atom) and isinstance(name.atom, Symbol)):
        return form
    if len(tail) < 2:
        raise QbArityError("let requires a name and an expression")

    env.define(name.atom, tail[1])
    return name
