from qbscript.types.atom import Symbol, String, Number, AtomValue
from qbscript.types.elem import Atom, Single, Call, List, Elem, TRUE, FALSE
from qbscript.types.environment import Environment

__all__ = [
    "Symbol",
    "String",
    "Number",
    "AtomValue",
    "Atom",
    "Single",
    "Call",
    "List",
    "Elem",
    "TRUE",
    "FALSE",
    "Environment",
]
