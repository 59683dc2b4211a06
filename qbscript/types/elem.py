"""Syntax/value nodes.

The same node types serve as parsed syntax and as evaluated values:

- Atom(atom)    -> an unquoted leaf; a Symbol here is looked up on evaluation
- Single(atom)  -> a quoted leaf written `#name`; evaluates to Atom(atom)
- Call(items)   -> a parenthesised form `( ... )`
- List(items)   -> a bracketed literal `[ ... ]`, always data

Nodes are immutable. Sequence items are stored as tuples.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Union

from qbscript.types.atom import AtomValue, Symbol


class Atom:
    __slots__ = ("atom",)
    __match_args__ = ("atom",)

    def __init__(self, atom: AtomValue):
        self.atom = atom

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.atom == other.atom

    def __hash__(self) -> int:
        return hash((Atom, self.atom))

    def __repr__(self):
        return f"Atom({self.atom!r})"

    def __str__(self):
        return str(self.atom)


class Single:
    __slots__ = ("atom",)
    __match_args__ = ("atom",)

    def __init__(self, atom: AtomValue):
        self.atom = atom

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Single) and self.atom == other.atom

    def __hash__(self) -> int:
        return hash((Single, self.atom))

    def __repr__(self):
        return f"Single({self.atom!r})"

    def __str__(self):
        return f"#{self.atom}"


class _Sequence:
    __slots__ = ("items",)
    __match_args__ = ("items",)

    OPEN = ""
    CLOSE = ""

    def __init__(self, items: Iterable[Elem] = ()):
        self.items: tuple[Elem, ...] = tuple(items)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.items == other.items

    def __hash__(self) -> int:
        return hash((type(self), self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self):
        return f"{type(self).__name__}({list(self.items)!r})"

    def __str__(self):
        with StringIO() as buffer:
            buffer.write(self.OPEN)
            buffer.write(" ".join(str(item) for item in self.items))
            buffer.write(self.CLOSE)
            return buffer.getvalue()


class Call(_Sequence):
    """A parenthesised form; code or data depending on where it is evaluated."""

    __slots__ = ()
    OPEN = "("
    CLOSE = ")"


class List(_Sequence):
    """A bracketed literal; self-evaluating."""

    __slots__ = ()
    OPEN = "["
    CLOSE = "]"


Elem = Union[Atom, Single, Call, List]

# Canonical results produced by predicates
TRUE = Single(Symbol("t"))
FALSE = List()


def is_atomic(elem: Elem) -> bool:
    """Atom and Single count as true for `atom`, `if` and `cond`."""
    return isinstance(elem, (Atom, Single))


def is_sequence(elem: Elem) -> bool:
    return isinstance(elem, (Call, List))


def boolean(flag: bool) -> Elem:
    return TRUE if flag else FALSE
