"""Leaf values of the qbscript data model.

Atoms are immutable and compare structurally: two atoms are equal only when
they have the same kind and the same payload, so Symbol("1") != Number(1).
"""

from __future__ import annotations
import sys
from typing import Union


class Symbol:
    __slots__ = ("id",)
    __match_args__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash((Symbol, self.id))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class String:
    __slots__ = ("text",)
    __match_args__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, String) and self.text == other.text

    def __hash__(self) -> int:
        return hash((String, self.text))

    def __repr__(self):
        return f"String({self.text!r})"

    def __str__(self):
        # No escaping: the reader never admits a quote inside a string
        return f'"{self.text}"'


class Number:
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Number, self.value))

    def __repr__(self):
        return f"Number({self.value!r})"

    def __str__(self):
        return str(self.value)


AtomValue = Union[Symbol, String, Number]
