"""Runtime environment for qbscript.

The Environment maps Symbols to Elems. `let` stores the *unevaluated* defining
expression, which is how a procedure can refer to itself by name. Procedure
application never mutates the caller's Environment: it evaluates the body in a
`snapshot()` of it, so bindings made during a call are discarded with the
snapshot.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping

from qbscript.errors import QbInvalidSymbol, QbUnboundSymbol
from qbscript.types.atom import Symbol
from qbscript.types.elem import Elem


class Environment:
    """Flat mapping from Symbols to Elems with cheap copy-on-call snapshots."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Mapping[Symbol, Elem] | None = None):
        self.vars: dict[Symbol, Elem] = dict(bindings) if bindings else {}

    def define(self, name: Symbol, value: Elem) -> None:
        """Bind `name` to `value`, replacing any existing binding.

        Raises QbInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise QbInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def lookup(self, name: Symbol) -> Elem:
        """Return the value bound to `name`.

        Raises QbUnboundSymbol if not found.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise QbUnboundSymbol(f"Cannot lookup unbound symbol {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def names(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def snapshot(self) -> Environment:
        """Independent copy of this environment.

        Elems are immutable, so the bound values are shared rather than copied.
        """
        return Environment(self.vars)

    def update(self, mapping: Mapping[Symbol, Elem]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
