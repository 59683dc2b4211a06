"""
  qbscript Reader

Turns source text into Elem nodes, one top-level form at a time.

    expr   := ws (single | list | call | string | number | symbol) ws
    single := '#' atom-chars               -> Single(Symbol)
    list   := '[' expr* ']'                -> List
    call   := '(' expr* ')'                -> Call
    string := '"' not-quote+ '"'           -> Atom(String)
    number := ('-' | digit)+               -> Atom(Number)
    symbol := atom-chars                   -> Atom(Symbol)

Alternatives are tried in that order, so `"abc"` and `42` never read as
symbols, while text a production rejects falls through to the next one:
`""` and an unterminated `"abc` read as symbols, `#` alone reads as a symbol.
A numeric run that is not an integer (`-`, `1-2`) is a syntax error.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, Optional

from qbscript.errors import QbSyntaxError
from qbscript.types.atom import Number, String, Symbol
from qbscript.types.elem import Atom, Call, Elem, List, Single

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"[ \t\r\n]*")
SINGLE_RE = re.compile(r"#([^\s()\[\]]+)")
STRING_RE = re.compile(r'"([^"]+)"')
NUMBER_RE = re.compile(r"[0-9-]+")
INTEGER_RE = re.compile(r"-?[0-9]+")
SYMBOL_RE = re.compile(r"[^\s()\[\]]+")

CLOSERS = {"(": ")", "[": "]"}


class Reader:
    """Cursor over a source string; each read_expr call consumes one form."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    @property
    def remaining(self) -> str:
        return self.source[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def skip_whitespace(self) -> None:
        self.pos = WHITESPACE_RE.match(self.source, self.pos).end()

    def error(self, message: str, expected: str, position: Optional[int] = None) -> QbSyntaxError:
        return QbSyntaxError(
            message,
            position=self.pos if position is None else position,
            expected=expected,
            source=self.source,
        )

    def read_expr(self) -> Elem:
        self.skip_whitespace()
        if self.at_end():
            raise self.error("Unexpected end of input", "expression")

        productions: tuple[Callable[[], Optional[Elem]], ...] = (
            self.read_single,
            self.read_list,
            self.read_call,
            self.read_string,
            self.read_number,
            self.read_symbol,
        )
        for production in productions:
            elem = production()
            if elem is not None:
                self.skip_whitespace()
                return elem
        raise self.error("Unexpected character", "expression")

    # ------------------------
    # Leaves
    # ------------------------
    def read_single(self) -> Optional[Elem]:
        m = SINGLE_RE.match(self.source, self.pos)
        if not m:
            return None
        self.pos = m.end()
        return Single(Symbol(m.group(1)))

    def read_string(self) -> Optional[Elem]:
        m = STRING_RE.match(self.source, self.pos)
        if not m:
            return None
        self.pos = m.end()
        return Atom(String(m.group(1)))

    def read_number(self) -> Optional[Elem]:
        m = NUMBER_RE.match(self.source, self.pos)
        if not m:
            return None
        text = m.group(0)
        if not INTEGER_RE.fullmatch(text):
            raise self.error(f"Malformed number {text!r}", "integer")
        self.pos = m.end()
        return Atom(Number(int(text)))

    def read_symbol(self) -> Optional[Elem]:
        m = SYMBOL_RE.match(self.source, self.pos)
        if not m:
            return None
        self.pos = m.end()
        return Atom(Symbol(m.group(0)))

    # ------------------------
    # Sequences
    # ------------------------
    def read_list(self) -> Optional[Elem]:
        items = self._read_items("[")
        return None if items is None else List(items)

    def read_call(self) -> Optional[Elem]:
        items = self._read_items("(")
        return None if items is None else Call(items)

    def _read_items(self, opener: str) -> Optional[list[Elem]]:
        if not self.source.startswith(opener, self.pos):
            return None
        start = self.pos
        closer = CLOSERS[opener]
        self.pos += 1
        items: list[Elem] = []
        while True:
            self.skip_whitespace()
            if self.at_end():
                raise self.error(f"Unterminated '{opener}'", closer, position=start)
            current_char = self.source[self.pos]
            if current_char == closer:
                self.pos += 1
                return items
            if current_char in ")]":
                raise self.error(f"Mismatched {current_char!r}", closer)
            items.append(self.read_expr())


def parse(text: str) -> tuple[str, Elem]:
    """Read one form from the front of `text`.

    Returns the unconsumed remainder (leading whitespace already skipped) and
    the node. Raises QbSyntaxError if the leading content is not a form.
    """
    reader = Reader(text)
    elem = reader.read_expr()
    logger.debug("parsed %s", elem)
    return reader.remaining, elem


def parse_all(text: str) -> Iterator[Elem]:
    """Yield every top-level form in `text`, in order.

    Forms are produced lazily, so a caller can evaluate each one before the
    next is read. Error positions are offsets into the whole of `text`.
    """
    reader = Reader(text)
    reader.skip_whitespace()
    while not reader.at_end():
        elem = reader.read_expr()
        logger.debug("parsed %s", elem)
        yield elem
