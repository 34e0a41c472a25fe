"""Prefix reader macros.

Each macro character rewrites the next form into a two-element list headed by
a fixed symbol, e.g. 'x => (quote x) and ~@xs => (splice-unquote xs).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tau import SExpression
from tau.errors import TauSyntaxError
from tau.types.symbol import Symbol

if TYPE_CHECKING:
    from tau.reader.parser import TokenStream


class ReaderMacros:
    """Registry mapping a macro token to the symbol its form is wrapped in."""

    def __init__(self):
        self.macros: dict[str, Symbol] = {}

    def define(self, char: str, head: Symbol) -> None:
        """Register a reader macro for a given character or sequence."""
        self.macros[char] = head

    def dispatch(self, char: str, stream: TokenStream) -> SExpression:
        """Read the form following `char` and wrap it."""
        if char not in self.macros:
            raise TauSyntaxError(f"No reader macro defined for {char!r}")
        if stream.peek()[0] is None:
            raise TauSyntaxError(f"Expected a form after {char!r}, got EOF")
        return [self.macros[char], stream.parse_expr()]


reader_macros: ReaderMacros = ReaderMacros()

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

for key, name in QUOTE_FORMS.items():
    reader_macros.define(key, name)
