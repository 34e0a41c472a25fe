"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing: only as much input is tokenized as the forms
  requested need, so trailing text after a form is never inspected.
- Emits Python values directly:

    - nil / true / false -> Nil / True / False
    - ##Inf / ##-Inf / ##NaN -> non-finite floats
    - numbers -> int (integer literals) or float
    - strings -> str
    - :name -> Keyword
    - other bare tokens -> Symbol
    - ( ... ) -> list
    - [ ... ] -> Vector
    - { ... } -> dict
    - 'x `x ~x ~@x @x -> [quote x] [quasiquote x] [unquote x] [splice-unquote x] [deref x]
"""

from __future__ import annotations

import math
import re
from typing import Iterator, Optional

from tau import SExpression
from tau.errors import TauSyntaxError
from tau.types.collections import Vector
from tau.types.nil import Nil
from tau.types.symbol import Keyword, Symbol
from tau.reader.reader_macros import reader_macros

WHITESPACE_RE = re.compile(r"[\s,]*")

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<macro>~@|['`~@])"  # reader macros
    r"|(?P<open>[(\[{])"
    r"|(?P<close>[)\]}])"
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>".*)'  # a string missing its closing quote
    r'|(?P<symbol>[^\s\[\]{}()\'"`,;~@][^\s\[\]{}()\'"`,;]*)',
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
INTEGER_RE = re.compile(r"[+-]?\d+")
NUMBER_LIKE_RE = re.compile(r"[+-]?\.?\d")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

ESCAPES: dict[str, str] = {"n": "\n"}

CLOSERS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}

LITERALS: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
    "##Inf": math.inf,
    "##-Inf": -math.inf,
    "##NaN": math.nan,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples, comments dropped."""
    pos = 0
    n = len(source)
    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise TauSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        yield kind, m.group(kind)


def unescape(body: str) -> str:
    return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


def read_atom(token: str) -> SExpression:
    """Turn a bare token into a literal, number, keyword or symbol."""
    if token in LITERALS:
        return LITERALS[token]
    if NUMBER_RE.fullmatch(token):
        return int(token) if INTEGER_RE.fullmatch(token) else float(token)
    if NUMBER_LIKE_RE.match(token):
        raise TauSyntaxError(f"Malformed number: {token}")
    if token.startswith(":") and len(token) > 1:
        return Keyword(token[1:])
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise TauSyntaxError("Unexpected EOF, expected a form")

        if tok_type == "macro":
            return reader_macros.dispatch(tok_val, self)

        if tok_type == "open":
            return self._parse_collection(tok_val)

        if tok_type == "close":
            raise TauSyntaxError(f"Unexpected '{tok_val}'")

        if tok_type == "string":
            return unescape(tok_val[1:-1])

        if tok_type == "unterminated":
            raise TauSyntaxError("Expected '\"', got EOF")

        return read_atom(tok_val)

    def _parse_collection(self, opener: str) -> SExpression:
        closer = CLOSERS[opener]
        items: list[SExpression] = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise TauSyntaxError(f"Expected '{closer}', got EOF")
            if tok_type == "close":
                self.advance()
                if tok_val != closer:
                    raise TauSyntaxError(f"Expected '{closer}', got '{tok_val}'")
                break
            items.append(self.parse_expr())

        if opener == "[":
            return Vector(items)
        if opener == "{":
            if len(items) % 2:
                raise TauSyntaxError("Map literal requires an even number of forms")
            try:
                return dict(zip(items[::2], items[1::2]))
            except TypeError:
                raise TauSyntaxError("Map literal keys must be atoms")
        return items

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_str(source: str) -> SExpression:
    """Read exactly one form from `source`; anything after it is ignored."""
    return TokenStream(lex(source)).parse_expr()


def read_all(source: str) -> Iterator[SExpression]:
    """Lazily read every top-level form in `source`."""
    return TokenStream(lex(source)).parse_all()
