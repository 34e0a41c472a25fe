from __future__ import annotations
import sys


class Symbol:
    """Interned symbol: two symbols with the same name are the same object."""

    __slots__ = ("id",)
    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str):
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = sys.intern(name)
            cls._table[sym.id] = sym
        return sym

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class Keyword:
    """Interned keyword (`:name`), never equal to a Symbol of the same name."""

    __slots__ = ("id",)
    _table: dict[str, Keyword] = {}

    def __new__(cls, name: str):
        kw = cls._table.get(name)
        if kw is None:
            kw = super().__new__(cls)
            kw.id = sys.intern(name)
            cls._table[kw.id] = kw
        return kw

    def __repr__(self):
        return f"Keyword({self.id!r})"

    def __str__(self):
        return f":{self.id}"
