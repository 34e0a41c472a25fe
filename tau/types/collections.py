"""Collection types that need more than a plain list or dict.

Lists and maps are ordinary Python lists and dicts. `Vector` is a list
subclass so that it prints with brackets and answers `vector?`; `List` and
`Map` only exist so that `with-meta` clones have somewhere to keep metadata.
"""

from __future__ import annotations

from tau.types.nil import Nil


class Vector(list):
    __slots__ = ("meta",)

    def __init__(self, items=(), meta=Nil):
        super().__init__(items)
        self.meta = meta

    def __repr__(self):
        return f"Vector({list(self)!r})"


class List(list):
    __slots__ = ("meta",)

    def __init__(self, items=(), meta=Nil):
        super().__init__(items)
        self.meta = meta


class Map(dict):
    __slots__ = ("meta",)

    def __init__(self, items=(), meta=Nil):
        super().__init__(items)
        self.meta = meta


def is_list(x) -> bool:
    return isinstance(x, list) and not isinstance(x, Vector)


def is_vector(x) -> bool:
    return isinstance(x, Vector)


def is_sequential(x) -> bool:
    return isinstance(x, list)
