from __future__ import annotations


class NilType:
    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(None)


Nil = NilType()


def is_truthy(value) -> bool:
    """Lisp truthiness: everything except nil and false is true."""
    return not (value is Nil or value is False)
