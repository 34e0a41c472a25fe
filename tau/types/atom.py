from __future__ import annotations

from tau import LispValue


class Atom:
    """A single mutable cell. Equality is identity."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def reset(self, value: LispValue) -> LispValue:
        self.value = value
        return value

    def __repr__(self):
        return f"Atom({self.value!r})"
