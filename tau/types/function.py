"""Function values: user closures and wrapped host callables."""

from __future__ import annotations

from typing import Callable

from tau import SExpression, LispValue
from tau.types.environment import Environment
from tau.types.nil import Nil
from tau.types.symbol import Symbol

# Builtins are plain Python callables invoked as fn(env, args)
BuiltinFn = Callable[[Environment, list], LispValue]


class Closure:
    """A first-class `fn` (or, when is_macro is set, a `defmacro` transformer)."""

    __slots__ = ("params", "body", "env", "is_macro", "meta")

    def __init__(
        self,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        is_macro: bool = False,
        meta: LispValue = Nil,
    ):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env
        self.is_macro = is_macro
        self.meta = meta

    def clone(self, **changes) -> Closure:
        fields = {name: getattr(self, name) for name in self.__slots__}
        fields.update(changes)
        return Closure(**fields)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """New call scope binding params to `args`, parented on the defining scope."""
        return Environment(self.env, self.params, args, name="fn")

    def __repr__(self) -> str:
        kind = "macro" if self.is_macro else "fn"
        return f"<{kind} ({' '.join(str(p) for p in self.params)})>"


class Primitive:
    """A named host callable with the builtin signature fn(env, args)."""

    __slots__ = ("fn", "name", "meta")

    def __init__(self, fn: BuiltinFn, name: str | None = None, meta: LispValue = Nil):
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "primitive")
        self.meta = meta

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def clone(self, **changes) -> Primitive:
        fields = {name: getattr(self, name) for name in self.__slots__}
        fields.update(changes)
        return Primitive(**fields)

    @classmethod
    def forward(cls, fn: Callable, name: str) -> Primitive:
        """Wrap a positional host function, e.g. math.sqrt, as a primitive."""
        return cls(lambda env, args: fn(*args), name)

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"


def is_function(x: LispValue) -> bool:
    """True for callables a program may apply (macros excluded)."""
    if isinstance(x, Closure):
        return not x.is_macro
    return callable(x)


def is_macro(x: LispValue) -> bool:
    return isinstance(x, Closure) and x.is_macro
