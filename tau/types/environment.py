"""Runtime environment for Tau.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Closures keep a reference to the scope they
were created in, so a scope lives as long as the longest-lived closure over it.
"""

from __future__ import annotations

from typing import Iterable, Optional

from tau import LispValue
from tau.errors import TauArityError, TauUnboundSymbol
from tau.types.symbol import Symbol

VARIADIC = Symbol("&")


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "name")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        binds: Iterable[Symbol] = (),
        exprs: Iterable[LispValue] = (),
        name: str = "anonymous",
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        self.name = name
        self.bind_params(list(binds), list(exprs))

    def bind_params(self, params: list[Symbol], args: list[LispValue]) -> None:
        """Bind `params` positionally to `args`.

        A literal `&` marks the next symbol as the rest parameter, which receives
        every remaining argument as a list. Missing required arguments raise
        TauArityError; surplus arguments without a rest parameter are ignored.
        """
        for i, param in enumerate(params):
            if param is VARIADIC:
                if i + 1 >= len(params):
                    raise TauArityError("'&' must be followed by a rest parameter")
                self.set(params[i + 1], list(args[i:]))
                return
            if i >= len(args):
                required = params.index(VARIADIC) if VARIADIC in params else len(params)
                raise TauArityError(
                    f"Expected {required} argument(s), got {len(args)}"
                )
            self.set(param, args[i])

    def set(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` in this scope only (shadowing any outer binding)."""
        if not isinstance(name, Symbol):
            raise TauArityError(f"Cannot bind non-symbol {name!r}")
        self.vars[name] = value
        return value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name` directly."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, raising TauUnboundSymbol if absent."""
        env = self.find(name)
        if env is None:
            raise TauUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def has_own(self, name: Symbol) -> bool:
        return name in self.vars

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def chain(self) -> list[Environment]:
        """This scope followed by each enclosing scope up to the root."""
        envs = []
        env: Optional[Environment] = self
        while env is not None:
            envs.append(env)
            env = env.outer
        return envs

    def __repr__(self) -> str:
        return f"<Environment chain: {' <- '.join(e.name for e in self.chain())}>"
