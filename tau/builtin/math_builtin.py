"""Host math forwarded into the root environment.

Every function in Python's `math` module is bound under its own name as a
numeric primitive, and its float constants as plain values. `abs`, `min`,
`max` and `round` come from Python builtins.
"""

import builtins
import math

from tau.types.environment import Environment
from tau.types.function import Primitive
from tau.types.symbol import Symbol

FORWARDED_BUILTINS = ("abs", "min", "max", "round")


def register(env: Environment) -> None:
    """Bind the host math functions and constants into `env`."""
    for name in dir(math):
        if name.startswith("_"):
            continue
        value = getattr(math, name)
        if callable(value):
            env.set(Symbol(name), Primitive.forward(value, name))
        elif isinstance(value, float):
            env.set(Symbol(name), value)
    for name in FORWARDED_BUILTINS:
        env.set(Symbol(name), Primitive.forward(getattr(builtins, name), name))
