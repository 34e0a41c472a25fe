"""Serialize Lisp values back to text.

Readable mode escapes strings so the output can be fed back to the reader;
display mode writes strings verbatim (what `str` and `println` use).
"""

from __future__ import annotations

import math

from tau import LispValue
from tau.types.atom import Atom
from tau.types.collections import Vector
from tau.types.function import Closure, Primitive
from tau.types.nil import NilType
from tau.types.symbol import Keyword, Symbol


def _non_finite(x: float) -> str:
    """Reader literal for inf, -inf and nan, which have no numeric token."""
    if math.isnan(x):
        return "##NaN"
    return "##Inf" if x > 0 else "##-Inf"


def escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def pr_str(value: LispValue, readable: bool = True) -> str:
    if isinstance(value, NilType):
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and not math.isfinite(value):
        return _non_finite(value)
    if isinstance(value, str):
        return f'"{escape(value)}"' if readable else value
    if isinstance(value, (Symbol, Keyword)):
        return str(value)
    if isinstance(value, Vector):
        return "[" + join_printed(value, readable) + "]"
    if isinstance(value, list):
        return "(" + join_printed(value, readable) + ")"
    if isinstance(value, dict):
        pairs = (
            f"{pr_str(k, readable)} {pr_str(v, readable)}" for k, v in value.items()
        )
        return "{" + " ".join(pairs) + "}"
    if isinstance(value, Closure):
        return "#<macro>" if value.is_macro else "#<fn>"
    if isinstance(value, Primitive):
        return f"#<primitive {value.name}>"
    if isinstance(value, Atom):
        return f"#<atom {pr_str(value.value, readable)}>"
    if callable(value):
        return f"#<primitive {getattr(value, '__name__', 'anonymous')}>"
    return repr(value)


def join_printed(items: list[LispValue], readable: bool, sep: str = " ") -> str:
    """Print each value and join them, as `str`, `prn` and `println` do."""
    return sep.join(pr_str(x, readable) for x in items)
