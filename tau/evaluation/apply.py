"""Application engine for Tau.

Centralizes function application for the evaluator and for builtins that
call back into user code (apply, swap!):
- Closures bind their parameters in a fresh scope under the captured one.
  In tail position the evaluator receives a TailCall instead of recursing.
- Python callables registered in the environment are invoked as fn(env, args).
  Anything other than a TauError escaping one is re-raised as a
  TauPrimitiveError so language-level `try` can handle it.
- Anything else is not callable.
"""

from __future__ import annotations

from tau import LispValue, EvaluatorFn
from tau.errors import TauError, TauNotCallable, TauPrimitiveError
from tau.printer import pr_str
from tau.types.atom import Atom
from tau.types.collections import Vector
from tau.types.environment import Environment
from tau.types.function import Closure, Primitive
from tau.types.nil import NilType
from tau.types.symbol import Keyword, Symbol
from tau.types.tail_call import TailCall


def category(value: LispValue) -> str:
    """Name of the value's kind, as used in error messages."""
    match value:
        case NilType():
            return "Nil"
        case bool():
            return "Boolean"
        case int() | float():
            return "Number"
        case str():
            return "String"
        case Symbol():
            return "Symbol"
        case Keyword():
            return "Keyword"
        case Vector():
            return "Vector"
        case list():
            return "List"
        case dict():
            return "Map"
        case Atom():
            return "Atom"
        case _:
            return type(value).__name__


def apply(
    fn: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    tail: bool = False,
) -> LispValue | TailCall:
    """Apply `fn` to already-evaluated `args`.

    With tail=True a closure call returns a TailCall for the caller's loop;
    otherwise the body is evaluated to a value before returning.
    """
    if isinstance(fn, Closure):
        call_env = fn.extend_env(args)
        if tail:
            return TailCall(fn.body, call_env)
        return evaluate_fn(fn.body, call_env)

    if callable(fn):
        try:
            return fn(env, args)
        except (TauError, RecursionError):
            raise
        except Exception as ex:
            name = fn.name if isinstance(fn, Primitive) else getattr(fn, "__name__", "primitive")
            raise TauPrimitiveError(f"{name}: {ex}") from ex

    raise TauNotCallable(
        f"{category(fn)} {pr_str(fn)} is not a function. "
        "First element of list always should be a function."
    )
