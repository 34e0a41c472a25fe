"""Built-in functions for the Tau runtime environment.

This module defines the core namespace: type predicates, equality and
comparison, arithmetic, sequence functions, printing, atoms, metadata and
application helpers. Every builtin has the signature fn(env, args) where
`args` are already-evaluated values.
"""
from __future__ import annotations

import functools
import sys
from typing import TextIO

from tau import LispValue
from tau.errors import TauArityError, TauPrimitiveError, TauUserRaised
from tau.printer import join_printed
from tau.reader.parser import read_str
from tau.types.atom import Atom
from tau.types.collections import List, Map, Vector, is_list, is_vector
from tau.types.environment import Environment
from tau.types.function import Closure, Primitive, is_function, is_macro
from tau.types.nil import Nil, is_truthy
from tau.types.symbol import Keyword, Symbol
from tau.evaluation.apply import apply as apply_engine
from tau.evaluation.evaluator import evaluate


def _arity(name: str, args: list[LispValue], *counts: int) -> None:
    if len(args) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise TauArityError(f"{name} expects {expected} argument(s), got {len(args)}")


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    for x in args:
        if not _is_number(x):
            raise TauPrimitiveError(f"All arguments to {name} must be numbers")
    return args


def _sequence(name: str, xs: LispValue) -> list[LispValue]:
    """Nil reads as the empty sequence; anything else must be a list or vector."""
    if xs is Nil:
        return []
    if not isinstance(xs, list):
        raise TauPrimitiveError(f"{name} expects a list, got {xs!r}")
    return xs


# -------------------------------
# Errors
# -------------------------------
def throw(env: Environment, args: list[LispValue]) -> LispValue:
    """Raise any value; `try` hands it to the catch clause unwrapped."""
    _arity("throw", args, 1)
    raise TauUserRaised(args[0])


# -------------------------------
# Predicates
# -------------------------------
def is_nil(env: Environment, args: list[LispValue]) -> bool:
    _arity("nil?", args, 1)
    return args[0] is Nil


def is_true(env: Environment, args: list[LispValue]) -> bool:
    _arity("true?", args, 1)
    return args[0] is True


def is_false(env: Environment, args: list[LispValue]) -> bool:
    _arity("false?", args, 1)
    return args[0] is False


def is_number(env: Environment, args: list[LispValue]) -> bool:
    _arity("number?", args, 1)
    return _is_number(args[0])


def is_string(env: Environment, args: list[LispValue]) -> bool:
    _arity("string?", args, 1)
    return isinstance(args[0], str)


def is_symbol(env: Environment, args: list[LispValue]) -> bool:
    _arity("symbol?", args, 1)
    return isinstance(args[0], Symbol)


def is_keyword(env: Environment, args: list[LispValue]) -> bool:
    _arity("keyword?", args, 1)
    return isinstance(args[0], Keyword)


def is_fn(env: Environment, args: list[LispValue]) -> bool:
    """True for callables a program may apply; macros are excluded."""
    _arity("fn?", args, 1)
    return is_function(args[0])


def is_macro_builtin(env: Environment, args: list[LispValue]) -> bool:
    _arity("macro?", args, 1)
    return is_macro(args[0])


def is_list_builtin(env: Environment, args: list[LispValue]) -> bool:
    _arity("list?", args, 1)
    return is_list(args[0])


def is_vector_builtin(env: Environment, args: list[LispValue]) -> bool:
    _arity("vector?", args, 1)
    return is_vector(args[0])


def is_map(env: Environment, args: list[LispValue]) -> bool:
    _arity("map?", args, 1)
    return isinstance(args[0], dict)


def is_atom(env: Environment, args: list[LispValue]) -> bool:
    _arity("atom?", args, 1)
    return isinstance(args[0], Atom)


# -------------------------------
# Constructors
# -------------------------------
def symbol(env: Environment, args: list[LispValue]) -> Symbol:
    _arity("symbol", args, 1)
    if not isinstance(args[0], str):
        raise TauPrimitiveError(f"symbol expects a string, got {args[0]!r}")
    return Symbol(args[0])


def keyword(env: Environment, args: list[LispValue]) -> Keyword:
    _arity("keyword", args, 1)
    name = args[0]
    if isinstance(name, Keyword):
        return name
    if not isinstance(name, str):
        raise TauPrimitiveError(f"keyword expects a string, got {name!r}")
    return Keyword(name)


def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments (identity)."""
    return list(args)


def vector(env: Environment, args: list[LispValue]) -> Vector:
    return Vector(args)


# -------------------------------
# Equality and comparison
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Value equality for atomic values, identity for everything else."""
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    # Nil, booleans, symbols and keywords are singletons: identity covers them.
    return False


def equals(env: Environment, args: list[LispValue]) -> bool:
    _arity("=", args, 2)
    return is_equal(*args)


def _comparator(name: str, op):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _arity(name, args, 2)
        a, b = _numbers(name, args)
        return op(a, b)

    compare.__name__ = name
    return compare


lt = _comparator("<", lambda a, b: a < b)
lte = _comparator("<=", lambda a, b: a <= b)
gt = _comparator(">", lambda a, b: a > b)
gte = _comparator(">=", lambda a, b: a >= b)


def logical_or(env: Environment, args: list[LispValue]) -> LispValue:
    """Fold (x || y) from false. Every argument has already been evaluated."""
    return functools.reduce(lambda x, y: x if is_truthy(x) else y, args, False)


def logical_and(env: Environment, args: list[LispValue]) -> LispValue:
    """Fold (x && y) from true. Every argument has already been evaluated."""
    return functools.reduce(lambda x, y: y if is_truthy(x) else x, args, True)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", args), 0)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; (-) is 0, (- x) negates."""
    _numbers("-", args)
    if not args:
        return 0
    if len(args) == 1:
        return -args[0]
    return functools.reduce(lambda x, y: x - y, args[1:], args[0])


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    return functools.reduce(lambda x, y: x * y, _numbers("*", args), 1)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left-to-right starting from the first argument; (/) is nil."""
    _numbers("/", args)
    if not args:
        return Nil
    try:
        return functools.reduce(lambda x, y: x / y, args[1:], args[0])
    except ZeroDivisionError:
        raise TauPrimitiveError("Division by zero")


# -------------------------------
# Sequences
# -------------------------------
def nth(env: Environment, args: list[LispValue]) -> LispValue:
    _arity("nth", args, 2)
    xs, index = args
    xs = _sequence("nth", xs)
    if not _is_number(index) or index != int(index):
        raise TauPrimitiveError(f"nth index must be an integer, got {index!r}")
    index = int(index)
    if not 0 <= index < len(xs):
        raise TauPrimitiveError("nth: index out of range")
    return xs[index]


def first(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the first element; Nil for an empty list or Nil."""
    _arity("first", args, 1)
    xs = _sequence("first", args[0])
    return xs[0] if xs else Nil


def last(env: Environment, args: list[LispValue]) -> LispValue:
    _arity("last", args, 1)
    xs = _sequence("last", args[0])
    return xs[-1] if xs else Nil


def rest(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """All but the first element, always as a list; Nil gives the empty list."""
    _arity("rest", args, 1)
    return list(_sequence("rest", args[0])[1:])


def is_empty(env: Environment, args: list[LispValue]) -> bool:
    _arity("empty?", args, 1)
    return len(_sequence("empty?", args[0])) == 0


def count(env: Environment, args: list[LispValue]) -> int:
    _arity("count", args, 1)
    xs = args[0]
    if isinstance(xs, (str, dict)):
        return len(xs)
    return len(_sequence("count", xs))


def cons(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Prepend head to a list (or Nil), returning a new list."""
    _arity("cons", args, 2)
    head, tail = args
    return [head] + _sequence("cons", tail)


def concat(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """
    Concatenate multiple lists.
    Nil is treated as the empty list.
    """
    result: list[LispValue] = []
    for item in args:
        result.extend(_sequence("concat", item))
    return result


def range_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(range end), (range start end) or (range start end step), half-open.

    A step that never reaches `end` loops forever; callers must not do that.
    """
    _arity("range", args, 1, 2, 3)
    _numbers("range", args)
    start, step = 0, 1
    if len(args) == 1:
        (end,) = args
    elif len(args) == 2:
        start, end = args
    else:
        start, end, step = args

    result = []
    i = start
    while i < end:
        result.append(i)
        i += step
    return result


# -------------------------------
# Application
# -------------------------------
def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f a b '(c d)) calls (f a b c d): the final argument is spliced."""
    if len(args) < 2:
        raise TauArityError("apply requires a function and an argument list")
    fn, *fixed, spread = args
    return apply_engine(fn, fixed + _sequence("apply", spread), env, evaluate)


# -------------------------------
# Strings and printing
# -------------------------------
def str_builtin(env: Environment, args: list[LispValue]) -> str:
    """Concatenate the display forms of all arguments."""
    return join_printed(args, readable=False, sep="")


def read_string(env: Environment, args: list[LispValue]) -> LispValue:
    _arity("read-string", args, 1)
    if not isinstance(args[0], str):
        raise TauPrimitiveError(f"read-string expects a string, got {args[0]!r}")
    return read_str(args[0])


def prn(env: Environment, args: list[LispValue], output: TextIO | None = None) -> LispValue:
    """Print readable forms of args separated by spaces; returns Nil."""
    print(join_printed(args, readable=True), file=output or sys.stdout)
    return Nil


def println(env: Environment, args: list[LispValue], output: TextIO | None = None) -> LispValue:
    """Print display forms of args separated by spaces; returns Nil."""
    print(join_printed(args, readable=False), file=output or sys.stdout)
    return Nil


# -------------------------------
# Atoms
# -------------------------------
def _atom_arg(name: str, value: LispValue) -> Atom:
    if not isinstance(value, Atom):
        raise TauPrimitiveError(f"{name} expects an atom, got {value!r}")
    return value


def atom(env: Environment, args: list[LispValue]) -> Atom:
    _arity("atom", args, 1)
    return Atom(args[0])


def deref(env: Environment, args: list[LispValue]) -> LispValue:
    _arity("deref", args, 1)
    return _atom_arg("deref", args[0]).value


def reset(env: Environment, args: list[LispValue]) -> LispValue:
    _arity("reset!", args, 2)
    return _atom_arg("reset!", args[0]).reset(args[1])


def swap(env: Environment, args: list[LispValue]) -> LispValue:
    """(swap! a f x y) stores and returns (f old x y)."""
    if len(args) < 2:
        raise TauArityError("swap! requires an atom and a function")
    cell, fn, *extra = args
    cell = _atom_arg("swap!", cell)
    return cell.reset(apply_engine(fn, [cell.value, *extra], env, evaluate))


# -------------------------------
# Metadata
# -------------------------------
def meta(env: Environment, args: list[LispValue]) -> LispValue:
    _arity("meta", args, 1)
    return getattr(args[0], "meta", Nil)


def with_meta(env: Environment, args: list[LispValue]) -> LispValue:
    """Return a clone of the value carrying `m` as metadata."""
    _arity("with-meta", args, 2)
    value, m = args
    match value:
        case Closure() | Primitive():
            return value.clone(meta=m)
        case Vector():
            return Vector(value, meta=m)
        case list():
            return List(value, meta=m)
        case dict():
            return Map(value, meta=m)
        case _ if callable(value):
            return Primitive(value, meta=m)
    raise TauPrimitiveError(f"Cannot attach metadata to {value!r}")


def register(env: Environment, output: TextIO | None = None) -> None:
    """Register all builtin functions into the given environment.

    `output` is where prn and println write; it defaults to sys.stdout at
    call time.
    """
    env.update(
        {
            Symbol("throw"): throw,
            Symbol("nil?"): is_nil,
            Symbol("true?"): is_true,
            Symbol("false?"): is_false,
            Symbol("number?"): is_number,
            Symbol("string?"): is_string,
            Symbol("symbol"): symbol,
            Symbol("symbol?"): is_symbol,
            Symbol("keyword"): keyword,
            Symbol("keyword?"): is_keyword,
            Symbol("fn?"): is_fn,
            Symbol("macro?"): is_macro_builtin,
            Symbol("="): equals,
            Symbol("<"): lt,
            Symbol("<="): lte,
            Symbol(">"): gt,
            Symbol(">="): gte,
            Symbol("or"): logical_or,
            Symbol("and"): logical_and,
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("list"): list_builtin,
            Symbol("list?"): is_list_builtin,
            Symbol("vector"): vector,
            Symbol("vector?"): is_vector_builtin,
            Symbol("map?"): is_map,
            Symbol("nth"): nth,
            Symbol("first"): first,
            Symbol("rest"): rest,
            Symbol("last"): last,
            Symbol("empty?"): is_empty,
            Symbol("count"): count,
            Symbol("apply"): apply,
            Symbol("str"): str_builtin,
            Symbol("prn"): Primitive(functools.partial(prn, output=output), "prn"),
            Symbol("println"): Primitive(functools.partial(println, output=output), "println"),
            Symbol("read-string"): read_string,
            Symbol("cons"): cons,
            Symbol("concat"): concat,
            Symbol("meta"): meta,
            Symbol("with-meta"): with_meta,
            Symbol("atom"): atom,
            Symbol("atom?"): is_atom,
            Symbol("deref"): deref,
            Symbol("reset!"): reset,
            Symbol("swap!"): swap,
            Symbol("range"): range_builtin,
        }
    )
