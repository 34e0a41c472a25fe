# Core type aliases for Tau's data model.
# Values are plain Python objects where possible (int, float, str, bool, list, dict)
# plus a handful of dedicated types under tau.types (Symbol, Keyword, Nil, Vector,
# Closure, Atom). Code and data share the same representation.
#
# Naming guidance:
# - SExpression: Use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[..., LispValue]
