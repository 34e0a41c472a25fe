"""Special form: defmacro.

Builds a closure exactly as `fn` does, flags it as a macro and binds it.
"""

from __future__ import annotations

from tau import EvaluatorFn, SExpression, LispValue
from tau.errors import TauArityError
from tau.types.environment import Environment
from tau.types.symbol import Symbol
from tau.evaluation.special_forms.lambda_form import make_closure


def defmacro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind the macro named by the first argument with params/body in tail."""
    if len(tail) < 2:
        raise TauArityError("defmacro requires a name and parameter list")

    macro_name = tail[0]
    if not isinstance(macro_name, Symbol):
        raise TauArityError(f"Macro name must be a Symbol, got {macro_name!r}")

    return env.set(macro_name, make_closure(tail[1:], env, "defmacro", is_macro=True))
