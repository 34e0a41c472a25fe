"""Core evaluator and trampoline for the Tau interpreter.

One loop per invocation folds macro expansion, special-form dispatch and
function application together. Special forms and closure calls in tail
position hand back a TailCall; the loop swaps in the new (expr, env) pair
instead of recursing, so tail-recursive programs run in constant host stack.
"""

from __future__ import annotations

from tau import SExpression, LispValue
from tau.errors import TauPrimitiveError
from tau.types.collections import Vector, is_list
from tau.types.environment import Environment
from tau.types.symbol import Symbol
from tau.types.tail_call import TailCall
from tau.evaluation.apply import apply
from tau.evaluation.macroexpand import macroexpand
from tau.evaluation.special_forms import SPECIAL_FORMS


def eval_ast(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate a form that is not applied: symbols, collections and literals."""
    if isinstance(expr, Symbol):
        return env.get(expr)
    if isinstance(expr, Vector):
        return Vector([evaluate(x, env) for x in expr])
    if isinstance(expr, list):
        return [evaluate(x, env) for x in expr]
    if isinstance(expr, dict):
        try:
            return {evaluate(k, env): evaluate(v, env) for k, v in expr.items()}
        except TypeError as ex:
            raise TauPrimitiveError(f"Map keys must be hashable: {ex}") from ex
    return expr


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: tail-call aware evaluation.
    """
    while True:
        if not is_list(expr):
            return eval_ast(expr, env)

        expr = macroexpand(expr, env, evaluate)
        if not is_list(expr):
            return eval_ast(expr, env)

        if not expr:
            return expr

        head = expr[0]
        form = SPECIAL_FORMS.get(head) if isinstance(head, Symbol) else None
        if form is not None:
            result = form(expr[1:], env, evaluate)
        else:
            fn, *args = eval_ast(expr, env)
            result = apply(fn, args, env, evaluate, tail=True)

        if not isinstance(result, TailCall):
            return result
        expr, env = result.expr, result.env
