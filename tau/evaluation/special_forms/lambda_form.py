from tau import EvaluatorFn
from tau import SExpression, LispValue
from tau.errors import TauArityError
from tau.types.collections import is_sequential
from tau.types.environment import Environment, VARIADIC
from tau.types.function import Closure
from tau.types.nil import Nil
from tau.types.symbol import Symbol

DO = Symbol("do")


def make_closure(
    tail: list[SExpression], env: Environment, form_name: str, is_macro: bool = False
) -> Closure:
    """Build a closure from (params body...), shared by fn and defmacro."""
    if not tail:
        raise TauArityError(f"{form_name} requires a parameter list")

    params, body_forms = tail[0], tail[1:]
    if not is_sequential(params) or not all(isinstance(p, Symbol) for p in params):
        raise TauArityError(f"{form_name} parameters must be a list of symbols")
    if VARIADIC in params and params.index(VARIADIC) != len(params) - 2:
        raise TauArityError(f"{form_name} '&' must be followed by exactly one symbol")

    # Several body forms are an implicit do; none at all returns nil.
    if not body_forms:
        body = Nil
    elif len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [DO, *body_forms]

    return Closure(list(params), body, env, is_macro=is_macro)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return make_closure(tail, env, "fn")
