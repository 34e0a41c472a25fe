"""Special form: let.

(let (name1 expr1 name2 expr2 ...) body...)

Bindings are a flat list (or vector) of symbol/expression pairs, bound one at
a time in a new child scope so later expressions see earlier names. The body
is an implicit `do` whose last form is evaluated in tail position.
"""

from tau import EvaluatorFn
from tau import SExpression, LispValue
from tau.errors import TauArityError
from tau.types.collections import is_sequential
from tau.types.environment import Environment
from tau.types.nil import Nil
from tau.types.symbol import Symbol
from tau.types.tail_call import TailCall


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if not tail:
        raise TauArityError("let requires a binding list")

    bindings, body = tail[0], tail[1:]
    if not is_sequential(bindings):
        raise TauArityError("let bindings must be a list")
    if len(bindings) % 2:
        raise TauArityError("let bindings must be symbol/expression pairs")

    let_env = Environment(env, name="let")
    for name, expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise TauArityError(f"let binding name must be a Symbol, got {name!r}")
        let_env.set(name, evaluate_fn(expr, let_env))

    if not body:
        return Nil
    for expr in body[:-1]:
        evaluate_fn(expr, let_env)
    return TailCall(body[-1], let_env)
