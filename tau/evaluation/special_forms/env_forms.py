"""Special forms for inspecting the scope chain.

(env-chain)     -> "let <- fn <- repl"
(which-env sym) -> the same, restricted to scopes that bind sym directly
"""

from tau import SExpression, LispValue, EvaluatorFn
from tau.errors import TauArityError
from tau.types.environment import Environment
from tau.types.symbol import Symbol


def env_chain_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if tail:
        raise TauArityError("env-chain takes no arguments")
    return " <- ".join(e.name for e in env.chain())


def which_env_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1 or not isinstance(tail[0], Symbol):
        raise TauArityError("which-env expects exactly 1 symbol")
    owners = [e.name for e in env.chain() if e.has_own(tail[0])]
    return " <- ".join(owners) or "not defined"
