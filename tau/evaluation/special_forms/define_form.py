from tau import EvaluatorFn
from tau import SExpression, LispValue
from tau.errors import TauArityError
from tau.types.environment import Environment
from tau.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current scope and returns the value.
    """
    if len(tail) != 2:
        raise TauArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise TauArityError(f"def name must be a Symbol, got {name!r}")
    return env.set(name, evaluate_fn(val_expr, env))
