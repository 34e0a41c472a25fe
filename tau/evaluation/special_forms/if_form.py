from tau import EvaluatorFn
from tau import SExpression, LispValue
from tau.errors import TauArityError
from tau.types.environment import Environment
from tau.types.nil import Nil, is_truthy
from tau.types.tail_call import TailCall


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) not in (2, 3):
        raise TauArityError("if requires a condition, a then-expression and an optional else")

    if is_truthy(evaluate_fn(tail[0], env)):
        return TailCall(tail[1], env)
    elif len(tail) > 2:
        return TailCall(tail[2], env)
    else:
        return Nil
