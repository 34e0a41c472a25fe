from tau import EvaluatorFn
from tau import SExpression, LispValue
from tau.types.environment import Environment
from tau.types.nil import Nil
from tau.types.tail_call import TailCall


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if not tail:
        return Nil
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return TailCall(tail[-1], env)
