"""Special form: try.

(try body (catch e handler))

Evaluates body. If it raises a TauError and a catch clause is present, the
handler runs in tail position in a new scope where `e` is bound to:
- the raw value, for errors raised with `throw`
- the error message string, for errors raised by the runtime itself
Without a catch clause the error propagates unchanged.
"""

import logging

from tau import EvaluatorFn
from tau import SExpression, LispValue
from tau.errors import TauArityError, TauError, TauUserRaised
from tau.types.collections import is_list
from tau.types.environment import Environment
from tau.types.symbol import Symbol
from tau.types.tail_call import TailCall

logger = logging.getLogger(__name__)

CATCH = Symbol("catch")


def _catch_clause(tail: list[SExpression]) -> list[SExpression] | None:
    if len(tail) == 1:
        return None
    clause = tail[1]
    if not (
        is_list(clause)
        and len(clause) == 3
        and clause[0] is CATCH
        and isinstance(clause[1], Symbol)
    ):
        raise TauArityError("try expects a (catch symbol handler) clause")
    return clause


def try_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) not in (1, 2):
        raise TauArityError("try requires a body and an optional catch clause")

    clause = _catch_clause(tail)
    try:
        return evaluate_fn(tail[0], env)
    except TauError as ex:
        if clause is None:
            raise
        logger.debug("try caught %s: %s", type(ex).__name__, ex)
        caught = ex.value if isinstance(ex, TauUserRaised) else str(ex)
        _, name, handler = clause
        return TailCall(handler, Environment(env, [name], [caught], name="catch"))
