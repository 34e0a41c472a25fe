"""Special form exposing the macro expander to Lisp code.

(macroexpand form) expands head-position macros in `form` to a fixed point and
returns the expansion as data. The argument itself is not evaluated, so
(macroexpand (unless c a b)) yields (if c b a).
"""

from tau import SExpression, EvaluatorFn
from tau.errors import TauArityError
from tau.types.environment import Environment
from tau.evaluation.macroexpand import macroexpand


def macroexpand_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> SExpression:
    if len(tail) != 1:
        raise TauArityError("macroexpand expects exactly 1 argument")
    return macroexpand(tail[0], env, evaluate_fn)
