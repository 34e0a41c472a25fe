"""Head-position macro expansion.

A list whose head symbol is bound to a macro closure is rewritten by calling
that closure on the unevaluated remaining elements; this repeats until the
head is no longer a macro.
"""

from __future__ import annotations

import logging

from tau import SExpression, EvaluatorFn
from tau.types.collections import is_list
from tau.types.environment import Environment
from tau.types.function import is_macro
from tau.types.symbol import Symbol

logger = logging.getLogger(__name__)


def expand_1(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression | None:
    """Expand the head macro once, or return None if `form` is not a macro call."""
    if not (is_list(form) and form and isinstance(form[0], Symbol)):
        return None
    # find() rather than get(): an unbound head is not an error here
    scope = env.find(form[0])
    if scope is None:
        return None
    macro = scope.vars[form[0]]
    if not is_macro(macro):
        return None
    logger.debug("Expanding macro %s", form[0])
    return evaluate_fn(macro.body, macro.extend_env(form[1:]))


def macroexpand(form: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Expand head-position macros to a fixed point."""
    while (expanded := expand_1(form, env, evaluate_fn)) is not None:
        form = expanded
    return form
