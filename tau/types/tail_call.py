from tau import SExpression
from tau.types.environment import Environment


class TailCall:
    """Returned by special forms and closure application in tail position.

    The evaluator loop replaces its current (expr, env) pair with this one
    instead of recursing.
    """

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
