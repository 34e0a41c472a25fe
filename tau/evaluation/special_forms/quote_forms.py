from tau import SExpression, LispValue, EvaluatorFn
from tau.errors import TauArityError
from tau.types.collections import is_sequential
from tau.types.environment import Environment
from tau.types.symbol import Symbol
from tau.types.tail_call import TailCall

QUOTE = Symbol("quote")
UNQUOTE = Symbol("unquote")
SPLICE_UNQUOTE = Symbol("splice-unquote")
CONS = Symbol("cons")
CONCAT = Symbol("concat")


def quasiquote(ast: SExpression) -> SExpression:
    """Rewrite a quasiquoted template into code that rebuilds it.

    `(a ~b ~@c d) becomes (cons (quote a) (cons b (concat c (cons (quote d) (quote ())))))
    No evaluation happens here; unquoted forms are evaluated when the
    rewritten code runs.
    """
    if not (is_sequential(ast) and ast):
        return [QUOTE, ast]

    head = ast[0]
    if head is UNQUOTE:
        if len(ast) != 2:
            raise TauArityError("unquote expects exactly 1 argument")
        return ast[1]
    if is_sequential(head) and head and head[0] is SPLICE_UNQUOTE:
        if len(head) != 2:
            raise TauArityError("splice-unquote expects exactly 1 argument")
        return [CONCAT, head[1], quasiquote(ast[1:])]
    return [CONS, quasiquote(head), quasiquote(ast[1:])]


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise TauArityError("Quote expects exactly 1 argument")
    return tail[0]


def quasiquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> TailCall:
    if len(tail) != 1:
        raise TauArityError("Quasiquote expects exactly 1 argument")
    return TailCall(quasiquote(tail[0]), env)
