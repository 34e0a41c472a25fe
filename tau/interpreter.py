from __future__ import annotations

import logging
from typing import TextIO

from tau import SExpression, LispValue
from tau.errors import TauArityError
from tau.builtin.env_builtin import register
from tau.builtin.math_builtin import register as register_math
from tau.evaluation.evaluator import evaluate
from tau.printer import pr_str
from tau.reader.parser import read_all, read_str
from tau.types.environment import Environment
from tau.types.function import Primitive
from tau.types.nil import Nil
from tau.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runtime context for Tau: owns one root Environment holding the core
    namespace and exposes read, eval and print over it.

    Hosts layer their own bindings with `define` or `child_env`; nothing in
    the core depends on process-wide state, so several interpreters can live
    side by side.
    """

    def __init__(self, prelude: str | None = None, output: TextIO | None = None):
        self.env: Environment = Environment(name="repl")
        register(self.env, output)
        register_math(self.env)
        self.env.set(Symbol("eval"), Primitive(self._eval_builtin, "eval"))
        logger.debug("Interpreter created with %d root bindings", len(self.env.vars))

        if prelude:
            self.run(prelude)

    def _eval_builtin(self, env: Environment, args: list[LispValue]) -> LispValue:
        # (eval form) always evaluates in this interpreter's root scope
        if len(args) != 1:
            raise TauArityError(f"eval expects 1 argument(s), got {len(args)}")
        return evaluate(args[0], self.env)

    def read(self, text: str) -> SExpression:
        return read_str(text)

    def eval(self, ast: SExpression, env: Environment | None = None) -> LispValue:
        return evaluate(ast, env if env is not None else self.env)

    def print(self, value: LispValue, readable: bool = True) -> str:
        return pr_str(value, readable)

    def rep(self, text: str) -> str:
        """Read one form, evaluate it and print the result readably."""
        return self.print(self.eval(self.read(text)))

    def run(self, code: str, env: Environment | None = None) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value or Nil."""
        result: LispValue = Nil
        for expr in read_all(code):
            result = self.eval(expr, env)
        return result

    def define(self, name: str | Symbol, value: LispValue) -> LispValue:
        """Bind a host value in the root environment."""
        return self.env.set(Symbol(name) if isinstance(name, str) else name, value)

    def child_env(self, name: str = "host") -> Environment:
        """A new scope under the root for host-specific bindings."""
        return Environment(self.env, name=name)
