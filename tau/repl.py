"""
Console read-eval-print loop for Tau.

Keeps one Interpreter alive so definitions persist across lines. Errors are
logged and the loop carries on; end of input exits.

    python -m tau.repl
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from tau import config
from tau.errors import TauError
from tau.interpreter import Interpreter

logger = logging.getLogger(__name__)


def rep_line(interp: Interpreter, line: str) -> str | None:
    """Evaluate one input line; None for blank input or an error (which is logged)."""
    if not line.strip():
        return None
    try:
        return interp.rep(line)
    except TauError as ex:
        logger.error("%s: %s", type(ex).__name__, ex)
    except RecursionError:
        logger.error("Host stack exhausted; is a non-tail recursion unbounded?")
    return None


def repl(interp: Interpreter, stdin: TextIO, stdout: TextIO, prompt: str) -> None:
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return
        result = rep_line(interp, line)
        if result is not None:
            stdout.write(result + "\n")


def main() -> None:
    logging.basicConfig(level=config.get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.get_recursion_limit()))
    repl(Interpreter(), sys.stdin, sys.stdout, config.get_prompt())


if __name__ == "__main__":
    main()
