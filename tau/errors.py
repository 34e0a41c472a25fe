"""Error taxonomy for the Tau runtime.

Every error the runtime raises derives from TauError, so host code and the
language-level `try` form can catch them as a family.
"""

from typing import Any


class TauError(Exception):
    """ Base class for all Tau errors"""
    pass


class TauSyntaxError(TauError):
    """ Raised by the reader on malformed input"""


class TauUnboundSymbol(TauError):
    """ Raised when a symbol is looked up before it is bound"""


class TauArityError(TauError):
    """ Raised on a wrong argument count or a malformed special form"""


class TauNotCallable(TauError):
    """ Raised when the head of an application is not a function"""


class TauPrimitiveError(TauError):
    """ Raised from inside a core namespace function"""


class TauUserRaised(TauError):
    """Carries a language value raised with `throw`, unwrapped."""

    def __init__(self, value: Any):
        super().__init__(f"TauUserRaised(value={value!r})")
        self.value: Any = value
