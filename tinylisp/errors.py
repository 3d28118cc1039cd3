from __future__ import annotations


class LispError(Exception):
    """ Base class for all recoverable tinylisp errors"""
    pass


class LispLexerError(LispError):
    """ Raised when the source holds a character no token starts with"""

    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.index = index


class LispSyntaxError(LispError):
    """ Raised when the token stream does not form a valid expression"""

    def __init__(self, message: str, index: int | None = None):
        super().__init__(message)
        self.index = index


class LispEOFError(LispSyntaxError):
    """ Raised when there is no form left to read"""


class LispEvalError(LispError):
    """ Base class for errors raised while evaluating a form"""


class LispArityError(LispEvalError):
    """ Raised when a form or closure gets the wrong number of arguments"""


class LispTypeError(LispEvalError):
    """ Raised when an argument has the wrong type for its position"""


class LispUnknownKeywordError(LispEvalError):
    """ Raised when a head symbol is neither a special form nor a bound closure"""


class LispEmptyFormError(LispEvalError):
    """ Raised when an empty list is evaluated as a call"""


class LispZeroDivisionError(LispEvalError):
    """ Raised when an integer is divided by zero"""


class LispOverflowError(LispEvalError):
    """ Raised when integer arithmetic leaves the 64-bit signed range"""


class LispRecursionError(LispEvalError):
    """ Raised when evaluation nests deeper than the configured limit"""


class EnvironmentStackError(RuntimeError):
    """ Raised when the environment is used with no frame to act on.

    This is an interpreter fault rather than a user error, so it is not a
    LispError and sessions do not report it as one.
    """
