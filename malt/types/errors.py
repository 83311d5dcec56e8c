from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from malt.reader.lexer import Token


class MaltError(Exception):
    """ Base class for all malt errors"""

    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(message)
        self.message = message
        self.token = token


class MaltLexicalError(MaltError):
    """ Raised when the lexer produced an invalid token (e.g. an unterminated string)"""


class MaltSyntaxError(MaltError):
    """ Raised when delimiters are unbalanced or mismatched"""


class MaltEmptyInput(MaltSyntaxError):
    """ Raised when no tokens were parsed; benign for the driving loop"""


class MaltBindingError(MaltError):
    """ Raised when def! or let* bindings are malformed"""


class MaltResolutionError(MaltError):
    """ Base class for symbol resolution failures"""


class MaltUnboundSymbol(MaltResolutionError):
    """ Raised when a symbol is used before it is bound"""


class MaltNotCallable(MaltResolutionError):
    """ Raised when the head of an application is not a function"""


class MaltArityError(MaltError):
    """ Raised when the number of operands passed to a special form is incorrect"""


class MaltTypeError(MaltError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class MaltZeroDivisionError(MaltError):
    """ Raised when a builtin divides by zero"""


class NodeKindError(TypeError):
    """ Raised when a node's payload is read as the wrong kind"""


class MaltRecursionError(MaltError):
    """ Raised when a form is nested deeper than the Python call stack allows"""
