"""
Bitsize Errors

Exceptions raised by parsing, conversion, arithmetic and duration formatting.
Each error also derives from the builtin normally raised for the same condition.
"""

# Classes --------------------------------------------------------------------------------------------------------------

class BitsizeError(Exception):
    """Base class for all bitsize errors."""


class ParseError(BitsizeError, ValueError):
    """
    A string could not be parsed into a magnitude.

    Attributes:
        reason (str): "invalid numeric portion" or "unrecognized unit".
        value (str): The offending input string.
    """

    INVALID_NUMBER = "invalid numeric portion"
    UNRECOGNIZED_UNIT = "unrecognized unit"

    def __init__(self, reason: str, value: str, detail: str | None = None):
        self.reason = reason
        self.value = value
        message = f"Failed to parse {value!r}: {reason}"
        if detail:
            message += f" {detail}"
        super().__init__(message)


class UnknownUnitError(BitsizeError, ValueError):
    """Target unit of a conversion is not in the unit table."""


class InvariantError(BitsizeError, ValueError):
    """Operation would break a value invariant, e.g. decrement below zero."""


class DivideByZeroError(BitsizeError, ZeroDivisionError):
    """Divide or modulo by a zero-valued operand."""


class InvalidArgumentError(BitsizeError, ValueError):
    """Argument is of the right type but has an unusable value."""


class UnknownLanguageError(BitsizeError, LookupError):
    """Requested language is not loaded and no fallback is available."""


class MissingFormKeyError(BitsizeError, LookupError):
    """Language table has no string for a resolved unit form key."""

    def __init__(self, key: str, language: str):
        self.key = key
        self.language = language
        super().__init__(f"Language '{language}' has no unit form '{key}'")
