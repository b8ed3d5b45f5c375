"""
Parse numbers and human-readable strings into canonical magnitudes.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ParseError
from .formatters import fmt_type
from .numeric import finite_numeric, whole_as_int
from .units import UnitTable

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"

NUMBER_RE = re.compile(_NUMBER)
INTEGER_RE = re.compile(r"[+-]?\d+")
MAGNITUDE_RE = re.compile(rf"(?P<number>{_NUMBER})\s*(?P<unit>[A-Za-z]{{1,4}})")
UNIT_TOKEN_RE = re.compile(r"[A-Za-z]+")


# Methods --------------------------------------------------------------------------------------------------------------

def parse_number(text: str) -> int | float:
    """Convert a numeric literal to int when it has no fraction or exponent, to float otherwise."""
    if INTEGER_RE.fullmatch(text):
        return int(text)
    return float(text)


def parse_magnitude(value: int | float | str, units: UnitTable) -> int | float:
    """
    Parse a number or a "<number> <unit>" string into a canonical magnitude.

    Numbers are returned as-is, the caller is responsible for passing bytes or bits
    per second. Strings are stripped and must be fully consumed: a number, optional
    whitespace and a 1-4 letter unit symbol of the table. A string with a number only
    is treated as an already canonical value.

    Returns:
        number * factor(unit), whole results as int.

    Raises:
        ParseError: With reason "invalid numeric portion" or "unrecognized unit".
        TypeError: If value is not a number or a string.

    Examples:
        >>> parse_magnitude("1.5 kB", SIZE_UNITS)
        1536
        >>> parse_magnitude("1 MBps", RATE_UNITS)
        8000000
        >>> parse_magnitude("2048", SIZE_UNITS)
        2048
    """
    if not isinstance(value, str):
        return finite_numeric(value)

    text = value.strip()

    if NUMBER_RE.fullmatch(text):
        return finite_numeric(parse_number(text))

    match = MAGNITUDE_RE.fullmatch(text)
    if match:
        spec = units.get(match["unit"])
        if spec is None:
            raise ParseError(ParseError.UNRECOGNIZED_UNIT, value, f"'{match['unit']}'")
        number = finite_numeric(parse_number(match["number"]))
        return whole_as_int(number * spec.factor)

    # Report which half of the string is broken
    prefix = NUMBER_RE.match(text)
    if prefix is None:
        raise ParseError(ParseError.INVALID_NUMBER, value)
    rest = text[prefix.end():].strip()
    if UNIT_TOKEN_RE.fullmatch(rest):
        raise ParseError(ParseError.UNRECOGNIZED_UNIT, value, f"'{rest}'")
    raise ParseError(ParseError.INVALID_NUMBER, value)


def guess_unit(value: str, units: UnitTable):
    """Return the UnitSpec of a "<number> <unit>" string, None if it has no recognized unit."""
    if not isinstance(value, str):
        raise TypeError(f"str required, got {fmt_type(value)}")
    match = MAGNITUDE_RE.fullmatch(value.strip())
    if not match:
        return None
    return units.get(match["unit"])
