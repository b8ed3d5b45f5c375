"""
Numeric normalization and rendering for magnitudes.

Operands from the stdlib and third-party libraries are normalized to plain
int or float before any arithmetic; results are rendered without scientific
notation so that humanized strings can be parsed back.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidArgumentError
from .formatters import fmt_type, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def std_numeric(value) -> int | float:
    """
    Convert a numeric operand to a standard Python int or float.

    Supports int, float, Decimal, Fraction and third-party scalars implementing
    __index__ (NumPy integers) or __float__ (NumPy floats). Integer-valued
    Decimal and Fraction become int so large byte counts keep full precision.

    Raises:
        TypeError: For bool, None, str and any other unsupported type.

    Examples:
        >>> std_numeric(42)
        42
        >>> std_numeric(Decimal("1536.0"))
        1536
        >>> std_numeric(Fraction(3, 2))
        1.5
    """
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if isinstance(value, (int, float)):
        return value

    # NumPy integers and other exact integer types
    if hasattr(value, "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    type_name = type(value).__name__
    if type_name in ("Decimal", "Fraction") and hasattr(value, "__int__"):
        try:
            as_int = int(value)
            if value == type(value)(as_int):
                return as_int
        except (TypeError, ValueError, OverflowError):
            pass

    if hasattr(value, "__float__"):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(f"unsupported numeric type: {fmt_type(value)}, expected int | float | Decimal | Fraction")


def finite_numeric(value) -> int | float:
    """Same as std_numeric() but also rejects NaN and infinite values."""
    number = std_numeric(value)
    if isinstance(number, float) and not math.isfinite(number):
        raise InvalidArgumentError(f"finite number required, got {fmt_value(number)}")
    return number


def whole_as_int(number: int | float) -> int | float:
    """Return whole floats as int, everything else unchanged."""
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def round_half_away(number: int | float, precision: int) -> int | float:
    """
    Round to precision decimals, halves away from zero.

    Unlike the builtin round(), 2.5 rounds to 3 and 0.125 rounds to 0.13.
    Whole results are returned as int.
    """
    _validate_precision(precision)
    rounded = _quantize(number, precision)
    if rounded == rounded.to_integral_value():
        return int(rounded)
    return float(rounded)


def fmt_number(number: int | float, precision: int | None = None, fixed: bool = False) -> str:
    """
    Render a number in positional notation.

    Args:
        number: The int or float to render.
        precision: Decimal places to round to, no rounding if None.
        fixed: Pad to exactly `precision` decimals instead of trimming trailing zeros.

    Examples:
        >>> fmt_number(1.5, 2)
        '1.5'
        >>> fmt_number(1.5, 3, fixed=True)
        '1.500'
        >>> fmt_number(1.0e-6)
        '0.000001'
        >>> fmt_number(1048576.0)
        '1048576'
    """
    if precision is None:
        if isinstance(number, int):
            return str(number)
        if number == 0:
            return "0"
        return _positional(Decimal(repr(number)))

    _validate_precision(precision)
    rounded = _quantize(number, precision)
    if fixed:
        text = format(rounded, "f")
    else:
        text = _positional(rounded)

    # Avoid rendering "-0" or "-0.00" for values rounded to zero
    if rounded.is_zero() and text.startswith("-"):
        text = text[1:]
    return text


# Private Methods ------------------------------------------------------------------------------------------------------

def _quantize(number: int | float, precision: int) -> Decimal:
    exact = Decimal(number) if isinstance(number, int) else Decimal(repr(number))
    with localcontext() as ctx:
        # Quantizing needs room for every integer digit plus the requested decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + precision + 2)
        return exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)


def _positional(number: Decimal) -> str:
    """Shortest positional text of a Decimal, no exponent and no trailing zeros."""
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _validate_precision(precision: int):
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be int, got {fmt_type(precision)}")
    if precision < 0:
        raise InvalidArgumentError(f"precision must be >= 0, got {precision}")
