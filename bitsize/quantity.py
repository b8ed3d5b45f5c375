#
# Bitsize Quantity - arithmetic and comparison shared by Size and Rate
#

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any, ClassVar, Iterable, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import DivideByZeroError, InvalidArgumentError, InvariantError, ParseError
from .formatters import fmt_type, fmt_value
from .numeric import finite_numeric, whole_as_int
from .parse import parse_magnitude
from .units import BitsizeConf, UnitFamily, UnitTable


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class CompareMode(StrEnum):
    """
    How a comparison against a collection of operands is combined.

    Attributes:
        ALL (str) : The predicate holds for every operand
        ANY (str) : The predicate holds for at least one operand
    """
    ALL = "all"
    ANY = "any"


@dataclass(frozen=True, eq=False)
class Quantity:
    """
    Immutable magnitude in the canonical unit of its family.

    Operands of every arithmetic and comparison method may be an instance of the
    same class, a number in the canonical unit, or a human-readable string; they are
    parsed first and the result is always a new instance.

    Subclasses define the unit table, the family used for humanized output and
    how a new instance is built from a canonical magnitude.
    """

    value: int | float

    units: ClassVar[UnitTable]
    family: ClassVar[UnitFamily]
    default_step: ClassVar[int]

    COMPARE_LT: ClassVar[int] = -1
    COMPARE_EQ: ClassVar[int] = 0
    COMPARE_GT: ClassVar[int] = 1

    def __post_init__(self):
        object.__setattr__(self, "value", self.parse(self.value))

    # ----- Parsing -----

    @classmethod
    def parse(cls, value: "Quantity | int | float | str") -> int | float:
        """
        Canonical magnitude of an operand.

        Raises:
            ParseError: If a string cannot be parsed.
            TypeError: If the operand is a Quantity of another class or not a number or string.
        """
        if isinstance(value, cls):
            return value.value
        if isinstance(value, Quantity):
            raise TypeError(f"{cls.__name__} operand required, got {fmt_type(value)}")
        return parse_magnitude(value, cls.units)

    def _new(self, value: int | float) -> Self:
        """Instance of the same class and display options from a canonical magnitude."""
        return type(self)(whole_as_int(value))

    @classmethod
    def _from_canonical(cls, value: int | float, **options) -> Self:
        return cls(whole_as_int(value), **options)

    # ----- Arithmetic -----

    def increment(self, operand) -> Self:
        return self._new(self.value + self.parse(operand))

    def decrement(self, operand) -> Self:
        """
        Subtract an operand.

        Raises:
            InvariantError: If the operand is greater than this value, the result would be negative.
        """
        subtrahend = self.parse(operand)
        if subtrahend > self.value:
            raise InvariantError(
                f"Value to decrement ({fmt_value(subtrahend)}) cannot be greater "
                f"than the current value ({fmt_value(self.value)})"
            )
        return self._new(self.value - subtrahend)

    def multiply(self, factor: int | float) -> Self:
        """Multiply by a plain scalar, the factor is not parsed as a magnitude."""
        return self._new(self.value * finite_numeric(factor))

    def divide(self, operand) -> Self:
        """
        Divide by a parsed operand: value / parse(operand).

        Raises:
            DivideByZeroError: If the operand is zero.
        """
        divisor = self._nonzero(operand, "divide")
        return self._new(self.value / divisor)

    def modulo(self, operand) -> Self:
        """
        Remainder of value / parse(operand), carrying the sign of this value.

        Raises:
            DivideByZeroError: If the operand is zero.
        """
        divisor = self._nonzero(operand, "modulo")
        remainder = abs(self.value) % abs(divisor)
        return self._new(-remainder if self.value < 0 else remainder)

    def abs(self) -> Self:
        return self._new(abs(self.value))

    def max(self, *operands) -> Self:
        """Largest of this value and the operands, given one by one or as a collection."""
        largest = self.value
        for item in _flatten(operands):
            largest = max(largest, self.parse(item))
        return self._new(largest)

    def min(self, *operands) -> Self:
        """Smallest of this value and the operands, given one by one or as a collection."""
        smallest = self.value
        for item in _flatten(operands):
            smallest = min(smallest, self.parse(item))
        return self._new(smallest)

    # ----- Comparison -----

    def compare(self, operand) -> int:
        """
        Compare to a single operand.

        Returns:
            COMPARE_GT (1) if this value is greater, COMPARE_LT (-1) if smaller, COMPARE_EQ (0) on tie.
        """
        other = self.parse(operand)
        if self.value == other:
            return self.COMPARE_EQ
        return self.COMPARE_GT if self.value > other else self.COMPARE_LT

    def equal_to(self, operand, mode: CompareMode | str = CompareMode.ALL) -> bool:
        return self._holds(operand, mode, lambda other: self.value == other)

    def less_than(self, operand, mode: CompareMode | str = CompareMode.ALL) -> bool:
        return self._holds(operand, mode, lambda other: self.value < other)

    def greater_than(self, operand, mode: CompareMode | str = CompareMode.ALL) -> bool:
        return self._holds(operand, mode, lambda other: self.value > other)

    def less_than_or_equal(self, operand, mode: CompareMode | str = CompareMode.ALL) -> bool:
        return self._holds(operand, mode, lambda other: self.value <= other)

    def greater_than_or_equal(self, operand, mode: CompareMode | str = CompareMode.ALL) -> bool:
        return self._holds(operand, mode, lambda other: self.value >= other)

    def between(self, minimum, maximum) -> bool:
        """True if minimum <= value <= maximum."""
        return self.parse(minimum) <= self.value <= self.parse(maximum)

    def in_ranges(self, ranges: Iterable, mode: CompareMode | str = CompareMode.ANY) -> bool:
        """
        Check the value against (min, max) pairs, inclusive on both ends.

        Args:
            ranges: Iterable of (min, max) pairs of operands.
            mode: ANY (default) if a single range is enough, ALL if the value must be in every range.
        """
        mode = _compare_mode(mode)
        results = []
        for pair in ranges:
            try:
                minimum, maximum = pair
            except (TypeError, ValueError):
                raise InvalidArgumentError(f"(min, max) pair required, got {fmt_value(pair)}") from None
            results.append(self.between(minimum, maximum))
        return all(results) if mode == CompareMode.ALL else any(results)

    # ----- State -----

    def is_zero(self) -> bool:
        return self.value == 0

    def is_positive(self) -> bool:
        return self.value > 0

    def is_negative(self) -> bool:
        return self.value < 0

    # ----- Conversion and formatting -----

    def to(self, unit: str, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        """
        Value in a fixed unit as a string.

        Examples:
            >>> Size(1536).to("kB", 3, "_")
            '1.500_kB'
        """
        return self.units.render(self.value, unit, precision, delimiter)

    def get_value(self, unit: str, precision: int | None = None) -> int | float:
        """Value in a fixed unit as a number, rounded if precision is given."""
        return self.units.convert(self.value, unit, precision)

    def humanize(self, precision: int | None = BitsizeConf.PRECISION, delimiter: str = BitsizeConf.DELIMITER) -> str:
        """Value in the largest unit where it is >= 1."""
        return self.units.humanize(self.value, self.family, precision, delimiter)

    def to_string(self, precision: int | None = BitsizeConf.PRECISION, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.humanize(precision, delimiter)

    def __str__(self) -> str:
        return self.humanize()

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    # ----- Operators -----

    def __add__(self, other):
        try:
            return self.increment(other)
        except (TypeError, ParseError):
            return NotImplemented

    def __radd__(self, other):
        # sum() starts from 0
        return self.__add__(other)

    def __sub__(self, other):
        try:
            subtrahend = self.parse(other)
        except (TypeError, ParseError):
            return NotImplemented
        return self.decrement(subtrahend)

    def __mul__(self, other):
        if isinstance(other, (Quantity, str)):
            return NotImplemented
        try:
            return self.multiply(other)
        except TypeError:
            return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Ratio as a float for two quantities, a scaled quantity otherwise."""
        if isinstance(other, type(self)):
            return self.value / self._nonzero(other, "divide")
        try:
            return self.divide(other)
        except TypeError:
            return NotImplemented

    def __mod__(self, other):
        try:
            return self.modulo(other)
        except TypeError:
            return NotImplemented

    def __abs__(self):
        return self.abs()

    def __eq__(self, other):
        try:
            return self.value == self.parse(other)
        except (TypeError, ParseError):
            return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __lt__(self, other):
        return self._order(other, lambda a, b: a < b)

    def __le__(self, other):
        return self._order(other, lambda a, b: a <= b)

    def __gt__(self, other):
        return self._order(other, lambda a, b: a > b)

    def __ge__(self, other):
        return self._order(other, lambda a, b: a >= b)

    # ----- Collections -----

    @classmethod
    def range(cls, start, end, step=None, **options) -> list[Self]:
        """
        Values from start to end inclusive, step apart.

        Raises:
            InvalidArgumentError: If end < start or step <= 0.
        """
        start_value = cls.parse(start)
        end_value = cls.parse(end)
        step_value = cls.parse(cls.default_step if step is None else step)

        if end_value < start_value:
            raise InvalidArgumentError(
                f"End value {fmt_value(end_value)} cannot be less than start value {fmt_value(start_value)}"
            )
        if step_value <= 0:
            raise InvalidArgumentError(f"Step value must be greater than zero, got {fmt_value(step_value)}")

        result = []
        index = 0
        current = start_value
        while current <= end_value:
            result.append(cls._from_canonical(current, **options))
            index += 1
            # Multiplying the step avoids accumulating float error
            current = start_value + index * step_value
        return result

    @classmethod
    def sum(cls, values: Iterable, **options) -> Self:
        total = 0
        for item in values:
            total += cls.parse(item)
        return cls._from_canonical(total, **options)

    @classmethod
    def average(cls, values: Iterable, **options) -> Self:
        """
        Arithmetic mean of the values.

        Raises:
            InvalidArgumentError: If values is empty.
        """
        items = list(values)
        if not items:
            raise InvalidArgumentError("Cannot compute average of an empty collection")
        return cls._from_canonical(cls.sum(items).value / len(items), **options)

    @classmethod
    def maximum(cls, values: Iterable, **options) -> Self:
        items = list(values)
        if not items:
            raise InvalidArgumentError("Cannot find maximum of an empty collection")
        return cls._from_canonical(max(cls.parse(item) for item in items), **options)

    @classmethod
    def minimum(cls, values: Iterable, **options) -> Self:
        items = list(values)
        if not items:
            raise InvalidArgumentError("Cannot find minimum of an empty collection")
        return cls._from_canonical(min(cls.parse(item) for item in items), **options)

    # ----- Private -----

    def _nonzero(self, operand, operation: str) -> int | float:
        divisor = self.parse(operand)
        if divisor == 0:
            raise DivideByZeroError(f"Cannot {operation} {fmt_value(self.value)} by zero")
        return divisor

    def _holds(self, operand, mode: CompareMode | str, predicate) -> bool:
        mode = _compare_mode(mode)
        if not _is_collection(operand):
            return predicate(self.parse(operand))
        results = (predicate(self.parse(item)) for item in operand)
        return all(results) if mode == CompareMode.ALL else any(results)

    def _order(self, other, predicate):
        try:
            return predicate(self.value, self.parse(other))
        except (TypeError, ParseError):
            return NotImplemented


# Private Methods ------------------------------------------------------------------------------------------------------

def _compare_mode(mode: CompareMode | str) -> CompareMode:
    try:
        return CompareMode(mode)
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid mode {fmt_value(mode)}, expected one of {', '.join(CompareMode)}"
        ) from None


def _is_collection(obj: Any) -> bool:
    return isinstance(obj, abc.Iterable) and not isinstance(obj, (str, bytes, Quantity))


def _flatten(operands: tuple) -> list:
    """A single collection argument expands to its items."""
    if len(operands) == 1 and _is_collection(operands[0]):
        return list(operands[0])
    return list(operands)
