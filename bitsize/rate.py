#
# Bitsize Rate - data transfer rate in bits per second
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import InitVar, dataclass
from typing import ClassVar, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidArgumentError
from .formatters import fmt_type, fmt_value
from .numeric import finite_numeric, round_half_away, whole_as_int
from .parse import NUMBER_RE, guess_unit
from .quantity import Quantity
from .units import BITS_PER_BYTE, RATE_UNITS, BitsizeConf, UnitFamily, UnitTable


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Rate(Quantity):
    """
    Data transfer rate, stored in bits per second.

    Units are decimal multiples in two families: bits (bps, kbps, Mbps, ... Ybps)
    and bytes (Bps, kBps, MBps, ... YBps), 1 Bps being 8 bps. Strings with a byte
    unit are converted to bits on parsing. The display preference only picks the
    family of humanized output and never changes the stored value.

    Args:
        value: Rate instance, number or "<number> <unit>" string.
        is_bits: A plain number or numeric-only string is bits per second if True, bytes per second if False.
        display_as_bits: Humanize in the bit family if True, in the byte family if False.

    Examples:
        >>> Rate("100 Mbps").value
        100000000
        >>> Rate.mbps(50).to_string(family="byte")
        '6.25 MBps'
        >>> Rate(1000, is_bits=False).humanize()
        '8 kbps'
    """

    is_bits: InitVar[bool] = True
    display_as_bits: bool = True

    units: ClassVar[UnitTable] = RATE_UNITS
    default_step: ClassVar[int] = 1000

    def __post_init__(self, is_bits: bool):
        canonical = self.parse(self.value)
        if not is_bits and self._is_plain_number(self.value):
            canonical *= BITS_PER_BYTE
        object.__setattr__(self, "value", whole_as_int(canonical))

    @staticmethod
    def _is_plain_number(value) -> bool:
        """True for numbers and numeric-only strings, the inputs that carry no unit."""
        if isinstance(value, str):
            return NUMBER_RE.fullmatch(value.strip()) is not None
        return not isinstance(value, Quantity)

    @property
    def family(self) -> UnitFamily:
        return UnitFamily.BIT if self.display_as_bits else UnitFamily.BYTE

    def _new(self, value: int | float) -> Self:
        return type(self)(whole_as_int(value), True, self.display_as_bits)

    @classmethod
    def _from_canonical(cls, value: int | float, display_as_bits: bool = True) -> Self:
        return cls(whole_as_int(value), True, display_as_bits)

    # ----- Factories -----

    @classmethod
    def from_unit(cls, value: int | float, unit: str, display_as_bits: bool | None = None) -> Self:
        """
        Rate from a number of the given unit.

        The display preference defaults to the family of the unit.

        Raises:
            UnknownUnitError: If unit is not a rate unit.
        """
        spec = cls.units[unit]
        if display_as_bits is None:
            display_as_bits = spec.family == UnitFamily.BIT
        return cls._from_canonical(finite_numeric(value) * spec.factor, display_as_bits)

    @classmethod
    def from_human_readable(cls, text: str, display_as_bits: bool | None = None) -> Self:
        """Parse a rate string, displaying it in the family of its unit unless told otherwise."""
        if not isinstance(text, str):
            raise TypeError(f"str required, got {fmt_type(text)}")
        if display_as_bits is None:
            spec = guess_unit(text, cls.units)
            display_as_bits = spec is None or spec.family == UnitFamily.BIT
        return cls(text, True, display_as_bits)

    @classmethod
    def bps(cls, value: int | float, display_as_bits: bool = True) -> Self:
        return cls.from_unit(value, "bps", display_as_bits)

    @classmethod
    def kbps(cls, value: int | float, display_as_bits: bool = True) -> Self:
        return cls.from_unit(value, "kbps", display_as_bits)

    @classmethod
    def mbps(cls, value: int | float, display_as_bits: bool = True) -> Self:
        return cls.from_unit(value, "Mbps", display_as_bits)

    @classmethod
    def gbps(cls, value: int | float, display_as_bits: bool = True) -> Self:
        return cls.from_unit(value, "Gbps", display_as_bits)

    @classmethod
    def tbps(cls, value: int | float, display_as_bits: bool = True) -> Self:
        return cls.from_unit(value, "Tbps", display_as_bits)

    @classmethod
    def byte_ps(cls, value: int | float, display_as_bits: bool = False) -> Self:
        return cls.from_unit(value, "Bps", display_as_bits)

    @classmethod
    def kbyte_ps(cls, value: int | float, display_as_bits: bool = False) -> Self:
        return cls.from_unit(value, "kBps", display_as_bits)

    @classmethod
    def mbyte_ps(cls, value: int | float, display_as_bits: bool = False) -> Self:
        return cls.from_unit(value, "MBps", display_as_bits)

    @classmethod
    def gbyte_ps(cls, value: int | float, display_as_bits: bool = False) -> Self:
        return cls.from_unit(value, "GBps", display_as_bits)

    @classmethod
    def tbyte_ps(cls, value: int | float, display_as_bits: bool = False) -> Self:
        return cls.from_unit(value, "TBps", display_as_bits)

    def with_display_as(self, display_as_bits: bool) -> Self:
        return type(self)(self.value, True, display_as_bits)

    # ----- Conversion and formatting -----

    def to_bits(self) -> int | float:
        return self.value

    def to_bytes(self) -> int | float:
        return whole_as_int(self.value / BITS_PER_BYTE)

    def get_value(self, unit: str, precision: int | None = None) -> int | float:
        """
        Value in a unit as a number; "bit" and "byte" stand for bits and bytes per second.
        """
        if unit in (UnitFamily.BIT, UnitFamily.BYTE):
            value = self.to_bits() if unit == UnitFamily.BIT else self.to_bytes()
            return value if precision is None else round_half_away(value, precision)
        return super().get_value(unit, precision)

    def humanize(
            self,
            precision: int | None = BitsizeConf.PRECISION,
            delimiter: str = BitsizeConf.DELIMITER,
            *,
            family: UnitFamily | str | None = None,
    ) -> str:
        """Value in the largest unit of the family where it is >= 1; family defaults to the display preference."""
        return self.units.humanize(self.value, family or self.family, precision, delimiter)

    def to_string(
            self,
            precision: int | None = BitsizeConf.PRECISION,
            delimiter: str = BitsizeConf.DELIMITER,
            *,
            family: UnitFamily | str | None = None,
    ) -> str:
        return self.humanize(precision, delimiter, family=family)

    def to_kbps(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("kbps", precision, delimiter)

    def to_mbps(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("Mbps", precision, delimiter)

    def to_gbps(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("Gbps", precision, delimiter)

    def to_tbps(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("Tbps", precision, delimiter)

    def to_kbyte_ps(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("kBps", precision, delimiter)

    def to_mbyte_ps(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("MBps", precision, delimiter)

    def to_gbyte_ps(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("GBps", precision, delimiter)

    # ----- Arithmetic -----

    def throttle(self, factor: int | float) -> Self:
        """
        Scale down by a factor in [0, 1].

        Raises:
            InvalidArgumentError: If the factor is outside [0, 1].
        """
        factor = finite_numeric(factor)
        if not 0 <= factor <= 1:
            raise InvalidArgumentError(f"Throttle factor must be between 0 and 1, got {fmt_value(factor)}")
        return self.multiply(factor)

    # ----- Transfer -----

    def calculate_transfer_time(self, size) -> float:
        """Seconds needed to transfer a size (Size, bytes, or size string) at this rate."""
        from .transfer import transfer_time

        return transfer_time(size, self)

    def get_formatted_transfer_time(self, size, language: str | None = None, registry=None) -> str:
        from .transfer import formatted_transfer_time

        return formatted_transfer_time(size, self, language, registry=registry)

    def calculate_transfer_amount(self, seconds: int | float):
        """Size transferred at this rate in the given number of seconds."""
        from .transfer import transfer_amount

        return transfer_amount(self, seconds)

    def estimate_file_size(self, seconds: int | float):
        return self.calculate_transfer_amount(seconds)
