#
# Bitsize Size - digital storage size in bytes
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import ClassVar, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type
from .numeric import finite_numeric
from .quantity import Quantity
from .units import BITS_PER_BYTE, SIZE_UNITS, BitsizeConf, UnitFamily, UnitTable


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Size(Quantity):
    """
    Storage size, stored in bytes.

    Units are binary multiples: 1 kB = 1024 B, 1 MB = 1024 kB, up to YB.
    Unit symbols are matched case-insensitively when parsing.

    Examples:
        >>> Size(1536).humanize()
        '1.5 kB'
        >>> Size("1 MB").value
        1048576
        >>> Size.mb(1).decrement("512 kB").to("kB")
        '512 kB'
    """

    units: ClassVar[UnitTable] = SIZE_UNITS
    family: ClassVar[UnitFamily] = UnitFamily.SIZE
    default_step: ClassVar[int] = 1024

    # ----- Factories -----

    @classmethod
    def new(cls, value: "Size | int | float | str") -> Self:
        return cls(value)

    @classmethod
    def from_unit(cls, value: int | float, unit: str) -> Self:
        """
        Size from a number of the given unit.

        Raises:
            UnknownUnitError: If unit is not a size unit.
        """
        spec = cls.units[unit]
        return cls._from_canonical(finite_numeric(value) * spec.factor)

    @classmethod
    def from_human_readable(cls, text: str) -> Self:
        if not isinstance(text, str):
            raise TypeError(f"str required, got {fmt_type(text)}")
        return cls(text)

    @classmethod
    def from_bits(cls, bits: int | float) -> Self:
        return cls._from_canonical(finite_numeric(bits) / BITS_PER_BYTE)

    @classmethod
    def b(cls, value: int | float) -> Self:
        return cls.from_unit(value, "B")

    @classmethod
    def kb(cls, value: int | float) -> Self:
        return cls.from_unit(value, "kB")

    @classmethod
    def mb(cls, value: int | float) -> Self:
        return cls.from_unit(value, "MB")

    @classmethod
    def gb(cls, value: int | float) -> Self:
        return cls.from_unit(value, "GB")

    @classmethod
    def tb(cls, value: int | float) -> Self:
        return cls.from_unit(value, "TB")

    @classmethod
    def pb(cls, value: int | float) -> Self:
        return cls.from_unit(value, "PB")

    @classmethod
    def eb(cls, value: int | float) -> Self:
        return cls.from_unit(value, "EB")

    @classmethod
    def zb(cls, value: int | float) -> Self:
        return cls.from_unit(value, "ZB")

    @classmethod
    def yb(cls, value: int | float) -> Self:
        return cls.from_unit(value, "YB")

    # ----- Conversion -----

    def to_bits(self) -> int | float:
        return self.value * BITS_PER_BYTE

    def to_int(self) -> int:
        return int(self.value)

    def to_kb(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("kB", precision, delimiter)

    def to_mb(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("MB", precision, delimiter)

    def to_gb(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("GB", precision, delimiter)

    def to_tb(self, precision: int | None = None, delimiter: str = BitsizeConf.DELIMITER) -> str:
        return self.to("TB", precision, delimiter)

    # ----- Transfer -----

    def get_transfer_time(self, rate) -> float:
        """Seconds needed to transfer this size at the given rate (Rate, bits per second, or rate string)."""
        from .transfer import transfer_time

        return transfer_time(self, rate)

    def get_formatted_transfer_time(self, rate, language: str | None = None, registry=None) -> str:
        from .transfer import formatted_transfer_time

        return formatted_transfer_time(self, rate, language, registry=registry)
