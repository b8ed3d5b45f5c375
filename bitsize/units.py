#
# Bitsize Units of Measurement
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import UnknownUnitError
from .formatters import fmt_value
from .numeric import fmt_number, round_half_away, whole_as_int


# @formatter:off

class BitsizeConf:
    PRECISION = 2
    DELIMITER = " "
    FALLBACK_LANGUAGE = "en"
    TIME_FORMAT = "{value} {unit}"
    TIME_SEPARATOR = ", "
    LANGUAGE_CODE_PATTERN = r"^[a-z]{2}(?:[-_][a-zA-Z]{2})?$"


SIZE_SYMBOLS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
BIT_RATE_SYMBOLS = ("bps", "kbps", "Mbps", "Gbps", "Tbps", "Pbps", "Ebps", "Zbps", "Ybps")
BYTE_RATE_SYMBOLS = ("Bps", "kBps", "MBps", "GBps", "TBps", "PBps", "EBps", "ZBps", "YBps")

BITS_PER_BYTE = 8
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class UnitFamily(StrEnum):
    """
    Unit families.

    Attributes:
        SIZE (str) : Storage size, base 1024, canonical unit is the byte
        BIT (str)  : Transfer rate in bits, base 1000, canonical unit is bits per second
        BYTE (str) : Transfer rate in bytes, base 1000, 8x the BIT unit at the same exponent
    """
    SIZE = "size"
    BIT = "bit"
    BYTE = "byte"


@dataclass(frozen=True)
class UnitSpec:
    """A recognized unit: symbol, power of the family base and the family itself."""

    symbol: str
    exponent: int
    base: int
    family: UnitFamily

    @property
    def factor(self) -> int:
        """Number of canonical units (bytes, or bits per second) in one of this unit."""
        factor = self.base ** self.exponent
        if self.family == UnitFamily.BYTE:
            factor *= BITS_PER_BYTE
        return factor


class UnitTable:
    """
    Fixed set of UnitSpec-s of one or more families, totally ordered by exponent per family.

    Symbols are looked up exactly first, then case-insensitively. A case-insensitive
    match that hits several families (`mbps` is both Mbps and MBps) is decided by
    the case of the bit/byte marker `b`/`B` in front of `ps`.
    """

    def __init__(self, specs: tuple[UnitSpec, ...]):
        self._specs = specs
        self._by_symbol: dict[str, UnitSpec] = {}
        self._by_folded: dict[str, list[UnitSpec]] = {}
        for spec in specs:
            if spec.symbol in self._by_symbol:
                raise ValueError(f"Duplicate unit symbol {fmt_value(spec.symbol)}")
            self._by_symbol[spec.symbol] = spec
            self._by_folded.setdefault(spec.symbol.casefold(), []).append(spec)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self.get(symbol) is not None

    def __getitem__(self, symbol: str) -> UnitSpec:
        spec = self.get(symbol) if isinstance(symbol, str) else None
        if spec is None:
            raise UnknownUnitError(
                f"Unsupported unit {fmt_value(symbol)}, expected one of {', '.join(self.symbols())}"
            )
        return spec

    def __iter__(self) -> Iterator[UnitSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"UnitTable({', '.join(self.symbols())})"

    @property
    def families(self) -> tuple[UnitFamily, ...]:
        return tuple(dict.fromkeys(spec.family for spec in self._specs))

    def get(self, symbol: str) -> UnitSpec | None:
        """Lookup a unit by symbol, None if not recognized."""
        if symbol in self._by_symbol:
            return self._by_symbol[symbol]

        candidates = self._by_folded.get(symbol.casefold(), [])
        if len(candidates) <= 1:
            return candidates[0] if candidates else None

        # Ambiguous ignoring case, the bit/byte marker decides
        marked = [c for c in candidates if len(symbol) >= 3 and c.symbol[-3] == symbol[-3]]
        if len(marked) == 1:
            return marked[0]
        bits = [c for c in candidates if c.family == UnitFamily.BIT]
        return bits[0] if bits else candidates[0]

    def specs(self, family: UnitFamily | str | None = None) -> tuple[UnitSpec, ...]:
        """Unit specs in ascending exponent order, optionally of a single family."""
        if family is None:
            return self._specs
        family = self._family(family)
        return tuple(spec for spec in self._specs if spec.family == family)

    def symbols(self, family: UnitFamily | str | None = None) -> tuple[str, ...]:
        return tuple(spec.symbol for spec in self.specs(family))

    def base_unit(self, family: UnitFamily | str) -> UnitSpec:
        """Unit with exponent 0 of the family."""
        return self.specs(family)[0]

    def convert(self, magnitude: int | float, unit: str | UnitSpec, precision: int | None = None) -> int | float:
        """
        Express a canonical magnitude in the given unit.

        Raises:
            UnknownUnitError: If unit is not in this table.
        """
        spec = unit if isinstance(unit, UnitSpec) else self[unit]
        value = whole_as_int(magnitude / spec.factor)
        if precision is not None:
            value = round_half_away(value, precision)
        return value

    def render(
            self,
            magnitude: int | float,
            unit: str | UnitSpec,
            precision: int | None = None,
            delimiter: str = BitsizeConf.DELIMITER,
    ) -> str:
        """
        Render a canonical magnitude in a fixed unit.

        With precision, the number is padded to exactly that many decimals: "1.500 kB".
        """
        spec = unit if isinstance(unit, UnitSpec) else self[unit]
        value = whole_as_int(magnitude / spec.factor)
        return f"{fmt_number(value, precision, fixed=precision is not None)}{delimiter}{spec.symbol}"

    def humanize(
            self,
            magnitude: int | float,
            family: UnitFamily | str,
            precision: int | None = BitsizeConf.PRECISION,
            delimiter: str = BitsizeConf.DELIMITER,
    ) -> str:
        """
        Render a canonical magnitude in the largest unit of the family where it is >= 1.

        Values below 1 of the base unit, zero included, are rendered in the base unit.
        Trailing zeros are trimmed: 1536 bytes is "1.5 kB", 1048576 bytes is "1 MB".
        """
        specs = self.specs(family)
        selected = specs[0]
        if magnitude != 0:
            for spec in reversed(specs):
                if abs(magnitude) / spec.factor >= 1:
                    selected = spec
                    break

        value = whole_as_int(magnitude / selected.factor)
        return f"{fmt_number(value, precision)}{delimiter}{selected.symbol}"

    def _family(self, family: UnitFamily | str) -> UnitFamily:
        try:
            family = UnitFamily(family)
        except ValueError:
            raise UnknownUnitError(
                f"Invalid unit family {fmt_value(family)}, expected one of {', '.join(self.families)}"
            ) from None
        if family not in self.families:
            raise UnknownUnitError(
                f"Invalid unit family {fmt_value(family)}, expected one of {', '.join(self.families)}"
            )
        return family


# Methods --------------------------------------------------------------------------------------------------------------

def _family_specs(symbols: tuple[str, ...], base: int, family: UnitFamily) -> tuple[UnitSpec, ...]:
    return tuple(UnitSpec(symbol, exp, base, family) for exp, symbol in enumerate(symbols))


SIZE_UNITS = UnitTable(_family_specs(SIZE_SYMBOLS, 1024, UnitFamily.SIZE))

RATE_UNITS = UnitTable(
    _family_specs(BIT_RATE_SYMBOLS, 1000, UnitFamily.BIT)
    + _family_specs(BYTE_RATE_SYMBOLS, 1000, UnitFamily.BYTE)
)


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Byte-family rates must stay exactly 8x the bit-family rate at the same exponent.
if any(
        byte.factor != BITS_PER_BYTE * bit.factor
        for bit, byte in zip(RATE_UNITS.specs(UnitFamily.BIT), RATE_UNITS.specs(UnitFamily.BYTE))
):
    raise AssertionError("Configuration Error: byte rate units must be 8x the bit rate units.")
