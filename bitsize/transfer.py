"""
Transfer time and transfer amount calculations between sizes and rates.

Sizes are bytes and rates are bits per second, so every calculation goes
through the factor of 8 bits per byte:

    seconds = bytes * 8 / bits_per_second
    bytes = bits_per_second * seconds / 8
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import TYPE_CHECKING

# Local ----------------------------------------------------------------------------------------------------------------
from .duration import format_duration
from .errors import InvalidArgumentError
from .formatters import fmt_value
from .numeric import finite_numeric
from .rate import Rate
from .size import Size
from .units import BITS_PER_BYTE, BitsizeConf, UnitFamily

if TYPE_CHECKING:
    from .duration import LanguageRegistry


# Methods --------------------------------------------------------------------------------------------------------------

def transfer_time(size: Size | int | float | str, rate: Rate | int | float | str) -> float:
    """
    Seconds needed to transfer a size at a rate.

    Args:
        size: Size, number of bytes or size string ("700 MB").
        rate: Rate, number of bits per second or rate string ("100 Mbps", "10 MBps").

    Raises:
        InvalidArgumentError: If the rate is not positive.

    Examples:
        >>> transfer_time(1_000_000_000, "100 Mbps")
        80.0
    """
    bits = Size.parse(size) * BITS_PER_BYTE
    bits_per_second = Rate.parse(rate)
    if bits_per_second <= 0:
        raise InvalidArgumentError(f"Rate must be positive to calculate transfer time, got {fmt_value(rate)}")
    return bits / bits_per_second


def formatted_transfer_time(
        size: Size | int | float | str,
        rate: Rate | int | float | str,
        language: str | None = None,
        registry: "LanguageRegistry | None" = None,
) -> str:
    """Transfer time as a human-readable duration, e.g. "5 minutes, 20 seconds"."""
    return format_duration(transfer_time(size, rate), language, registry)


def transfer_amount(rate: Rate | int | float | str, seconds: int | float) -> Size:
    """
    Size transferred at a rate in the given number of seconds.

    Examples:
        >>> transfer_amount("50 Mbps", 1800).value
        11250000000
    """
    bits = Rate.parse(rate) * finite_numeric(seconds)
    return Size.from_bits(bits)


def estimate_file_size(rate: Rate | int | float | str, seconds: int | float) -> Size:
    """Size of a file recorded or streamed at a rate for the given number of seconds."""
    return transfer_amount(rate, seconds)


def humanize_bytes(
        n: int | float,
        precision: int | None = BitsizeConf.PRECISION,
        delimiter: str = BitsizeConf.DELIMITER,
) -> str:
    """Render a number of bytes in the largest size unit, e.g. 1536 -> "1.5 kB"."""
    return Size(n).humanize(precision, delimiter)


def humanize_rate(
        bits_per_second: int | float,
        family: UnitFamily | str = UnitFamily.BIT,
        precision: int | None = BitsizeConf.PRECISION,
        delimiter: str = BitsizeConf.DELIMITER,
) -> str:
    """Render a number of bits per second in the bit or byte family, e.g. 8000 -> "8 kbps" or "1 kBps"."""
    return Rate(bits_per_second).to_string(precision, delimiter, family=family)
