"""
Bitsize command line interface
"""

# Standard library -----------------------------------------------------------------------------------------------------
from contextlib import contextmanager
from typing import Annotated, Optional

import typer

# Local ----------------------------------------------------------------------------------------------------------------
from .duration import LanguageRegistry, bundled_registry, format_duration
from .errors import BitsizeError
from .numeric import fmt_number
from .pack import package_version
from .rate import Rate
from .size import Size
from .transfer import formatted_transfer_time, transfer_amount, transfer_time
from .units import BitsizeConf, UnitFamily

cli = typer.Typer(no_args_is_help=True)

RateFlag = Annotated[bool, typer.Option("--rate", "-r", help="Treat VALUE as a rate instead of a size.")]
PrecisionOption = Annotated[int, typer.Option("--precision", "-p", min=0, help="Number of decimals.")]
LanguageOption = Annotated[Optional[str], typer.Option("--lang", "-l", help="Language code of the output.")]


@cli.callback(invoke_without_command=True)
def callback(
    version: Annotated[
        bool,
        typer.Option(
            "-V",
            "--version",
            help="Print bitsize version",
        ),
    ] = False,
) -> None:
    """Parse, convert and humanize storage sizes and transfer rates."""
    if version:
        typer.echo(package_version())
        raise typer.Exit()


@cli.command()
def humanize(
    value: Annotated[str, typer.Argument(help='Size in bytes or rate in bits/s, or a string like "1.5 GB".')],
    rate: RateFlag = False,
    as_bytes: Annotated[bool, typer.Option("--bytes", "-b", help="Render a rate in bytes per second.")] = False,
    precision: PrecisionOption = BitsizeConf.PRECISION,
    delimiter: Annotated[str, typer.Option("--delimiter", "-d", help="Text between number and unit.")] = BitsizeConf.DELIMITER,
) -> None:
    """Render a size or rate in its largest whole unit."""
    with _errors_reported():
        if rate:
            quantity = Rate.from_human_readable(value, display_as_bits=False if as_bytes else None)
        else:
            quantity = Size(value)
        typer.echo(quantity.humanize(precision, delimiter))


@cli.command()
def convert(
    value: Annotated[str, typer.Argument(help='Size or rate, e.g. "2048" or "1 MB".')],
    unit: Annotated[str, typer.Argument(help="Target unit symbol, e.g. kB or Mbps.")],
    rate: RateFlag = False,
    precision: Annotated[Optional[int], typer.Option("--precision", "-p", min=0, help="Number of decimals.")] = None,
) -> None:
    """Render a size or rate in the given unit."""
    with _errors_reported():
        quantity = Rate(value) if rate else Size(value)
        typer.echo(quantity.to(unit, precision))


@cli.command()
def transfer(
    size: Annotated[str, typer.Argument(help='Size to transfer, e.g. "700 MB".')],
    rate: Annotated[str, typer.Argument(help='Transfer rate, e.g. "100 Mbps".')],
    lang: LanguageOption = None,
) -> None:
    """Estimate how long a transfer takes."""
    with _errors_reported():
        seconds = transfer_time(size, rate)
        typer.echo(f"Seconds: {fmt_number(seconds, BitsizeConf.PRECISION)}")
        typer.echo(f"Time: {formatted_transfer_time(size, rate, lang, registry=_registry())}")


@cli.command()
def amount(
    rate: Annotated[str, typer.Argument(help='Transfer rate, e.g. "50 Mbps".')],
    seconds: Annotated[float, typer.Argument(help="Duration in seconds.")],
) -> None:
    """Estimate how much data is transferred at a rate in a given time."""
    with _errors_reported():
        typer.echo(transfer_amount(rate, seconds).humanize())


@cli.command()
def duration(
    seconds: Annotated[float, typer.Argument(help="Duration in seconds.")],
    lang: LanguageOption = None,
) -> None:
    """Render a number of seconds as a human-readable duration."""
    with _errors_reported():
        typer.echo(format_duration(seconds, lang, registry=_registry()))


@cli.command()
def languages() -> None:
    """List the bundled languages."""
    registry = _registry()
    for code in registry.get_loaded_languages():
        typer.echo(f"{code}\t{registry.get_language(code).name or code}")


@cli.command()
def units(
    family: Annotated[Optional[str], typer.Option("--family", "-f", help="size, bit or byte.")] = None,
) -> None:
    """List the unit symbols."""
    with _errors_reported():
        families = [UnitFamily(family)] if family else list(UnitFamily)
        for unit_family in families:
            table = Size.units if unit_family == UnitFamily.SIZE else Rate.units
            typer.echo(f"{unit_family}: {' '.join(table.symbols(unit_family))}")


# Private Methods ------------------------------------------------------------------------------------------------------

def _registry() -> LanguageRegistry:
    return bundled_registry()


@contextmanager
def _errors_reported():
    """Report library errors as "Error: ..." on stderr and exit with code 1."""
    try:
        yield
    except (BitsizeError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
