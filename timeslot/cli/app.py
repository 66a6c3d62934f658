"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from pendulum import DateTime
from rich.console import Console
from rich.table import Table

from ..config import AppConfig
from ..domain.exceptions import TimeslotError
from ..domain.models import TimeSlot
from ..domain.rounding import Granularity, round_down

app = typer.Typer(
    name="timeslot",
    help="Inspect time slots and round date-time values",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)

ORDERING_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def _parse_datetime(text: str) -> DateTime:
    """
    Parse a date-time argument into a naive value.

    The wall-clock fields of the input are kept; any offset is dropped.
    """
    try:
        parsed = pendulum.parse(text)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] Cannot parse '{text}' as date-time: {e}")
        raise typer.Exit(1)

    if not isinstance(parsed, DateTime):
        console.print(f"[bold red]Error:[/bold red] '{text}' is not a date-time")
        raise typer.Exit(1)

    return parsed.naive()


def _build_slot(start: str, finish: str) -> TimeSlot:
    try:
        return TimeSlot(start=_parse_datetime(start), finish=_parse_datetime(finish))
    except TimeslotError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _config(ctx: typer.Context) -> AppConfig:
    return ctx.obj if isinstance(ctx.obj, AppConfig) else AppConfig()


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./timeslot.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Load configuration and set up logging for all commands.
    """
    try:
        config = AppConfig.load_or_default(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    logging.basicConfig(level=logging.DEBUG if verbose else config.log_level)
    logger.debug("Using configuration %s", config)
    ctx.obj = config


@app.command("round")
def round_command(
    ctx: typer.Context,
    value: Annotated[str, typer.Argument(help="Date-time to round, e.g. '2016-11-23 09:44'")],
    granularity: Annotated[Optional[str], typer.Option("--granularity", "-g", help="minute, ten_minutes, fifteen_minutes, hour or day")] = None,
):
    """
    Round a date-time down to the given granularity.

    Examples:

        timeslot round "2016-11-23 09:44:12"

        timeslot round "2016-11-23 09:44" --granularity hour
    """
    config = _config(ctx)
    dt = _parse_datetime(value)

    try:
        selected = Granularity.parse(granularity) if granularity else config.default_granularity
    except TimeslotError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    rounded = round_down(dt, selected)
    logger.debug("Rounded %s to %s at %s", dt, rounded, selected.value)
    console.print(rounded.format(config.datetime_format))


@app.command()
def contains(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="Slot start")],
    finish: Annotated[str, typer.Argument(help="Slot finish")],
    point: Annotated[str, typer.Argument(help="Date-time to test")],
):
    """
    Check whether a date-time lies within a slot (both ends inclusive).
    """
    config = _config(ctx)
    slot = _build_slot(start, finish)
    dt = _parse_datetime(point)

    fmt = config.datetime_format
    if slot.includes(dt):
        console.print(f"[green]✓ {dt.format(fmt)} is within {slot}[/green]")
    else:
        console.print(f"[yellow]✗ {dt.format(fmt)} is outside {slot}[/yellow]")


@app.command()
def compare(
    start1: Annotated[str, typer.Argument(help="Start of the first slot")],
    finish1: Annotated[str, typer.Argument(help="Finish of the first slot")],
    start2: Annotated[str, typer.Argument(help="Start of the second slot")],
    finish2: Annotated[str, typer.Argument(help="Finish of the second slot")],
):
    """
    Show how two slots relate to each other.
    """
    first = _build_slot(start1, finish1)
    second = _build_slot(start2, finish2)

    table = Table(
        title=f"A = {first}   B = {second}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Predicate", style="bold yellow")
    table.add_column("Result")

    predicates = {
        "A includes B": first.includes(second),
        "B includes A": second.includes(first),
        "A overlaps B": first.overlaps(second),
        "A strictly includes B": first.strictly_includes(second),
        "A exactly matches B": first.exactly_matches(second),
        "A starts before B": first.starts_before(second),
        "A starts after B": first.starts_after(second),
        "A ends before B": first.ends_before(second),
        "A ends after B": first.ends_after(second),
        "A is empty": first.is_empty(),
        "B is empty": second.is_empty(),
    }
    for name, result in predicates.items():
        table.add_row(name, "[green]yes[/green]" if result else "[dim]no[/dim]")

    console.print()
    console.print(table)
    console.print(f"\nOrdering: A {ORDERING_SYMBOLS[first.compare_to(second)]} B\n")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]timeslot[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
