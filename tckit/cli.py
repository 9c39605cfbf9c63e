"""
tckit.cli - Typer CLI entry point.

Provides subcommands for converting between seconds and SMPTE timecode
and for validating timecode strings.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from tckit import __version__
from tckit.config import (
    CONFIG_FILENAME,
    TckitConfig,
    create_default_config,
    find_config_file,
    load_config,
    write_config,
)
from tckit.convert import seconds_to_timecode, short_timecode, timecode_to_seconds
from tckit.exceptions import ConfigError, ParameterError
from tckit.logging import configure_logging
from tckit.utils import format_duration
from tckit.validation import format_validation_report, validate_timecode

app = typer.Typer(
    name="tckit",
    help="SMPTE timecode toolkit.\n\n"
    "Converts between seconds and broadcast timecode, including 29.97 and "
    "59.94 fps drop-frame timecode.",
    add_completion=False,
)
console = Console()

FPS_HELP = f"Frame rate (falls back to frame_rate in {CONFIG_FILENAME})"
DROP_HELP = "Force drop-frame on or off (default: auto-detect)"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"tckit {__version__}")
        raise typer.Exit()


def print_advisory(message: str) -> None:
    console.print(f"[yellow]Warning: {message}[/yellow]")


def load_project_config() -> TckitConfig:
    """Load tckit.yaml from the cwd or a parent, or return defaults."""
    config_path = find_config_file()
    if not config_path:
        return TckitConfig()
    try:
        return load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def resolve_frame_rate(fps: float | None, config: TckitConfig) -> float:
    if fps is not None:
        return fps
    if config.frame_rate is not None:
        return config.frame_rate
    console.print(
        f"[red]Error: No frame rate given. "
        f"Pass --fps or set frame_rate in {CONFIG_FILENAME}[/red]"
    )
    raise typer.Exit(1)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """tckit - SMPTE timecode toolkit."""
    configure_logging(verbose or load_project_config().verbose)


@app.command("init")
def init_config(
    fps: float | None = typer.Option(None, "--fps", "-r", help="Default frame rate"),
    path: str = typer.Option(".", "--path", "-d", help="Directory to write the config in"),
) -> None:
    """Create a tckit.yaml with default settings."""
    config_path = Path(path) / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[red]Error: '{config_path}' already exists[/red]")
        raise typer.Exit(1)

    if fps is not None and fps <= 0:
        console.print(f"[red]Error: Frame rate must be positive, got {fps}[/red]")
        raise typer.Exit(1)

    write_config(create_default_config(fps), config_path)
    console.print(f"[green]✓[/green] Created {config_path}")


@app.command("to-timecode")
def to_timecode_cmd(
    seconds: float = typer.Argument(..., help="Duration in seconds"),
    fps: float | None = typer.Option(None, "--fps", "-r", help=FPS_HELP),
    drop: bool | None = typer.Option(None, "--drop/--no-drop", help=DROP_HELP),
) -> None:
    """Convert seconds to timecode."""
    config = load_project_config()
    frame_rate = resolve_frame_rate(fps, config)
    drop_frame = drop if drop is not None else config.drop_frame

    try:
        timecode = seconds_to_timecode(seconds, frame_rate, drop_frame, advise=print_advisory)
    except ParameterError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(timecode)


@app.command("to-seconds")
def to_seconds_cmd(
    timecode: str = typer.Argument(..., help="Timecode or time string (hh:mm:ss:ff, mm:ss, ...)"),
    fps: float | None = typer.Option(None, "--fps", "-r", help=FPS_HELP),
) -> None:
    """Convert timecode to seconds."""
    config = load_project_config()
    frame_rate = resolve_frame_rate(fps, config)

    try:
        seconds = timecode_to_seconds(timecode, frame_rate, advise=print_advisory)
    except ParameterError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"{seconds:g} [dim]({format_duration(seconds)})[/dim]")


@app.command("short")
def short_cmd(
    time: str = typer.Argument(..., help="Seconds or a timecode string"),
    fps: float | None = typer.Option(None, "--fps", "-r", help=FPS_HELP),
    drop: bool | None = typer.Option(None, "--drop/--no-drop", help=DROP_HELP),
) -> None:
    """Print timecode without the frame field (hh:mm:ss)."""
    config = load_project_config()
    frame_rate = resolve_frame_rate(fps, config)
    drop_frame = drop if drop is not None else config.drop_frame

    value: str | float = time
    try:
        value = float(time)
    except ValueError:
        pass

    try:
        result = short_timecode(value, frame_rate, drop_frame, advise=print_advisory)
    except ParameterError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(result)


@app.command("validate")
def validate_cmd(
    timecode: str = typer.Argument(..., help="Timecode to validate"),
    fps: float | None = typer.Option(None, "--fps", "-r", help="Frame rate to validate against"),
    plain: bool = typer.Option(False, "--plain", help="Print a plain-text report"),
) -> None:
    """Validate a timecode string."""
    config = load_project_config()
    frame_rate = fps if fps is not None else config.frame_rate

    result = validate_timecode(timecode, frame_rate)

    if plain:
        report = format_validation_report(timecode, result)
        console.print(report, markup=False, highlight=False, soft_wrap=True)
        if not result.valid:
            raise typer.Exit(1)
        return

    table = Table(title=f"Timecode {timecode}")
    table.add_column("Check", style="cyan")
    table.add_column("Result")

    table.add_row("Format", result.format or "-")
    table.add_row("Frame rate", f"{frame_rate:g} fps" if frame_rate is not None else "-")
    if result.components:
        c = result.components
        table.add_row("Hours", str(c.hours))
        table.add_row("Minutes", str(c.minutes))
        table.add_row("Seconds", str(c.seconds))
        table.add_row("Frames", str(c.frames))
    for error in result.errors:
        table.add_row("Error", f"[red]{error}[/red]")
    for warning in result.warnings:
        table.add_row("Warning", f"[yellow]{warning}[/yellow]")

    console.print(table)

    if not result.valid:
        console.print("[red]✗ Invalid timecode[/red]")
        raise typer.Exit(1)
    console.print("[green]✓[/green] Valid timecode")
