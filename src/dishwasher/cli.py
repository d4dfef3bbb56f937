# src/dishwasher/cli.py
"""Dishwasher Command Line Interface.

Entry point for the dishwasher CLI tool. Runs wash cycles against
simulated devices configured from a settings file.
"""

from __future__ import annotations

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from dishwasher import __version__
from dishwasher.contracts import FillLevel, ProgramConfiguration, RunResult, WashingProgram
from dishwasher.core.config import ApplianceSettings, SettingsFileError, load_settings, resolve_settings
from dishwasher.core.logging import configure_logging
from dishwasher.devices.simulated import SimulatedAppliance
from dishwasher.engine import DishWasher

__all__ = [
    "app",
]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

app = typer.Typer(
    name="dishwasher",
    help="Dishwasher: run wash cycles against simulated devices.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dishwasher version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Dishwasher: household dishwasher cycle control."""


def _load_settings_or_exit(settings_path: Path | None) -> ApplianceSettings:
    """Load settings from the file (if given), DISHWASHER_* variables and defaults.

    Raises:
        typer.Exit: With code 2 if the file is missing or the settings are invalid.
    """
    try:
        return load_settings(settings_path)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2) from None
    except SettingsFileError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2) from None
    except ValidationError as e:
        typer.secho("Settings validation failed:", fg=typer.colors.RED, err=True)
        for error in e.errors():
            loc = ".".join(str(part) for part in error["loc"])
            typer.secho(f"  - {loc}: {error['msg']}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2) from None


def _report(result: RunResult) -> None:
    if result.succeeded:
        typer.secho(
            f"Cycle completed: {result.status.value} in {result.run_minutes} minutes",
            fg=typer.colors.GREEN,
        )
        return
    detail = f" ({result.reason})" if result.reason else ""
    typer.secho(f"Cycle failed: {result.status.value}{detail}", fg=typer.colors.RED)


@app.command()
def run(
    program: WashingProgram = typer.Option(
        WashingProgram.ECO,
        "--program",
        "-p",
        case_sensitive=False,
        help="Washing program to run.",
    ),
    fill_level: FillLevel = typer.Option(
        FillLevel.FULL,
        "--fill-level",
        "-f",
        case_sensitive=False,
        help="Water fill level.",
    ),
    tablets: bool = typer.Option(
        False,
        "--tablets/--no-tablets",
        help="Use cleaning tablets (requires a clean enough filter).",
    ),
    settings_path: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Appliance settings YAML (door, filter, faults, logging).",
    ),
    json_logs: bool | None = typer.Option(
        None,
        "--json-logs/--console-logs",
        help="Override log output format from settings.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override log level from settings (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Run one wash cycle. Exits 1 unless the cycle succeeds."""
    settings = _load_settings_or_exit(settings_path)
    if log_level is not None and log_level.upper() not in _LOG_LEVELS:
        typer.secho(
            f"Error: invalid log level {log_level!r}, expected one of {', '.join(_LOG_LEVELS)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(2)

    configure_logging(
        json_output=settings.logging.json_output if json_logs is None else json_logs,
        level=log_level or settings.logging.level,
    )

    appliance = SimulatedAppliance.from_settings(settings)
    washer = DishWasher(
        water_pump=appliance.water_pump,
        engine=appliance.engine,
        dirt_filter=appliance.dirt_filter,
        door=appliance.door,
    )
    config = ProgramConfiguration(program=program, fill_level=fill_level, tablets_used=tablets)

    result = washer.start(config)
    _report(result)
    if not result.succeeded:
        raise typer.Exit(1)


@app.command()
def programs() -> None:
    """List washing programs with their durations and steps."""
    for program in WashingProgram:
        steps = " -> ".join(step.value for step in program.steps)
        typer.echo(f"{program.value:<10} {program.time_in_minutes:>4} min  {steps}")


@app.command("show-settings")
def show_settings(
    settings_path: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Appliance settings YAML.",
    ),
) -> None:
    """Print the resolved appliance settings (file + environment + defaults) as YAML."""
    settings = _load_settings_or_exit(settings_path)
    typer.echo(yaml.safe_dump(resolve_settings(settings), sort_keys=False).rstrip())


if __name__ == "__main__":
    app()
