"""
Command line entry point for nlcal.

    nlcal parse "Book meeting tomorrow at 10am"
    nlcal parse "Flight 2025-06-20" --json
    nlcal export "Dentist March 15 at 9:30am" --format ics --out ~/Downloads
    nlcal config set-export google
"""

import json
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from typer import Argument, Option, Typer

from nlcal import settings_manager
from nlcal.calendar_connector import export_event
from nlcal.display import render_result
from nlcal.logging_helper import LEVELS, Log
from nlcal.parser import parse_natural_language

app = Typer(help="Natural language calendar event parser")
config_app = Typer(help="Show and change nlcal settings")
app.add_typer(config_app, name="config")


def _reference_date(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got '{value}'", param_hint="--today")


@app.callback()
def _configure_logging() -> None:
    Log.configure(level=settings_manager.get_log_level())


@app.command("parse")
def parse(
    text: str = Argument(..., help="Event description, e.g. 'Team sync tomorrow at 3pm'"),
    today: Optional[str] = Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    output_json: bool = Option(False, "--json", help="Output as JSON"),
) -> None:
    """Parse TEXT and print the resulting event.

    Exits with status 1 when the text contains no recognizable date.
    """
    result = parse_natural_language(text, today=_reference_date(today))

    if output_json:
        print(json.dumps(result.to_dict()))
    else:
        for line in render_result(result):
            print(line)

    if result.warning is not None:
        raise typer.Exit(code=1)


@app.command("export")
def export(
    text: str = Argument(..., help="Event description"),
    export_format: Optional[str] = Option(None, "--format", "-f", help="ics or google (defaults to settings)"),
    out: Path = Option(Path("."), "--out", "-o", help="Directory for ICS files"),
    today: Optional[str] = Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
) -> None:
    """Parse TEXT and export it as an ICS file or a Google Calendar link."""
    if export_format is not None and export_format not in settings_manager.EXPORT_CHOICES:
        raise typer.BadParameter(f"must be one of {', '.join(settings_manager.EXPORT_CHOICES)}", param_hint="--format")

    result = parse_natural_language(text, today=_reference_date(today))
    if not result.events:
        for line in render_result(result):
            print(line)
        raise typer.Exit(code=1)

    exported = export_event(result.events[0], preference=export_format, directory=out)
    if exported is None:
        print("Error: export failed")
        raise typer.Exit(code=1)
    print(exported)


@config_app.command("show")
def config_show() -> None:
    """Print the current settings as JSON."""
    print(json.dumps(settings_manager.load_settings(), indent=2, sort_keys=True))


@config_app.command("set-export")
def config_set_export(
    value: str = Argument(..., help="ics or google"),
) -> None:
    """Set the default export target."""
    try:
        settings_manager.set_preferred_export(value)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=2)
    print(f"preferred_export = {value}")


@config_app.command("set-duration")
def config_set_duration(
    minutes: int = Argument(..., help="Default event length in minutes"),
) -> None:
    """Set the length used for events without an end time."""
    try:
        settings_manager.set_default_duration(minutes)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=2)
    print(f"default_duration_minutes = {minutes}")


@config_app.command("set-log-level")
def config_set_log_level(
    level: str = Argument(..., help=f"One of: {', '.join(LEVELS)}"),
) -> None:
    """Set how much nlcal logs to the terminal."""
    try:
        settings_manager.set_log_level(level)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=2)
    print(f"log_level = {level}")


def main():
    """Main entry point for the nlcal command."""
    app()


if __name__ == "__main__":
    main()
