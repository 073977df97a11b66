"""Tests for the nlcal command line interface."""

import json

from typer.testing import CliRunner

from nlcal import UNRECOGNIZED_WARNING, settings_manager
from nlcal.app import app

runner = CliRunner()


def test_parse_prints_event() -> None:
    result = runner.invoke(app, ["parse", "Book meeting tomorrow at 10am", "--today", "2025-06-11"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["Book meeting", "2025-06-12 · 10:00"]


def test_parse_json() -> None:
    result = runner.invoke(app, ["parse", "Call after 3 days at 4pm to 5pm", "--today", "2025-06-11", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "events": [{"title": "Call", "date": "2025-06-14", "time": "16:00", "endTime": "17:00"}],
    }


def test_parse_unrecognized_exits_1() -> None:
    result = runner.invoke(app, ["parse", "gibberish text without a date"])

    assert result.exit_code == 1
    assert UNRECOGNIZED_WARNING in result.output


def test_parse_blank_is_not_an_error() -> None:
    result = runner.invoke(app, ["parse", "   "])

    assert result.exit_code == 0
    assert "No events found." in result.output


def test_parse_rejects_bad_today() -> None:
    result = runner.invoke(app, ["parse", "Meeting tomorrow", "--today", "11/06/2025"])

    assert result.exit_code == 2


def test_export_ics(tmp_path) -> None:
    result = runner.invoke(
        app,
        ["export", "Flight 2025-06-20", "--format", "ics", "--out", str(tmp_path)],
    )

    assert result.exit_code == 0
    assert (tmp_path / "NLCal_Flight_20250620.ics").exists()


def test_export_google() -> None:
    result = runner.invoke(app, ["export", "Flight 2025-06-20", "--format", "google"])

    assert result.exit_code == 0
    assert "dates=20250620%2F20250621" in result.output


def test_export_unrecognized_exits_1(tmp_path) -> None:
    result = runner.invoke(app, ["export", "no date here", "--out", str(tmp_path)])

    assert result.exit_code == 1
    assert list(tmp_path.iterdir()) == []


def test_export_rejects_unknown_format() -> None:
    result = runner.invoke(app, ["export", "Flight 2025-06-20", "--format", "outlook"])

    assert result.exit_code == 2


def test_config_commands() -> None:
    assert runner.invoke(app, ["config", "set-export", "google"]).exit_code == 0
    assert runner.invoke(app, ["config", "set-duration", "30"]).exit_code == 0
    assert runner.invoke(app, ["config", "set-log-level", "error"]).exit_code == 0

    shown = runner.invoke(app, ["config", "show"])

    assert shown.exit_code == 0
    assert json.loads(shown.output) == {
        "preferred_export": "google",
        "default_duration_minutes": 30,
        "log_level": "error",
    }
    assert settings_manager.get_preferred_export() == "google"


def test_config_rejects_invalid_value() -> None:
    result = runner.invoke(app, ["config", "set-export", "outlook"])

    assert result.exit_code == 2
    assert "Invalid export preference" in result.output
