"""
User settings for the nlcal command line tools.

Tracks the preferred export target (ICS file or Google Calendar link), the
default duration for events with a start time but no end time, and the log
level. Settings are persisted as JSON under $NLCAL_HOME (default ~/.nlcal).
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Literal, TypedDict

from nlcal.logging_helper import LEVELS, Log

ExportPreference = Literal["ics", "google"]
EXPORT_CHOICES = ("ics", "google")


class SettingsSchema(TypedDict, total=False):
    preferred_export: ExportPreference
    default_duration_minutes: int
    log_level: str


DEFAULT_SETTINGS: SettingsSchema = {
    "preferred_export": "ics",
    "default_duration_minutes": 60,
    "log_level": "warn",
}


def settings_dir() -> Path:
    return Path(os.environ.get("NLCAL_HOME") or Path.home() / ".nlcal")


def settings_file() -> Path:
    return settings_dir() / "settings.json"


def _ensure_settings_dir() -> None:
    try:
        settings_dir().mkdir(parents=True, exist_ok=True)
    except OSError as err:
        Log.warn(f"Unable to create settings directory {settings_dir()}: {err}")


def load_settings() -> SettingsSchema:
    """
    Load settings from disk, falling back to defaults if anything fails.
    """
    path = settings_file()
    if not path.exists():
        Log.info(f"Settings file not found, using defaults: {path}")
        return DEFAULT_SETTINGS.copy()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("Settings data is not a JSON object")
    except (OSError, ValueError) as err:
        Log.warn(f"Failed to read settings file ({path}): {err}")
        return DEFAULT_SETTINGS.copy()

    merged: SettingsSchema = DEFAULT_SETTINGS.copy()
    # Merge only known keys
    for key in DEFAULT_SETTINGS:
        if key in data:
            merged[key] = data[key]  # type: ignore[literal-required]
    return merged


def save_settings(settings: SettingsSchema) -> None:
    """
    Persist settings to disk.
    """
    _ensure_settings_dir()
    path = settings_file()
    try:
        path.write_text(
            json.dumps(settings, indent=2, sort_keys=True),
            encoding="utf-8",
        )
    except OSError as err:
        Log.warn(f"Failed to write settings file ({path}): {err}")


def get_preferred_export() -> ExportPreference:
    preferred = load_settings().get("preferred_export", DEFAULT_SETTINGS["preferred_export"])
    if preferred not in EXPORT_CHOICES:
        Log.warn(f"Invalid preferred_export value '{preferred}', defaulting to ics")
        preferred = "ics"
    return preferred


def set_preferred_export(value: ExportPreference) -> None:
    if value not in EXPORT_CHOICES:
        raise ValueError(f"Invalid export preference: {value}")
    settings = load_settings()
    settings["preferred_export"] = value
    save_settings(settings)
    Log.info(f"Saved preferred export setting: {value}")


def get_default_duration() -> int:
    minutes = load_settings().get("default_duration_minutes", DEFAULT_SETTINGS["default_duration_minutes"])
    if not isinstance(minutes, int) or isinstance(minutes, bool) or minutes <= 0:
        Log.warn(f"Invalid default_duration_minutes value '{minutes}', defaulting to 60")
        minutes = 60
    return minutes


def set_default_duration(minutes: int) -> None:
    if minutes <= 0:
        raise ValueError(f"Invalid default duration: {minutes}")
    settings = load_settings()
    settings["default_duration_minutes"] = minutes
    save_settings(settings)
    Log.info(f"Saved default duration setting: {minutes} minutes")


def get_log_level() -> str:
    level = load_settings().get("log_level", DEFAULT_SETTINGS["log_level"])
    if level not in LEVELS:
        Log.warn(f"Invalid log_level value '{level}', defaulting to warn")
        level = "warn"
    return level


def set_log_level(level: str) -> None:
    if level not in LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    settings = load_settings()
    settings["log_level"] = level
    save_settings(settings)
    Log.info(f"Saved log level setting: {level}")
