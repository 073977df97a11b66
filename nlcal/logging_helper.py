"""
Logging helper module for terminal-first logging.
Output goes to stdout with formatted prefixes, and to a log file once a log
directory has been configured.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LEVELS = ("info", "warn", "error", "off")

_level = os.environ.get("NLCAL_LOG_LEVEL", "warn").lower()
if _level not in LEVELS:
    _level = "warn"

_log_file_path: Optional[Path] = None
_log_file = None


def _enabled(level: str) -> bool:
    return LEVELS.index(level) >= LEVELS.index(_level)


def _log(message: str):
    """Write message to stdout and, if configured, the log file."""
    print(message, file=sys.stdout)
    if _log_file is not None:
        _log_file.write(message + '\n')
        _log_file.flush()


class Log:
    """Simple logging class that outputs to stdout and log file with formatted prefixes."""

    @staticmethod
    def configure(level: Optional[str] = None, log_dir: Optional[Path] = None):
        """
        Set the minimum level that gets written and optionally start a log file.

        Args:
            level: One of 'info', 'warn', 'error', 'off'
            log_dir: Directory for a timestamped log file
        """
        global _level, _log_file, _log_file_path
        if level is not None:
            level = level.lower()
            if level not in LEVELS:
                raise ValueError(f"Invalid log level: {level}")
            _level = level
        if log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            if _log_file is not None:
                _log_file.close()
            _log_file_path = log_dir / f"nlcal_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            _log_file = open(_log_file_path, 'a', encoding='utf-8')

    @staticmethod
    def level() -> str:
        return _level

    @staticmethod
    def section(title: str):
        """Print a section header: blank line + '===== TITLE ====='"""
        if _enabled("info"):
            _log("")
            _log(f"===== {title} =====")

    @staticmethod
    def info(message: str):
        """Print an info message: '[INFO] message'"""
        if _enabled("info"):
            _log(f"[INFO] {message}")

    @staticmethod
    def warn(message: str):
        """Print a warning message: '[WARN] message'"""
        if _enabled("warn"):
            _log(f"[WARN] {message}")

    @staticmethod
    def error(message: str):
        """Print an error message: '[ERROR] message'"""
        if _enabled("error"):
            _log(f"[ERROR] {message}")

    @staticmethod
    def kv(pairs: dict):
        """
        Print key-value pairs: '[KV] key=value | key2=value2'

        Args:
            pairs: Dictionary of key-value pairs to print
        """
        if _enabled("info"):
            kv_string = " | ".join([f"{k}={v}" for k, v in pairs.items()])
            _log(f"[KV] {kv_string}")

    @staticmethod
    def get_log_path() -> Optional[str]:
        """Get the path to the current log file, if one is open."""
        return str(_log_file_path) if _log_file_path else None
