"""Shared fixtures: a fixed reference date, isolated settings and log state."""

from datetime import date

import pytest

from nlcal import logging_helper


@pytest.fixture
def today():
    """Wednesday, 11 June 2025."""
    return date(2025, 6, 11)


@pytest.fixture(autouse=True)
def nlcal_home(tmp_path, monkeypatch):
    """Point settings at a throwaway directory for every test."""
    home = tmp_path / "nlcal_home"
    monkeypatch.setenv("NLCAL_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def restore_log_state():
    level = logging_helper._level
    yield
    if logging_helper._log_file is not None:
        logging_helper._log_file.close()
    logging_helper._level = level
    logging_helper._log_file = None
    logging_helper._log_file_path = None
