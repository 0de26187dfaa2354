"""Default config and journal locations (XDG base directories)."""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "jotbook"
CONFIG_FILENAME = "jotbook.yaml"
JOURNAL_FILENAME = "journal.txt"


def config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_NAME


def data_dir() -> Path:
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / APP_NAME


def default_config_path() -> Path:
    override = os.environ.get("JOTBOOK_CONFIG")
    if override:
        return Path(override).expanduser()
    return config_dir() / CONFIG_FILENAME


def default_journal_file() -> Path:
    return data_dir() / JOURNAL_FILENAME
