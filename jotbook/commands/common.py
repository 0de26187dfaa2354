"""Shared helpers for CLI command modules."""

from __future__ import annotations

import argparse
import logging
from itertools import chain
from pathlib import Path

from jotbook.bootstrap import load_or_bootstrap
from jotbook.config import DEFAULT_JOURNAL, Settings
from jotbook.errors import ErrorKind, JournalError
from jotbook.overrides import collect
from jotbook.paths import default_config_path

logger = logging.getLogger(__name__)


def add_config_flags(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--config-file", help="Config YAML (created with defaults when missing)")
    cmd.add_argument(
        "--config-override",
        nargs=2,
        action="append",
        metavar=("KEY", "VALUE"),
        help="Override one setting for this run, e.g. --config-override color.title green",
    )


def add_search_flags(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--on", help="Show entries on this date")
    cmd.add_argument("--today-in-history", action="store_true", help="Show entries written on this day in past years")
    cmd.add_argument("--month", help="Show entries in this month")
    cmd.add_argument("--day", help="Show entries on this day of the month")
    cmd.add_argument("--year", help="Show entries in this year")
    cmd.add_argument("--from", dest="from_date", help="Show entries on or after this date")
    cmd.add_argument("--to", dest="to_date", help="Show entries on or before this date")
    cmd.add_argument("--contains", help="Show entries containing this text")
    cmd.add_argument("--and", dest="and_", action="store_true", help="Require all tag filters to match")
    cmd.add_argument("--starred", action="store_true", help="Show only starred entries")
    cmd.add_argument("--tagged", action="store_true", help="Show only tagged entries")
    cmd.add_argument("-n", "--n", dest="n", type=int, default=0, help="Show only the last N entries (0 = all)")
    cmd.add_argument("--not", dest="not_", action="append", help="Exclude entries with this tag")
    cmd.add_argument("--edit", action="store_true", help="Open selected entries in the editor")
    cmd.add_argument("--delete", action="store_true", help="Interactively delete selected entries")
    cmd.add_argument("--change-time", metavar="DATE", help="Change the time of selected entries")
    cmd.add_argument("--format", metavar="TYPE", help="Display format; also sets display_format for this run")
    cmd.add_argument("--file", metavar="FILENAME", help="Write output to a file instead of stdout")
    cmd.add_argument("--tags", action="store_true", help="List tags with their counts")
    cmd.add_argument("--short", action="store_true", help="Show only entry title lines")


# Filter and edit flags that are parsed for downstream commands but not applied when showing.
UNAPPLIED_SEARCH_FLAGS = (
    "on",
    "today_in_history",
    "month",
    "day",
    "year",
    "from_date",
    "to_date",
    "contains",
    "and_",
    "starred",
    "tagged",
    "not_",
    "edit",
    "delete",
    "change_time",
    "file",
    "tags",
)


def unapplied_search_flags(args: argparse.Namespace) -> list[str]:
    return [name for name in UNAPPLIED_SEARCH_FLAGS if getattr(args, name, None)]


def resolve_config_path(args: argparse.Namespace) -> Path:
    if args.config_file:
        return Path(args.config_file).expanduser()
    return default_config_path()


def override_tokens(args: argparse.Namespace) -> list[str]:
    tokens = list(chain.from_iterable(args.config_override or []))
    if args.format:
        tokens.extend(["display_format", args.format])
    return tokens


def load_settings(args: argparse.Namespace, config_path: Path) -> Settings:
    return load_or_bootstrap(config_path, collect(override_tokens(args)))


def resolve_journal_name(settings: Settings, tokens: list[str]) -> tuple[str, list[str]]:
    """Split a leading journal name off the positional tokens.

    A first token that is not a configured journal is kept as entry text
    and the default journal is used instead.
    """
    if not tokens:
        return DEFAULT_JOURNAL, []
    candidate = tokens[0]
    try:
        settings.journal_settings(candidate)
    except JournalError as exc:
        if exc.kind != ErrorKind.MISSING_JOURNAL_CONFIG:
            raise
        logger.debug("%r is not a configured journal; treating it as entry text", candidate)
        return DEFAULT_JOURNAL, list(tokens)
    return candidate, list(tokens[1:])
