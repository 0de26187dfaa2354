"""CLI parser construction."""

from __future__ import annotations

import argparse

from jotbook.commands.common import add_config_flags, add_search_flags


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jotbook", description="Plain-text journal with per-journal settings")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument(
        "entry",
        nargs="*",
        help="Optional journal name followed by entry text; 'list' shows configured journals",
    )
    add_config_flags(parser)
    add_search_flags(parser)
    return parser
