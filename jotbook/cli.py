"""CLI entrypoint for jotbook."""

from __future__ import annotations

import argparse
import logging

import yaml

from jotbook.commands import listing, show
from jotbook.commands.common import load_settings, resolve_config_path
from jotbook.commands.parser import build_parser
from jotbook.errors import JournalError
from jotbook.logging_utils import configure_logging

logger = logging.getLogger(__name__)

LIST_COMMAND = "list"


def _dispatch(args: argparse.Namespace) -> int:
    config_path = resolve_config_path(args)
    settings = load_settings(args, config_path)
    if args.entry[:1] == [LIST_COMMAND]:
        return listing.run(args, settings=settings, config_path=config_path)
    return show.run(args, settings=settings)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    configure_logging(args.log_level)

    try:
        return _dispatch(args)
    except JournalError as exc:
        logger.error("%s: %s", exc.kind.value, exc)
    except (ValueError, yaml.YAMLError, OSError) as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
