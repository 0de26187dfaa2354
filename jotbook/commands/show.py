"""Default command: print a journal's entries."""

from __future__ import annotations

import argparse
import logging

from jotbook.commands.common import resolve_journal_name, unapplied_search_flags
from jotbook.config import Settings
from jotbook.journal import Journal

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace, *, settings: Settings) -> int:
    journal_name, entry_text = resolve_journal_name(settings, args.entry)
    timeformat = settings.timeformat(journal_name)
    journal = Journal.from_file(
        journal_name,
        settings.journal_file(journal_name),
        timeformat=timeformat,
        tagsymbols=settings.tagsymbols(journal_name),
    )

    if entry_text:
        logger.warning("Composing entries is not supported here; ignored %s words for journal %s", len(entry_text), journal_name)
        return 0

    ignored = unapplied_search_flags(args)
    if ignored:
        logger.debug("Search flags not applied when showing journal %s: %s", journal_name, ", ".join(ignored))

    if args.n > 0:
        journal = Journal(name=journal.name, entries=journal.entries[-args.n :])
    text = journal.to_text(timeformat, short=args.short)
    if text:
        print(text)
    logger.info("Shown %s entries from journal %s", len(journal.entries), journal_name)
    return 0
