"""Journal loading and text rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from jotbook.entry import DEFAULT_TAGSYMBOLS, DEFAULT_TIMEFORMAT, format_entry, parse_entries
from jotbook.models import Entry

logger = logging.getLogger(__name__)


@dataclass
class Journal:
    name: str
    entries: list[Entry] = field(default_factory=list)

    def sort(self) -> None:
        self.entries.sort(key=lambda entry: entry.time)

    @classmethod
    def from_lines(
        cls,
        name: str,
        lines: Iterable[str],
        *,
        timeformat: str = DEFAULT_TIMEFORMAT,
        tagsymbols: str = DEFAULT_TAGSYMBOLS,
    ) -> Journal:
        journal = cls(name=name, entries=list(parse_entries(lines, timeformat=timeformat, tagsymbols=tagsymbols)))
        journal.sort()
        return journal

    @classmethod
    def from_file(
        cls,
        name: str,
        path: str | Path,
        *,
        timeformat: str = DEFAULT_TIMEFORMAT,
        tagsymbols: str = DEFAULT_TAGSYMBOLS,
    ) -> Journal:
        journal_path = Path(path).expanduser()
        if not journal_path.exists():
            # No file yet means nothing has been written to this journal.
            logger.info("Journal file %s does not exist yet; treating %s as empty", journal_path, name)
            return cls(name=name)
        raw = journal_path.read_text()
        journal = cls.from_lines(name, raw.splitlines(), timeformat=timeformat, tagsymbols=tagsymbols)
        logger.debug("Loaded %s entries from %s", len(journal.entries), journal_path)
        return journal

    def to_text(self, timeformat: str = DEFAULT_TIMEFORMAT, *, short: bool = False) -> str:
        if short:
            return "\n".join(format_entry(entry, timeformat).splitlines()[0] for entry in self.entries)
        return "\n\n".join(format_entry(entry, timeformat) for entry in self.entries)
