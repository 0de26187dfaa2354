"""Split raw journal text into dated entries."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from datetime import datetime

from jotbook.errors import ErrorKind, JournalError
from jotbook.models import Entry

DEFAULT_TIMEFORMAT = "%F %r"
DEFAULT_TAGSYMBOLS = "#@"

_TITLE_RE = re.compile(r"^[ \t]*\[(?P<time>[^\]]+)\]\s*(?P<title>.*)$")

# strptime does not understand these strftime shorthands.
_SHORTHANDS = {
    "%F": "%Y-%m-%d",
    "%T": "%H:%M:%S",
    "%R": "%H:%M",
    "%r": "%I:%M:%S %p",
    "%D": "%m/%d/%y",
}
_SHORTHAND_RE = re.compile(r"%[%FTRrD]")

logger = logging.getLogger(__name__)


def expand_timeformat(timeformat: str) -> str:
    return _SHORTHAND_RE.sub(lambda m: _SHORTHANDS.get(m.group(0), m.group(0)), timeformat)


def is_title_line(line: str) -> bool:
    return _TITLE_RE.match(line) is not None


def parse_entry(
    lines: Sequence[str],
    *,
    timeformat: str = DEFAULT_TIMEFORMAT,
    tagsymbols: str = DEFAULT_TAGSYMBOLS,
) -> Entry:
    if not lines:
        raise JournalError(ErrorKind.EMPTY_ENTRY)
    match = _TITLE_RE.match(lines[0])
    if match is None:
        raise JournalError(ErrorKind.INVALID_TITLE_LINE, lines[0])

    title = match.group("title")
    body = "\n".join(lines[1:]).strip()
    symbols = tuple(tagsymbols)
    tags = [word for word in body.split() if word.startswith(symbols)]
    time = datetime.strptime(match.group("time"), expand_timeformat(timeformat))
    return Entry(time=time, title=title, body=body, tags=tags, starred="*" in title)


def _parse_or_skip(lines: list[str], timeformat: str, tagsymbols: str) -> Entry | None:
    try:
        return parse_entry(lines, timeformat=timeformat, tagsymbols=tagsymbols)
    except (JournalError, ValueError) as exc:
        logger.debug("Dropping unparseable entry starting %r: %s", lines[0] if lines else "", exc)
        return None


def parse_entries(
    lines: Iterable[str],
    *,
    timeformat: str = DEFAULT_TIMEFORMAT,
    tagsymbols: str = DEFAULT_TAGSYMBOLS,
) -> Iterator[Entry]:
    """Lazily yield entries from ``lines`` in file order.

    A record starts at each bracketed-timestamp title line. Text that does
    not start with a title line ends the sequence before anything is
    yielded. Later records whose timestamp fails to parse are skipped.
    """
    record: list[str] = []
    for line in lines:
        if not record and not is_title_line(line):
            logger.debug("Journal text does not start with a title line: %r", line)
            return
        if record and is_title_line(line):
            entry = _parse_or_skip(record, timeformat, tagsymbols)
            if entry is not None:
                yield entry
            record = []
        record.append(line)

    if record:
        entry = _parse_or_skip(record, timeformat, tagsymbols)
        if entry is not None:
            yield entry


def format_entry(entry: Entry, timeformat: str = DEFAULT_TIMEFORMAT) -> str:
    header = f"[{entry.time.strftime(expand_timeformat(timeformat))}] {entry.title}"
    if not entry.body:
        return header
    return f"{header}\n{entry.body}"
