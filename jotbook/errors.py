"""Error taxonomy shared by settings resolution and entry parsing."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_ENTRY = "EmptyEntry"
    INVALID_TITLE_LINE = "InvalidTitleLine"
    MISSING_JOURNAL_CONFIG = "MissingJournalConfig"
    TOP_LEVEL_JOURNAL_CONFIG = "TopLevelJournalConfig"
    INVALID_JRNL_OVERRIDE_CONFIG = "InvalidJrnlOverrideConfig"
    MALFORMED_OVERRIDE = "MalformedOverride"
    INVALID_COERCION = "InvalidCoercion"


_MESSAGES = {
    ErrorKind.EMPTY_ENTRY: "entry is empty",
    ErrorKind.INVALID_TITLE_LINE: "failed to parse entry title",
    ErrorKind.MISSING_JOURNAL_CONFIG: "no such journal configured",
    ErrorKind.TOP_LEVEL_JOURNAL_CONFIG: "illegal 'journal' key found at top level",
    ErrorKind.INVALID_JRNL_OVERRIDE_CONFIG: "invalid journal-specific config",
    ErrorKind.MALFORMED_OVERRIDE: "malformed config override",
    ErrorKind.INVALID_COERCION: "invalid config override value",
}


class JournalError(RuntimeError):
    """Recoverable domain error; callers branch on ``kind``."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = _MESSAGES[kind]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
