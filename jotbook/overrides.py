"""Turn ``--config-override KEY VALUE`` pairs into a nested settings patch."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from pydantic import ValidationError

from jotbook.config import Settings
from jotbook.errors import ErrorKind, JournalError

_TRUE_LITERALS = frozenset({"true", "1"})
_FALSE_LITERALS = frozenset({"false", "0"})

# Dotted prefixes that accumulate into one nested table, keyed by the suffix.
_TABLE_PREFIXES = {
    "color.": "colors",
    "colors.": "colors",
    "journals.": "journals",
}


def _coerce_bool(key: str, raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_LITERALS:
        return True
    if lowered in _FALSE_LITERALS:
        return False
    raise JournalError(ErrorKind.INVALID_COERCION, f"{key}={raw!r} is not a boolean")


def _coerce_int(key: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise JournalError(ErrorKind.INVALID_COERCION, f"{key}={raw!r} is not an integer") from None


def _coerce_linewrap(key: str, raw: str) -> int | str:
    if raw == "auto":
        return raw
    return _coerce_int(key, raw)


def _coerce_template(_key: str, raw: str) -> bool | str:
    if raw.lower() == "false":
        return False
    return raw


_COERCERS: dict[str, Callable[[str, str], Any]] = {
    "encrypt": _coerce_bool,
    "highlight": _coerce_bool,
    "default_hour": _coerce_int,
    "default_minute": _coerce_int,
    "linewrap": _coerce_linewrap,
    "template": _coerce_template,
}


def _apply_pair(patch: dict[str, Any], key: str, raw: str) -> None:
    for prefix, table in _TABLE_PREFIXES.items():
        if key.startswith(prefix):
            name = key[len(prefix) :]
            if not name:
                raise JournalError(ErrorKind.MALFORMED_OVERRIDE, f"missing name after '{prefix}'")
            nested = patch.setdefault(table, {})
            nested[name] = raw
            return

    coerce = _COERCERS.get(key)
    patch[key] = coerce(key, raw) if coerce else raw


def collect(tokens: Sequence[str]) -> dict[str, Any]:
    """Build a patch from flat ``key, value, key, value`` tokens.

    The patch is checked against the config-file schema before it is
    returned, so unknown keys and ill-typed values fail here rather than
    after merging.
    """
    if len(tokens) % 2:
        raise JournalError(ErrorKind.MALFORMED_OVERRIDE, f"expected KEY VALUE pairs, got {len(tokens)} tokens")

    patch: dict[str, Any] = {}
    for key, raw in zip(tokens[::2], tokens[1::2]):
        _apply_pair(patch, key, raw)

    try:
        Settings.from_document(patch)
    except ValidationError as exc:
        raise JournalError(ErrorKind.MALFORMED_OVERRIDE, str(exc)) from exc
    return patch
