"""Load the config file, creating a default one on first run."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jotbook.config import DEFAULT_JOURNAL, Settings, dump_settings, load_effective_settings, parse_document
from jotbook.paths import default_journal_file

logger = logging.getLogger(__name__)


def write_default_config(config_path: Path, journal_path: str | Path) -> str:
    """Persist the built-in settings with a single default journal and return the YAML text."""
    settings = Settings.default().with_journal(DEFAULT_JOURNAL, str(journal_path))
    text = dump_settings(settings)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(text)
    logger.info("Created default config at %s (journal=%s)", config_path, journal_path)
    return text


def load_or_bootstrap(
    path: str | Path,
    cli_patch: dict[str, Any] | None = None,
    *,
    default_journal: str | Path | None = None,
) -> Settings:
    config_path = Path(path)
    if config_path.exists():
        text = config_path.read_text()
    else:
        journal_path = default_journal if default_journal is not None else default_journal_file()
        text = write_default_config(config_path, journal_path)

    document = parse_document(text, source=str(config_path))
    return load_effective_settings(document, runtime_override=cli_patch)
