"""Logging configuration helpers."""

from __future__ import annotations

import logging
import sys


def configure_logging(level: str = "WARNING") -> None:
    # stdout carries journal output; diagnostics go to stderr.
    normalized = level.upper()
    logging.basicConfig(
        level=getattr(logging, normalized, logging.WARNING),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
