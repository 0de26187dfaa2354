"""jotbook: plain-text journals with layered, per-journal settings."""

__version__ = "0.1.0"
