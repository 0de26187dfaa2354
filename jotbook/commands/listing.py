"""List configured journals and their files."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import yaml

from jotbook.config import Settings


def run(args: argparse.Namespace, *, settings: Settings, config_path: Path) -> int:
    payload = {
        "config_path": str(config_path),
        "journals": {name: settings.journal_file(name) for name in settings.journal_names()},
    }
    output_format = args.format or "yaml"
    if output_format == "json":
        print(json.dumps(payload, indent=2))
        return 0
    if output_format in ("yaml", "yml"):
        print(yaml.safe_dump(payload, sort_keys=False, default_flow_style=False), end="")
        return 0
    raise ValueError(f"list supports --format json or yaml, got {output_format}")
