"""Config directory resolution and small JSON helpers."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

APP_NAME = "humanfmt"


def get_config_dir() -> Path:
    override = os.environ.get("HUMANFMT_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    base = os.environ.get("XDG_CONFIG_HOME") or "~/.config"
    return Path(base).expanduser() / APP_NAME


def load_json(path: Path, default: Any = None) -> Any:
    """Return the parsed file, or `default` when it doesn't exist.

    Malformed JSON is not swallowed: `json.JSONDecodeError` propagates.
    """
    if not path.exists():
        return default
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)

