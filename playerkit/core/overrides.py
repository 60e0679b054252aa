"""
Loader for optional YAML/JSON override files.

Preferences, translation strings and the stored-file manifest can all be
supplied as a file so a site can be reconfigured without code changes.
A missing, unreadable or malformed file yields an empty result and a
warning; built-in defaults stay in effect.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

_log = logging.getLogger("playerkit.overrides")


def load_document(path: Optional[Path], *, label: str) -> Any:
    """Parse `path` as JSON, falling back to YAML. Returns None on any failure."""
    if path is None or not Path(path).exists():
        return None

    resolved = Path(path)
    try:
        raw_text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        _log.warning("Cannot read %s file %s: %s", label, resolved, exc)
        return None

    try:
        return json.loads(raw_text)
    except json.JSONDecodeError:
        pass

    try:
        return yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        _log.warning("Failed to parse %s file %s as JSON or YAML: %s", label, resolved, exc)
        return None


def load_mapping(path: Optional[Path], *, label: str) -> dict[str, str]:
    """Flat string mapping from an override file ({} when absent or invalid)."""
    data = load_document(path, label=label)
    if data is None:
        return {}

    if not isinstance(data, dict):
        _log.warning("%s file %s must be a flat mapping, got %s", label, path, type(data).__name__)
        return {}

    out: dict[str, str] = {}
    for key, value in data.items():
        if value is None or isinstance(value, (dict, list)):
            _log.warning("Skipping invalid %s entry %r", label, key)
            continue
        # YAML turns 0/1 into ints and yes/no into bools; keep the string form
        if isinstance(value, bool):
            value = "1" if value else "0"
        out[str(key)] = str(value)

    if out:
        _log.info("Loaded %d %s overrides from %s", len(out), label, path)
    return out
