"""
Translation strings for player fallback text.

Strings may contain markup; placeholder values are escaped on substitution.
A YAML/JSON file (PLAYERKIT_STRINGS_FILE) can override any string.
"""
from __future__ import annotations

import html
import re
from pathlib import Path
from typing import Dict, Mapping, Optional

from playerkit.core.overrides import load_mapping
from playerkit.core.settings import env_path

DEFAULT_STRINGS: Dict[str, str] = {
    "player_not_supported": (
        'Your browser does not support the HTML5 {player} element. '
        'Download <a href="{src}">{file}</a> instead.'
    ),
}


class Localizer:
    def __init__(self, strings: Optional[Mapping[str, str]] = None):
        self._strings: Dict[str, str] = dict(DEFAULT_STRINGS)
        self._strings.update(strings or {})

    @classmethod
    def from_env(cls, path: Optional[Path] = None) -> "Localizer":
        resolved = path if path is not None else env_path("PLAYERKIT_STRINGS_FILE")
        return cls(load_mapping(resolved, label="strings"))

    def get(self, key: str) -> str:
        # Unknown keys render as the key itself so missing strings stay visible.
        return self._strings.get(key, key)

    def __call__(self, key: str, placeholders: Mapping[str, str]) -> str:
        out = self.get(key)
        if not placeholders:
            return out
        # single pass: substituted values are never re-scanned
        pattern = re.compile("|".join(re.escape(p) for p in placeholders))
        return pattern.sub(lambda m: html.escape(str(placeholders[m.group(0)]), quote=True), out)
